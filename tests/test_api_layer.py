"""Tests for API layer envelopes and guardrails."""

import ast
from pathlib import Path

import pytest

from blueprints.api.blueprints_api import BlueprintsApi
from blueprints.api.models import ApiResponse
from blueprints.filters import UndersamplingFilter
from blueprints.persistence import InMemoryBlueprintStore, sample_blueprints
from blueprints.services import BlueprintService

BASE = "/api/v1/blueprints"


@pytest.fixture
def api():
    store = InMemoryBlueprintStore(sample_blueprints())
    return BlueprintsApi(BlueprintService(store))


def test_api_layer_has_no_sqlalchemy_imports():
    """API modules talk to the service only, never to the database layer."""
    api_dir = Path(__file__).resolve().parents[1] / "src" / "blueprints" / "api"
    violations = []
    for api_file in sorted(api_dir.glob("*.py")):
        tree = ast.parse(api_file.read_text(encoding="utf-8"), filename=str(api_file))
        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                names = [alias.name for alias in node.names]
            elif isinstance(node, ast.ImportFrom):
                names = [node.module or ""]
            else:
                continue
            for name in names:
                if "sqlalchemy" in name or "database" in name:
                    violations.append(f"{api_file.name}:{node.lineno} imports {name}")
    assert not violations, "API layer has database imports:\n" + "\n".join(violations)


def test_envelope_serializes_links_with_underscore():
    response = ApiResponse.ok({"a": 1}).with_links({"self": BASE})
    assert response.to_dict() == {
        "code": 200,
        "message": "execute ok",
        "data": {"a": 1},
        "_links": {"self": BASE},
    }


@pytest.mark.parametrize(
    "factory,code,message",
    [
        (lambda: ApiResponse.created(None), 201, "resource created"),
        (lambda: ApiResponse.accepted(), 202, "update accepted"),
        (lambda: ApiResponse.bad_request("bad"), 400, "bad"),
        (lambda: ApiResponse.not_found("gone"), 404, "gone"),
        (lambda: ApiResponse.conflict("dup"), 409, "dup"),
    ],
)
def test_envelope_factories(factory, code, message):
    response = factory()
    assert (response.code, response.message, response.data, response.links) == (code, message, None, {})


def test_list_blueprints_returns_sample_data(api):
    body = api.list_blueprints().to_dict()

    assert body["code"] == 200
    assert body["message"] == "execute ok"
    assert len(body["data"]) == 3
    assert body["_links"] == {"self": BASE}


def test_list_by_author(api):
    body = api.list_by_author("john").to_dict()

    assert body["code"] == 200
    assert [bp["name"] for bp in body["data"]] == ["garage", "house"]
    assert body["_links"]["self"].endswith("/john")
    assert body["_links"]["all-blueprints"] == BASE


def test_list_by_unknown_author_is_404(api):
    body = api.list_by_author("nobody").to_dict()
    assert body["code"] == 404
    assert body["data"] is None
    assert body["message"] == "No blueprints for author: nobody"


def test_get_blueprint_with_links(api):
    body = api.get_blueprint("john", "house").to_dict()

    assert body["code"] == 200
    assert body["data"]["author"] == "john"
    assert body["data"]["name"] == "house"
    assert len(body["data"]["points"]) == 4
    assert body["data"]["points"][0] == {"x": 0, "y": 0}
    assert body["_links"] == {
        "self": f"{BASE}/john/house",
        "add-point": f"{BASE}/john/house/points",
        "author-blueprints": f"{BASE}/john",
        "all-blueprints": BASE,
    }


def test_get_unknown_blueprint_is_404(api):
    assert api.get_blueprint("john", "missing").code == 404


def test_create_blueprint_is_201(api):
    body = api.create_blueprint({
        "author": "test",
        "name": "new_bp",
        "points": [{"x": 1, "y": 2}, {"x": 3, "y": 4}],
    }).to_dict()

    assert body["code"] == 201
    assert body["message"] == "resource created"
    assert body["data"]["author"] == "test"
    assert body["_links"]["self"].endswith("/test/new_bp")
    assert body["_links"]["add-point"].endswith("/test/new_bp/points")
    assert api.get_blueprint("test", "new_bp").code == 200


def test_create_duplicate_is_409(api):
    body = api.create_blueprint({"author": "john", "name": "house", "points": [{"x": 0, "y": 0}]}).to_dict()
    assert body["code"] == 409
    assert body["data"] is None


@pytest.mark.parametrize("payload", [{"author": "", "name": "test", "points": []}, {"name": "test"}])
def test_create_with_blank_author_is_400(api, payload):
    response = api.create_blueprint(payload)
    assert response.code == 400
    assert response.message == "author and name are required"


def test_add_point_is_202(api):
    body = api.add_point("john", "house", 99, 88).to_dict()

    assert body["code"] == 202
    assert body["message"] == "update accepted"
    assert body["_links"] == {"blueprint": f"{BASE}/john/house", "all-blueprints": BASE}
    assert api.get_blueprint("john", "house").data.points[-1].x == 99


def test_add_point_to_unknown_blueprint_is_404(api):
    assert api.add_point("john", "missing", 1, 1).code == 404


def test_reads_go_through_active_filter():
    store = InMemoryBlueprintStore(sample_blueprints())
    api = BlueprintsApi(BlueprintService(store, UndersamplingFilter()), base_url="http://localhost:8080/api/v1/blueprints/")

    body = api.get_blueprint("john", "house").to_dict()

    assert body["data"]["points"] == [{"x": 0, "y": 0}, {"x": 10, "y": 10}]
    assert body["_links"]["self"] == "http://localhost:8080/api/v1/blueprints/john/house"
