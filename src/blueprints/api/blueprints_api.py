"""Blueprints API: envelope-producing surface for callers (HTTP handlers, CLI)."""

from typing import Any, Dict, Iterable, List

from ..errors import (
    BlueprintAlreadyExistsError,
    BlueprintNotFoundError,
    InvalidBlueprintError,
)
from ..models import Blueprint
from ..services.blueprint_service import BlueprintService
from ..utils.logging import get_logger
from .models import ApiResponse

logger = get_logger(__name__)

DEFAULT_BASE_URL = "/api/v1/blueprints"


def _sorted(blueprints: Iterable[Blueprint]) -> List[Blueprint]:
    return sorted(blueprints, key=lambda bp: bp.key)


class BlueprintsApi:
    """
    Translate service results and errors into ApiResponse envelopes.

    InvalidBlueprintError -> 400, BlueprintNotFoundError -> 404,
    BlueprintAlreadyExistsError -> 409. Anything else propagates.
    """

    def __init__(self, service: BlueprintService, base_url: str = DEFAULT_BASE_URL):
        self.service = service
        self.base_url = base_url.rstrip("/")

    def _blueprint_links(self, author: str, name: str) -> Dict[str, str]:
        return {
            "self": f"{self.base_url}/{author}/{name}",
            "add-point": f"{self.base_url}/{author}/{name}/points",
            "author-blueprints": f"{self.base_url}/{author}",
            "all-blueprints": self.base_url,
        }

    def list_blueprints(self) -> ApiResponse:
        blueprints = _sorted(self.service.get_all_blueprints())
        return ApiResponse.ok(blueprints).with_links({"self": self.base_url})

    def list_by_author(self, author: str) -> ApiResponse:
        try:
            blueprints = _sorted(self.service.get_blueprints_by_author(author))
        except BlueprintNotFoundError as e:
            logger.info(str(e))
            return ApiResponse.not_found(str(e))
        return ApiResponse.ok(blueprints).with_links({
            "self": f"{self.base_url}/{author}",
            "all-blueprints": self.base_url,
        })

    def get_blueprint(self, author: str, name: str) -> ApiResponse:
        try:
            blueprint = self.service.get_blueprint(author, name)
        except BlueprintNotFoundError as e:
            logger.info(str(e))
            return ApiResponse.not_found(str(e))
        return ApiResponse.ok(blueprint).with_links(self._blueprint_links(author, name))

    def create_blueprint(self, payload: Dict[str, Any]) -> ApiResponse:
        """Create from a request body {"author", "name", "points": [{"x", "y"}, ...]}."""
        try:
            blueprint = self.service.create_blueprint(
                payload.get("author") or "",
                payload.get("name") or "",
                payload.get("points") or [],
            )
        except InvalidBlueprintError as e:
            return ApiResponse.bad_request(str(e))
        except BlueprintAlreadyExistsError as e:
            logger.info(str(e))
            return ApiResponse.conflict(str(e))
        return ApiResponse.created(blueprint).with_links(
            self._blueprint_links(blueprint.author, blueprint.name)
        )

    def add_point(self, author: str, name: str, x: int, y: int) -> ApiResponse:
        try:
            self.service.add_point(author, name, x, y)
        except BlueprintNotFoundError as e:
            logger.info(str(e))
            return ApiResponse.not_found(str(e))
        return ApiResponse.accepted().with_links({
            "blueprint": f"{self.base_url}/{author}/{name}",
            "all-blueprints": self.base_url,
        })
