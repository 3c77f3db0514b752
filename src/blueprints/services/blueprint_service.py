"""Blueprint service: validation, store access and the read-time filter."""

from typing import Any, Dict, Iterable, Optional, Set

from blueprints.config.loader import normalize_config
from blueprints.errors import InvalidBlueprintError
from blueprints.filters import BlueprintFilter, IdentityFilter, get_filter
from blueprints.models import Blueprint, Point
from blueprints.persistence import BlueprintStore, build_store
from blueprints.utils.logging import get_logger

logger = get_logger(__name__)


class BlueprintService:
    """
    Single entry point for blueprint operations.

    Writes go to the store with raw points. Reads come back through the
    filter chosen when the service was built, so the store always holds
    unfiltered data and switching filters needs no migration.
    """

    def __init__(self, store: BlueprintStore, blueprint_filter: Optional[BlueprintFilter] = None):
        self.store = store
        self.filter = blueprint_filter or IdentityFilter()
        logger.info(f"Blueprint service using {self.filter!r} over {type(store).__name__}")

    def create_blueprint(self, author: str, name: str, points: Iterable[Any] = ()) -> Blueprint:
        """
        Store a new blueprint with its raw points.

        Raises:
            InvalidBlueprintError: If author or name is blank or a point is malformed
            BlueprintAlreadyExistsError: If (author, name) is already stored
        """
        if not author or not author.strip() or not name or not name.strip():
            raise InvalidBlueprintError("author and name are required")
        try:
            parsed = tuple(Point.of(p) for p in (points or ()))
        except (TypeError, ValueError) as e:
            raise InvalidBlueprintError(f"invalid points: {e}") from e
        blueprint = Blueprint(author=author, name=name, points=parsed)
        self.store.save(blueprint)
        return blueprint

    def get_blueprint(self, author: str, name: str) -> Blueprint:
        return self.filter.apply(self.store.get(author, name))

    def get_blueprints_by_author(self, author: str) -> Set[Blueprint]:
        return {self.filter.apply(bp) for bp in self.store.get_by_author(author)}

    def get_all_blueprints(self) -> Set[Blueprint]:
        return {self.filter.apply(bp) for bp in self.store.get_all()}

    def add_point(self, author: str, name: str, x: int, y: int) -> None:
        self.store.append_point(author, name, Point(x=x, y=y))


def build_service(config: Dict[str, Any] | None = None) -> BlueprintService:
    """Build a service from a config dict, resolving filter and store once."""
    config = normalize_config(config)
    return BlueprintService(
        store=build_store(config["persistence"]),
        blueprint_filter=get_filter(config["filter"]),
    )
