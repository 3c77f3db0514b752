"""In-process blueprint store. Nothing survives a restart."""

import threading
from typing import Dict, Iterable, List, Set, Tuple

from blueprints.errors import BlueprintAlreadyExistsError, BlueprintNotFoundError
from blueprints.models import Blueprint, Point
from blueprints.persistence.base import BlueprintStore
from blueprints.utils.logging import get_logger

logger = get_logger(__name__)


def sample_blueprints() -> List[Blueprint]:
    """Blueprints preloaded into a fresh in-memory store when seeding is enabled."""
    return [
        Blueprint(
            author="john",
            name="house",
            points=[Point(x=0, y=0), Point(x=10, y=0), Point(x=10, y=10), Point(x=0, y=10)],
        ),
        Blueprint(
            author="john",
            name="garage",
            points=[Point(x=5, y=5), Point(x=15, y=5), Point(x=15, y=15)],
        ),
        Blueprint(
            author="jane",
            name="garden",
            points=[Point(x=2, y=2), Point(x=3, y=4), Point(x=6, y=7)],
        ),
    ]


class InMemoryBlueprintStore(BlueprintStore):
    """
    Dict-backed store guarded by a single lock.

    Points are kept as per-key lists so an append does not copy the
    blueprint; readers get frozen Blueprint snapshots built under the lock.
    """

    def __init__(self, initial: Iterable[Blueprint] = ()):
        self._lock = threading.Lock()
        self._points: Dict[Tuple[str, str], List[Point]] = {}
        for bp in initial:
            self.save(bp)

    def _snapshot(self, key: Tuple[str, str]) -> Blueprint:
        author, name = key
        return Blueprint(author=author, name=name, points=tuple(self._points[key]))

    def save(self, blueprint: Blueprint) -> None:
        with self._lock:
            if blueprint.key in self._points:
                raise BlueprintAlreadyExistsError(blueprint.author, blueprint.name)
            self._points[blueprint.key] = list(blueprint.points)
        logger.debug(f"Saved blueprint {blueprint.author}/{blueprint.name}")

    def get(self, author: str, name: str) -> Blueprint:
        key = (author, name)
        with self._lock:
            if key not in self._points:
                raise BlueprintNotFoundError(author, name)
            return self._snapshot(key)

    def get_by_author(self, author: str) -> Set[Blueprint]:
        with self._lock:
            found = {self._snapshot(key) for key in self._points if key[0] == author}
        if not found:
            raise BlueprintNotFoundError(author)
        return found

    def get_all(self) -> Set[Blueprint]:
        with self._lock:
            return {self._snapshot(key) for key in self._points}

    def append_point(self, author: str, name: str, point: Point) -> None:
        key = (author, name)
        with self._lock:
            if key not in self._points:
                raise BlueprintNotFoundError(author, name)
            self._points[key].append(point)
        logger.debug(f"Appended point ({point.x}, {point.y}) to {author}/{name}")
