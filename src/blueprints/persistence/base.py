from abc import ABC, abstractmethod
from typing import Set

from blueprints.models import Blueprint, Point


class BlueprintStore(ABC):
    """
    Keyed storage of blueprints.

    (author, name) is unique within a store. Every backend raises
    BlueprintAlreadyExistsError on a duplicate save and
    BlueprintNotFoundError on a missing key or author, so callers never
    depend on which backend is configured. Stored points are never filtered.
    """

    @abstractmethod
    def save(self, blueprint: Blueprint) -> None:
        ...

    @abstractmethod
    def get(self, author: str, name: str) -> Blueprint:
        ...

    @abstractmethod
    def get_by_author(self, author: str) -> Set[Blueprint]:
        ...

    @abstractmethod
    def get_all(self) -> Set[Blueprint]:
        ...

    @abstractmethod
    def append_point(self, author: str, name: str, point: Point) -> None:
        ...
