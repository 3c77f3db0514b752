"""Value types: Point and Blueprint."""

from typing import Iterable, Tuple, Union

from pydantic import BaseModel, ConfigDict


class Point(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: int
    y: int

    @classmethod
    def of(cls, value: Union["Point", dict, Tuple[int, int]]) -> "Point":
        """Build a Point from a Point, an {"x", "y"} dict or an (x, y) pair."""
        if isinstance(value, Point):
            return value
        if isinstance(value, dict):
            return cls(**value)
        if isinstance(value, (tuple, list)) and len(value) == 2:
            x, y = value
            return cls(x=x, y=y)
        raise TypeError(f"Cannot build a Point from {value!r}")


class Blueprint(BaseModel):
    """Named, authored ordered sequence of points.

    Identity is the (author, name) pair. Instances are frozen, so every
    change produces a new Blueprint.
    """
    model_config = ConfigDict(frozen=True)

    author: str
    name: str
    points: tuple[Point, ...] = ()

    @property
    def key(self) -> tuple[str, str]:
        return (self.author, self.name)

    def with_points(self, points: Iterable[Point]) -> "Blueprint":
        return Blueprint(author=self.author, name=self.name, points=tuple(points))
