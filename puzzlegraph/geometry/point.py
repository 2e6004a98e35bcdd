from dataclasses import dataclass
from typing import Iterator, List, Union

from puzzlegraph.geometry.direction import Direction


@dataclass(frozen=True, order=True)
class Point:
    """
    An integer coordinate on a grid. ``Point(0, 0)`` is the top left cell and y grows
    downward.
    """

    x: int
    y: int

    def __add__(self, other: Union["Point", Direction]) -> "Point":
        if isinstance(other, Direction):
            dx, dy = other.value
            return Point(self.x + dx, self.y + dy)
        if isinstance(other, Point):
            return Point(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __str__(self):
        return f"({self.x}, {self.y})"

    def to_inclusive(self, end: "Point") -> Iterator["Point"]:
        """
        Points along the straight line from this point to ``end``, including both.

        :raises ValueError: If the points are not on one row or column.
        """
        yield from self._walk(end)
        yield end

    def to_exclusive(self, end: "Point") -> Iterator["Point"]:
        """
        Points along the straight line from this point to ``end``, excluding ``end``.

        :raises ValueError: If the points are not on one row or column.
        """
        yield from self._walk(end)

    def _walk(self, end: "Point") -> Iterator["Point"]:
        if self.x != end.x and self.y != end.y:
            raise ValueError(f"Cannot iterate between {self} and {end}")
        step = Point(_sign(end.x - self.x), _sign(end.y - self.y))
        current = self
        while current != end:
            yield current
            current = current + step

    def orthogonal_neighbours(self) -> List["Point"]:
        """
        The four points one step away, in :meth:`Direction.all` order.
        """
        return [self + direction for direction in Direction.all()]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)
