from enum import Enum
from typing import Tuple


class Direction(Enum):
    """
    One of the four orthogonal directions on a grid, where y grows downward.
    """

    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    @classmethod
    def all(cls) -> Tuple["Direction", ...]:
        """
        All four directions, in the order north, south, east, west.
        """
        return (cls.NORTH, cls.SOUTH, cls.EAST, cls.WEST)

    @classmethod
    def from_point(cls, point) -> "Direction":
        """
        The direction whose unit step is ``point``.

        :raises ValueError: If ``point`` is not a unit step.
        """
        for direction in cls:
            if direction.value == (point.x, point.y):
                return direction
        raise ValueError(f"{point} does not correspond to a direction")

    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def delta(self):
        """
        The unit step of this direction, as a point.
        """
        # pylint: disable=import-outside-toplevel,cyclic-import
        from puzzlegraph.geometry.point import Point

        return Point(*self.value)


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}
