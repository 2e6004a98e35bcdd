from typing import Callable, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

import numpy as np

from puzzlegraph.geometry.point import Point

T = TypeVar("T")
U = TypeVar("U")


class Grid(Generic[T]):
    """
    A rectangular grid of cells, indexed by :class:`Point`.

    :param rows: The cells, row by row. All rows must have the same length.
    """

    def __init__(self, rows: Iterable[Iterable[T]]):
        self._rows: List[List[T]] = [list(row) for row in rows]
        if not self._rows:
            raise ValueError("A grid needs at least one row.")
        widths = {len(row) for row in self._rows}
        if len(widths) != 1:
            raise ValueError(f"Grid rows have differing widths {sorted(widths)}")
        self.width = len(self._rows[0])
        self.height = len(self._rows)

    @classmethod
    def parse(cls, lines: Iterable[str], parse_cell: Callable[[str], T]) -> "Grid[T]":
        """
        Build a grid from lines of text, one cell per character. An exception from
        ``parse_cell`` aborts the parse.

        :param lines: The rows of the grid. Trailing blank lines are ignored; a blank
            line inside the grid is a ragged row.
        :param parse_cell: Converts one character to a cell.
        """
        lines = list(lines)
        while lines and not lines[-1]:
            lines.pop()
        return cls([parse_cell(c) for c in line] for line in lines)

    def is_in_bounds(self, point: Point) -> bool:
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def get(self, point: Point) -> Optional[T]:
        """
        The cell at ``point``, or None if it is out of bounds.
        """
        if not self.is_in_bounds(point):
            return None
        return self._rows[point.y][point.x]

    def __getitem__(self, point: Point) -> T:
        if not self.is_in_bounds(point):
            raise IndexError(f"{point} is outside the {self.width}x{self.height} grid")
        return self._rows[point.y][point.x]

    def __setitem__(self, point: Point, value: T):
        if not self.is_in_bounds(point):
            raise IndexError(f"{point} is outside the {self.width}x{self.height} grid")
        self._rows[point.y][point.x] = value

    def row(self, y: int) -> List[T]:
        return list(self._rows[y])

    def cells(self) -> Iterator[T]:
        """
        All cells, row by row.
        """
        for row in self._rows:
            yield from row

    def enumerate(self) -> Iterator[Tuple[Point, T]]:
        """
        All ``(point, cell)`` pairs, row by row.
        """
        for y, row in enumerate(self._rows):
            for x, cell in enumerate(row):
                yield Point(x, y), cell

    def map(self, fn: Callable[[Point, T], U]) -> "Grid[U]":
        """
        A new grid with ``fn(point, cell)`` in place of each cell.
        """
        return Grid(
            [fn(Point(x, y), cell) for x, cell in enumerate(row)]
            for y, row in enumerate(self._rows)
        )

    def as_array(self, dtype=None) -> np.ndarray:
        """
        The cells as a ``(height, width)`` numpy array.
        """
        return np.array(self._rows, dtype=dtype)
