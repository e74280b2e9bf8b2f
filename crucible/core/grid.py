"""
Weighted grid for run-length constrained search.

Stores the cost of entering each cell and answers bounds-checked lookups.
A grid is immutable once built and is shared by reference between searches.
"""

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from .exceptions import MalformedInputError

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]  # (row, col)


class Grid:
    """
    Rectangular array of non-negative entry costs.

    Cells are addressed as (row, col) with (0, 0) in the top-left corner.
    Entering a cell costs its value; the start cell is never charged.
    """

    __slots__ = ('_cells', '_rows', '_cols')

    def __init__(self, rows: Sequence[Sequence[int]]):
        """
        Initialize grid.

        Args:
            rows: Sequence of equal-length rows of non-negative integers

        Raises:
            MalformedInputError: If the grid is empty, ragged, or holds a
                negative or non-integer value
        """
        cells: List[Tuple[int, ...]] = []

        for row_index, row in enumerate(rows):
            values = tuple(row)

            if cells and len(values) != len(cells[0]):
                raise MalformedInputError(
                    f"Row {row_index + 1} has {len(values)} cells, expected {len(cells[0])}",
                    line=row_index + 1
                )

            for col_index, value in enumerate(values):
                if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                    raise MalformedInputError(
                        f"Invalid cost {value!r} at row {row_index + 1}, column {col_index + 1}",
                        line=row_index + 1,
                        column=col_index + 1
                    )

            cells.append(values)

        if not cells or not cells[0]:
            raise MalformedInputError("Grid must contain at least one cell")

        self._cells: Tuple[Tuple[int, ...], ...] = tuple(cells)
        self._rows = len(cells)
        self._cols = len(cells[0])

    @classmethod
    def from_text(cls, text: str) -> 'Grid':
        """
        Parse a block of digit characters, one row per line.

        Trailing whitespace and blank lines at the end of the input are ignored.

        Raises:
            MalformedInputError: On non-digit characters or ragged rows
        """
        lines = [line.rstrip() for line in text.splitlines()]
        while lines and not lines[-1]:
            lines.pop()

        rows = []
        for line_number, line in enumerate(lines, start=1):
            row = []
            for column, char in enumerate(line, start=1):
                # str.isdigit() also accepts superscripts and other Unicode digits
                if char not in '0123456789':
                    raise MalformedInputError(
                        f"Invalid character {char!r} at line {line_number}, column {column}",
                        line=line_number,
                        column=column
                    )
                row.append(int(char))
            rows.append(row)

        grid = cls(rows)
        logger.debug(f"Parsed {grid.rows}x{grid.cols} grid")
        return grid

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'Grid':
        """Load a grid from a text file of digit rows."""
        try:
            text = Path(path).read_text(encoding='utf-8')
        except UnicodeDecodeError as e:
            prefix = e.object[:e.start]
            line = prefix.count(b'\n') + 1
            column = e.start - (prefix.rfind(b'\n') + 1) + 1
            raise MalformedInputError(
                f"Invalid byte at line {line}, column {column} of {path}: not UTF-8 text",
                line=line,
                column=column
            ) from e
        return cls.from_text(text)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        """(rows, cols) of the grid."""
        return (self._rows, self._cols)

    @property
    def bottom_right(self) -> Cell:
        """The bottom-right cell, the conventional search target."""
        return (self._rows - 1, self._cols - 1)

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if a cell is within grid bounds."""
        return 0 <= row < self._rows and 0 <= col < self._cols

    def get(self, row: int, col: int) -> Optional[int]:
        """Return the cost to enter (row, col), or None if out of bounds."""
        if not self.in_bounds(row, col):
            return None
        return self._cells[row][col]

    def iter_rows(self) -> Iterator[Tuple[int, ...]]:
        """Iterate over rows of cell costs."""
        return iter(self._cells)

    def to_text(self) -> str:
        """Render the grid back to its digit-block form (costs above 9 are not representable)."""
        return '\n'.join(''.join(str(value) for value in row) for row in self._cells)

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self):
        return hash(self._cells)

    def __repr__(self):
        return f"Grid(rows={self._rows}, cols={self._cols})"
