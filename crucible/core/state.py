"""
Augmented search states and the move rule.

A search node is not a cell but a (row, col, heading, remaining) tuple, where
`remaining` is the number of further steps allowed in the current heading
before a turn is mandatory.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterator, Optional, Tuple

from .grid import Grid


class Heading(Enum):
    """Cardinal direction of travel."""
    NORTH = 'north'
    SOUTH = 'south'
    EAST = 'east'
    WEST = 'west'

    @property
    def delta(self) -> Tuple[int, int]:
        """(row, col) offset of one step in this heading."""
        return _DELTAS[self]

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]

    def left(self) -> 'Heading':
        """Rotate 90 degrees counter-clockwise."""
        return _LEFT[self]

    def right(self) -> 'Heading':
        """Rotate 90 degrees clockwise."""
        return _RIGHT[self]

    def opposite(self) -> 'Heading':
        return _LEFT[_LEFT[self]]


_DELTAS = {
    Heading.NORTH: (-1, 0),
    Heading.SOUTH: (1, 0),
    Heading.EAST: (0, 1),
    Heading.WEST: (0, -1),
}

_GLYPHS = {
    Heading.NORTH: '^',
    Heading.SOUTH: 'v',
    Heading.EAST: '>',
    Heading.WEST: '<',
}

_LEFT = {
    Heading.NORTH: Heading.WEST,
    Heading.EAST: Heading.NORTH,
    Heading.SOUTH: Heading.EAST,
    Heading.WEST: Heading.SOUTH,
}

_RIGHT = {
    Heading.NORTH: Heading.EAST,
    Heading.EAST: Heading.SOUTH,
    Heading.SOUTH: Heading.WEST,
    Heading.WEST: Heading.NORTH,
}


@dataclass(frozen=True)
class SearchState:
    """Node of the implicit search graph.

    Equality and hashing cover all four fields, so two arrivals at the same
    cell with a different heading or budget are distinct states.
    """
    row: int
    col: int
    heading: Heading
    remaining: int

    @property
    def cell(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def turn_left(self, max_straight: int) -> 'SearchState':
        """Pivot in place to the left, resetting the straight-run budget."""
        return replace(self, heading=self.heading.left(), remaining=max_straight)

    def turn_right(self, max_straight: int) -> 'SearchState':
        """Pivot in place to the right, resetting the straight-run budget."""
        return replace(self, heading=self.heading.right(), remaining=max_straight)

    def move_forwards(self) -> Optional['SearchState']:
        """
        Step one cell in the current heading.

        Returns None when the budget is spent or the step would leave the
        non-negative quadrant. Upper bounds are checked against the grid by
        the caller.
        """
        if self.remaining < 1:
            return None

        d_row, d_col = self.heading.delta
        row = self.row + d_row
        col = self.col + d_col
        if row < 0 or col < 0:
            return None

        return SearchState(row, col, self.heading, self.remaining - 1)


def successors(
    state: SearchState,
    grid: Grid,
    max_straight: int
) -> Iterator[Tuple[int, SearchState]]:
    """
    Yield every legal (edge_weight, successor) pair from a state.

    Candidates are: straight on, turn left then step, turn right then step.
    A pivot is never emitted on its own, so a reversal cannot be produced.
    Edge weight is the cost of the cell being entered.

    Args:
        state: State being expanded
        grid: Grid providing bounds and entry costs
        max_straight: Budget restored by a turn

    Yields:
        Tuples of (edge_weight, successor_state)
    """
    candidates = (
        state.move_forwards(),
        state.turn_left(max_straight).move_forwards(),
        state.turn_right(max_straight).move_forwards(),
    )

    for candidate in candidates:
        if candidate is None:
            continue
        weight = grid.get(candidate.row, candidate.col)
        if weight is not None:
            yield weight, candidate
