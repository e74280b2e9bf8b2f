"""
Uniform-cost search over run-length constrained states.

Implements Dijkstra's algorithm on the implicit graph produced by the move
rule in `state.py`:
- Frontier is a binary heap of (cost, sequence, state) entries
- Visited set is keyed on the full augmented state
- Stale frontier entries are discarded when popped (lazy deletion)
"""

import heapq
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .exceptions import UnreachableError
from .grid import Cell, Grid
from .state import SearchState, successors

logger = logging.getLogger(__name__)

DEFAULT_MAX_STRAIGHT = 3


@dataclass
class Route:
    """Result of a successful search."""
    cost: int
    states: List[SearchState] = field(default_factory=list)  # start first, target last
    settled: int = 0  # states finalized, target included

    @property
    def end(self) -> SearchState:
        return self.states[-1]

    def __len__(self):
        """Number of moves along the route."""
        return max(len(self.states) - 1, 0)


def _validate_start(grid: Grid, start: SearchState, target: Cell, max_straight: int) -> None:
    if max_straight < 1:
        raise ValueError(f"max_straight must be at least 1, got {max_straight}")

    if not 0 <= start.remaining <= max_straight:
        raise ValueError(
            f"Start budget {start.remaining} outside [0, {max_straight}]"
        )

    if not grid.in_bounds(start.row, start.col):
        raise UnreachableError(
            f"Start cell {start.cell} is outside the {grid.rows}x{grid.cols} grid",
            start=start,
            target=target
        )


def reconstruct_path(parents: Dict[SearchState, Optional[SearchState]], end: SearchState) -> List[SearchState]:
    """Reconstruct path from the settled end state by following parent links."""
    path = []
    current: Optional[SearchState] = end

    while current is not None:
        path.append(current)
        current = parents[current]

    path.reverse()
    return path


def find_route(
    grid: Grid,
    start: SearchState,
    target: Cell,
    max_straight: int = DEFAULT_MAX_STRAIGHT
) -> Route:
    """
    Find the cheapest legal route from a start state to a target cell.

    The target is reached by the first settled state on the target cell,
    whatever its heading or remaining budget.

    Args:
        grid: Grid of entry costs (read only)
        start: Initial state; its budget must lie in [0, max_straight]
        target: (row, col) of the goal cell
        max_straight: Longest straight run allowed before a turn

    Returns:
        Route with the minimum total cost and the states along it

    Raises:
        UnreachableError: If no legal route reaches the target
        ValueError: If the start budget or max_straight is out of range
    """
    _validate_start(grid, start, target, max_straight)
    target_row, target_col = target

    logger.debug(
        f"Searching from {start.cell} heading {start.heading.value} "
        f"to {target} with max_straight={max_straight}"
    )

    sequence = 0
    frontier: List[Tuple[int, int, SearchState, Optional[SearchState]]] = [(0, sequence, start, None)]
    visited = set()
    parents: Dict[SearchState, Optional[SearchState]] = {}

    while frontier:
        cost, _, state, parent = heapq.heappop(frontier)

        # Already settled at a lower or equal cost
        if state in visited:
            continue
        visited.add(state)
        parents[state] = parent

        if state.row == target_row and state.col == target_col:
            route = Route(cost=cost, states=reconstruct_path(parents, state), settled=len(visited))
            logger.debug(f"Reached {target} at cost {cost} after settling {len(visited)} states")
            return route

        for weight, successor in successors(state, grid, max_straight):
            sequence += 1
            heapq.heappush(frontier, (cost + weight, sequence, successor, state))

    logger.warning(f"Target {target} unreachable from {start.cell} after settling {len(visited)} states")
    raise UnreachableError(
        f"No legal route from {start.cell} to {target}",
        start=start,
        target=target
    )


def search(
    grid: Grid,
    start: SearchState,
    target: Cell,
    max_straight: int = DEFAULT_MAX_STRAIGHT
) -> int:
    """
    Return the minimum total entry cost from start to the target cell.

    See find_route() for arguments and errors.
    """
    return find_route(grid, start, target, max_straight).cost
