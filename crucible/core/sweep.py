"""
Run independent searches from several start states.

Each search owns its frontier and visited set; only the grid is shared.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .exceptions import UnreachableError
from .grid import Cell, Grid
from .search import DEFAULT_MAX_STRAIGHT, Route, find_route
from .state import SearchState

logger = logging.getLogger(__name__)


@dataclass
class SweepResult:
    """Outcome of one search in a sweep."""
    start: SearchState
    target: Cell
    route: Optional[Route] = None

    @property
    def reachable(self) -> bool:
        return self.route is not None

    @property
    def cost(self) -> Optional[int]:
        return self.route.cost if self.route is not None else None


def sweep(
    grid: Grid,
    starts: Iterable[SearchState],
    target: Cell,
    max_straight: int = DEFAULT_MAX_STRAIGHT
) -> List[SweepResult]:
    """
    Search from every start state in turn.

    Unreachable outcomes are recorded rather than raised so one isolated start
    does not abort the sweep.

    Args:
        grid: Grid of entry costs
        starts: Start states to search from
        target: (row, col) of the goal cell
        max_straight: Longest straight run allowed before a turn

    Returns:
        One SweepResult per start state, in input order
    """
    results = []

    for start in starts:
        try:
            route = find_route(grid, start, target, max_straight)
        except UnreachableError:
            results.append(SweepResult(start=start, target=target))
            continue
        results.append(SweepResult(start=start, target=target, route=route))

    reachable = sum(1 for result in results if result.reachable)
    logger.info(f"Sweep finished: {reachable}/{len(results)} start states reached {target}")
    return results


def best_result(results: List[SweepResult]) -> SweepResult:
    """
    Pick the cheapest reachable result (first one wins on ties).

    Raises:
        UnreachableError: If no result in the sweep is reachable
    """
    reachable = [result for result in results if result.reachable]
    if not reachable:
        target = results[0].target if results else None
        raise UnreachableError(f"No start state reaches {target}", target=target)
    return min(reachable, key=lambda result: result.cost)
