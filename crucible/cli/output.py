"""
Output formatting and printing utilities for CLI
"""

from typing import Dict, Tuple

from ..core.grid import Grid
from ..core.search import Route
from ..core.sweep import SweepResult


def render_route(grid: Grid, route: Route) -> str:
    """
    Draw a route over the grid

    Entered cells show the heading used to enter them (>, v, <, ^); the start
    cell is marked S and untouched cells keep their digit.

    Args:
        grid: Grid the route was searched on
        route: Route to draw

    Returns:
        Multi-line string, one line per grid row
    """
    marks: Dict[Tuple[int, int], str] = {}
    for state in route.states[1:]:
        marks[state.cell] = state.heading.glyph
    if route.states:
        marks[route.states[0].cell] = 'S'

    lines = []
    for row_index, row in enumerate(grid.iter_rows()):
        lines.append(''.join(
            marks.get((row_index, col_index), str(value))
            for col_index, value in enumerate(row)
        ))
    return '\n'.join(lines)


def format_result(result: SweepResult) -> str:
    """One-line summary of a sweep result"""
    start = result.start
    prefix = f"start {start.cell} heading {start.heading.value}"
    if not result.reachable:
        return f"{prefix}: unreachable"
    return f"{prefix}: cost {result.cost} in {len(result.route)} moves ({result.route.settled} states settled)"


def print_separator(width: int = 70, char: str = '=') -> None:
    """
    Print a separator line

    Args:
        width: Width of the separator
        char: Character to use for separator
    """
    print(char * width)
