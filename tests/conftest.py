"""
Shared pytest fixtures and utilities for testing
"""

import pytest

from crucible.core.grid import Grid
from crucible.core.state import Heading, SearchState


SCENARIO_TEXT = """\
199
199
111
"""

CORRIDOR_TEXT = """\
11111
99999
"""


@pytest.fixture
def scenario_grid():
    """3x3 grid whose only cheap route runs down the left column and along the bottom"""
    return Grid.from_text(SCENARIO_TEXT)


@pytest.fixture
def corridor_grid():
    """Cheap top row of five cells over an expensive bottom row"""
    return Grid.from_text(CORRIDOR_TEXT)


@pytest.fixture
def single_row_grid():
    """1x5 grid where every route is one straight run"""
    return Grid.from_text("11111\n")


@pytest.fixture
def one_cell_grid():
    """1x1 grid"""
    return Grid.from_text("5")


@pytest.fixture
def east_start():
    """Top-left start heading east with the default budget"""
    return SearchState(0, 0, Heading.EAST, 3)


# Helper functions for tests

_CLOCKWISE = ['north', 'east', 'south', 'west']
_STEP = {'north': (-1, 0), 'east': (0, 1), 'south': (1, 0), 'west': (0, -1)}


def brute_force_min_cost(rows, start, target, max_straight):
    """
    Minimum route cost by exhaustive relaxation over every augmented state

    Repeats full passes (Bellman-Ford style) until no distance improves. Uses
    its own move table rather than the engine's so the two can be compared.

    Args:
        rows: List of lists of entry costs
        start: (row, col, heading_name, remaining)
        target: (row, col)
        max_straight: Longest straight run

    Returns:
        Minimum cost, or None when the target cannot be reached
    """
    height, width = len(rows), len(rows[0])
    dist = {start: 0}

    changed = True
    while changed:
        changed = False
        for (row, col, heading, remaining), cost in list(dist.items()):
            index = _CLOCKWISE.index(heading)
            moves = [(_CLOCKWISE[(index - 1) % 4], max_straight),
                     (_CLOCKWISE[(index + 1) % 4], max_straight)]
            if remaining > 0:
                moves.append((heading, remaining))

            for new_heading, budget in moves:
                d_row, d_col = _STEP[new_heading]
                new_row, new_col = row + d_row, col + d_col
                if not (0 <= new_row < height and 0 <= new_col < width):
                    continue
                node = (new_row, new_col, new_heading, budget - 1)
                new_cost = cost + rows[new_row][new_col]
                if new_cost < dist.get(node, float('inf')):
                    dist[node] = new_cost
                    changed = True

    costs = [cost for (row, col, _, _), cost in dist.items() if (row, col) == target]
    return min(costs) if costs else None


def longest_straight_run(route):
    """Longest number of consecutive moves made in one heading along a route"""
    longest = 0
    run = 0
    previous = None

    for state in route.states[1:]:
        run = run + 1 if state.heading == previous else 1
        previous = state.heading
        longest = max(longest, run)

    return longest


def assert_route_is_connected(route):
    """Assert every step moves exactly one cell in the heading it records"""
    for before, after in zip(route.states, route.states[1:]):
        d_row, d_col = after.heading.delta
        assert (after.row, after.col) == (before.row + d_row, before.col + d_col), \
            f"Step {before} -> {after} is not a single move in heading {after.heading}"
        assert after.heading != before.heading.opposite(), f"Reversal in step {before} -> {after}"


def route_cost(grid, route):
    """Sum of entry costs along a route, excluding the start cell"""
    return sum(grid.get(state.row, state.col) for state in route.states[1:])
