"""
Export sweep results and routes to Polars DataFrames
"""

import logging
from typing import List

import polars as pl

from ..core.grid import Grid
from ..core.search import Route
from ..core.sweep import SweepResult
from .exceptions import InvalidResultsError
from .utils import sweep_results_to_dicts

logger = logging.getLogger(__name__)

SWEEP_SCHEMA = {
    'start_row': pl.Int64,
    'start_col': pl.Int64,
    'heading': pl.Utf8,
    'remaining': pl.Int64,
    'target_row': pl.Int64,
    'target_col': pl.Int64,
    'reachable': pl.Boolean,
    'cost': pl.Int64,
    'path_length': pl.Int64,
    'settled': pl.Int64,
}

ROUTE_SCHEMA = {
    'step': pl.Int64,
    'row': pl.Int64,
    'col': pl.Int64,
    'heading': pl.Utf8,
    'remaining': pl.Int64,
    'entry_cost': pl.Int64,
    'cumulative_cost': pl.Int64,
}


def export_to_dataframe(results: List[SweepResult]) -> pl.DataFrame:
    """
    Export sweep results to a Polars DataFrame for easy analysis

    One row per start state. Unreachable starts keep their row with
    reachable=False and null cost columns. An empty sweep returns an empty
    DataFrame with the correct schema.

    Args:
        results: Sweep results, as returned by sweep()

    Returns:
        Polars DataFrame with columns: start_row, start_col, heading,
        remaining, target_row, target_col, reachable, cost, path_length,
        settled

    Raises:
        InvalidResultsError: If results is not a list of SweepResult

    Examples:
        >>> df = export_to_dataframe(sweep(grid, starts, (2, 2)))  # doctest: +SKIP
        >>> df.filter(pl.col('reachable'))['cost'].min()  # doctest: +SKIP
        4
    """
    try:
        rows = sweep_results_to_dicts(results)
    except InvalidResultsError as e:
        logger.error(f"Results validation failed: {e}")
        raise

    records = [{key: row[key] for key in SWEEP_SCHEMA} for row in rows]

    if not records:
        logger.info("No sweep results, returning empty DataFrame")
        return pl.DataFrame(schema=SWEEP_SCHEMA)

    df = pl.DataFrame(records, schema=SWEEP_SCHEMA)
    logger.info(f"Created DataFrame with {len(df)} sweep rows")
    return df


def route_to_dataframe(route: Route, grid: Grid) -> pl.DataFrame:
    """
    Export one route to a DataFrame with a row per visited state

    The start state is step 0 with an entry cost of 0.

    Args:
        route: Route returned by find_route()
        grid: Grid the route was searched on

    Returns:
        Polars DataFrame with columns: step, row, col, heading, remaining,
        entry_cost, cumulative_cost
    """
    records = []
    cumulative = 0

    for step, state in enumerate(route.states):
        entry_cost = 0 if step == 0 else grid.get(state.row, state.col)
        if entry_cost is None:
            raise InvalidResultsError(f"Route state {state.cell} lies outside the grid")
        cumulative += entry_cost
        records.append({
            'step': step,
            'row': state.row,
            'col': state.col,
            'heading': state.heading.value,
            'remaining': state.remaining,
            'entry_cost': entry_cost,
            'cumulative_cost': cumulative,
        })

    return pl.DataFrame(records, schema=ROUTE_SCHEMA)
