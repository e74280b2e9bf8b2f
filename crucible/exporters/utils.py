"""
Utility functions for exporters
"""

import logging
from pathlib import Path
from typing import Any, List, Sequence, Union

from ..core.sweep import SweepResult
from .exceptions import FileExportError, InvalidResultsError
from .types import SweepRowDict

logger = logging.getLogger(__name__)

# Constants
DEFAULT_JSON_FILENAME = "sweep_results.json"
DEFAULT_CSV_FILENAME = "sweep_results.csv"


def validate_file_path(file_path: Union[str, Path]) -> Path:
    """
    Validate and resolve a file path for export operations

    Args:
        file_path: Path to validate

    Returns:
        Resolved Path object

    Raises:
        FileExportError: If path is empty, points at a directory, or its
            parent directory does not exist
    """
    if not file_path:
        raise FileExportError("File path must be a non-empty string or Path")

    path = Path(file_path).resolve()

    if path.is_dir():
        raise FileExportError(f"Path is a directory: {path}")
    if not path.parent.is_dir():
        raise FileExportError(f"Parent directory does not exist: {path.parent}")

    return path


def validate_sweep_results(results: Any) -> List[SweepResult]:
    """
    Validate that results is a sequence of SweepResult objects

    Raises:
        InvalidResultsError: If results has the wrong structure
    """
    if not isinstance(results, (list, tuple)):
        raise InvalidResultsError(f"Results must be a list of SweepResult, got: {type(results)}")

    for index, result in enumerate(results):
        if not isinstance(result, SweepResult):
            raise InvalidResultsError(
                f"Result {index} must be a SweepResult, got: {type(result).__name__}"
            )

    return list(results)


def sweep_result_to_dict(result: SweepResult) -> SweepRowDict:
    """Flatten a sweep result into plain Python values"""
    route = result.route
    target_row, target_col = result.target

    return {
        'start_row': result.start.row,
        'start_col': result.start.col,
        'heading': result.start.heading.value,
        'remaining': result.start.remaining,
        'target_row': target_row,
        'target_col': target_col,
        'reachable': result.reachable,
        'cost': route.cost if route is not None else None,
        'path_length': len(route) if route is not None else None,
        'settled': route.settled if route is not None else None,
        'path': [
            {'row': s.row, 'col': s.col, 'heading': s.heading.value, 'remaining': s.remaining}
            for s in route.states
        ] if route is not None else [],
    }


def sweep_results_to_dicts(results: Sequence[SweepResult]) -> List[SweepRowDict]:
    return [sweep_result_to_dict(result) for result in validate_sweep_results(results)]
