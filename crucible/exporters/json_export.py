"""
Export sweep results to JSON format
"""

import json
import logging
from typing import List, Optional, Union
from pathlib import Path

from ..core.sweep import SweepResult
from .exceptions import FileExportError, InvalidResultsError
from .utils import validate_file_path, sweep_results_to_dicts

logger = logging.getLogger(__name__)


def export_to_json(
    results: List[SweepResult],
    file_path: Optional[Union[str, Path]] = None,
    indent: int = 2
) -> str:
    """
    Export sweep results to JSON format

    Each result is written with its start state, target, outcome and the full
    list of states along its route.

    Args:
        results: Sweep results, as returned by sweep()
        file_path: Optional path to save JSON file. If None, only returns JSON string
        indent: Number of spaces for indentation (default: 2)

    Returns:
        JSON string representation of results

    Raises:
        InvalidResultsError: If results is not a list of SweepResult
        FileExportError: If the path is invalid or the write fails
    """
    try:
        rows = sweep_results_to_dicts(results)
    except InvalidResultsError as e:
        logger.error(f"Results validation failed: {e}")
        raise

    json_str = json.dumps({'results': rows}, indent=indent)

    if file_path:
        validated_path = validate_file_path(file_path)
        try:
            validated_path.write_text(json_str, encoding='utf-8')
        except OSError as e:
            logger.error(f"Failed to write JSON file: {e}")
            raise FileExportError(f"Failed to write file '{file_path}': {e}") from e

        logger.info(f"JSON results exported to: {validated_path}")

    return json_str
