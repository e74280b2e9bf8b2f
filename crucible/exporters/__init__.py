"""
Export functionality for sweep results

- JSON: Machine-readable format for integration with other tools
- DataFrame: Polars DataFrame for analysis, or CSV via DataFrame.write_csv
"""

from .dataframe_export import export_to_dataframe, route_to_dataframe
from .json_export import export_to_json

from .exceptions import (
    ExporterError,
    InvalidResultsError,
    FileExportError
)

from .types import SweepRowDict, StepDict

__all__ = [
    "export_to_dataframe",
    "route_to_dataframe",
    "export_to_json",
    "ExporterError",
    "InvalidResultsError",
    "FileExportError",
    "SweepRowDict",
    "StepDict",
]
