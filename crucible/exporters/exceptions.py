"""
Custom exceptions for exporters module
"""

from ..core.exceptions import CrucibleError


class ExporterError(CrucibleError):
    """Base exception for all exporter errors"""
    pass


class InvalidResultsError(ExporterError):
    """Raised when sweep results have an invalid structure"""
    pass


class FileExportError(ExporterError):
    """Raised when file export operations fail"""
    pass
