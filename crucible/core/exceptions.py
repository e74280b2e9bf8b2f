"""
Custom exceptions for the crucible search engine
"""

from typing import Optional, Tuple


class CrucibleError(Exception):
    """Base exception for all crucible errors"""
    pass


class MalformedInputError(CrucibleError):
    """Raised when grid input has ragged rows or invalid cost values"""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        super().__init__(message)
        self.line = line
        self.column = column


class UnreachableError(CrucibleError):
    """Raised when the frontier is exhausted before the target cell is settled"""

    def __init__(self, message: str, start=None, target: Optional[Tuple[int, int]] = None):
        super().__init__(message)
        self.start = start
        self.target = target


class ConfigError(CrucibleError):
    """Raised when a search configuration fails validation or cannot be parsed"""
    pass
