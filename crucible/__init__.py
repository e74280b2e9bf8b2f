"""
Crucible - run-length constrained shortest paths over weighted grids
"""

from importlib.metadata import version, PackageNotFoundError

from .core.grid import Grid
from .core.state import Heading, SearchState
from .core.search import Route, search, find_route
from .core.sweep import sweep, best_result
from .core.config import SearchConfig
from .core.exceptions import CrucibleError, MalformedInputError, UnreachableError, ConfigError

try:
    __version__ = version("crucible")
except PackageNotFoundError:
    # Package not installed (development mode)
    __version__ = "0.0.0.dev"

__all__ = [
    "Grid",
    "Heading",
    "SearchState",
    "Route",
    "search",
    "find_route",
    "sweep",
    "best_result",
    "SearchConfig",
    "CrucibleError",
    "MalformedInputError",
    "UnreachableError",
    "ConfigError",
]
