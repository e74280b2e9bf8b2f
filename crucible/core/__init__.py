"""
Core search engine: grid, augmented states, Dijkstra search and sweeps
"""

from .exceptions import CrucibleError, MalformedInputError, UnreachableError, ConfigError
from .grid import Grid, Cell
from .state import Heading, SearchState, successors
from .search import Route, search, find_route, DEFAULT_MAX_STRAIGHT
from .sweep import SweepResult, sweep, best_result
from .config import SearchConfig

__all__ = [
    'CrucibleError',
    'MalformedInputError',
    'UnreachableError',
    'ConfigError',
    'Grid',
    'Cell',
    'Heading',
    'SearchState',
    'successors',
    'Route',
    'search',
    'find_route',
    'DEFAULT_MAX_STRAIGHT',
    'SweepResult',
    'sweep',
    'best_result',
    'SearchConfig',
]
