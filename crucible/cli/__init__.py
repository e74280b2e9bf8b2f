"""
CLI utilities for crucible
"""

from .argument_parser import setup_argument_parser
from .output import render_route, format_result, print_separator
from .init_command import run_init_command

__all__ = [
    'setup_argument_parser',
    'render_route',
    'format_result',
    'print_separator',
    'run_init_command',
]
