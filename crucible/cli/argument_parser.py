"""
Command-line argument parser configuration with subcommands
"""

import argparse

from ..core.state import Heading


def _cell(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"coordinates must be non-negative, got {number}")
    return number


def setup_argument_parser() -> argparse.ArgumentParser:
    """
    Configure and return the argument parser with subcommands (init, solve)

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog='crucible',
        description='Minimum-cost paths over digit grids with a bounded straight-run rule',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Initialize configuration
  crucible init                            # Create ./crucible.yaml
  crucible init --path ./runs/k5.yaml      # Create in custom location

  # Solve
  crucible solve input.txt                 # Top-left to bottom-right, max 3 straight
  crucible solve input.txt --max-straight 5
  crucible solve input.txt --target 4 7 --heading east
  crucible solve input.txt --show-path     # Draw the cheapest route
  crucible solve input.txt --config crucible.yaml --export csv json
        """
    )

    subparsers = parser.add_subparsers(
        dest='command',
        required=True,
        help='Command to execute'
    )

    # ========================================================================
    # INIT SUBCOMMAND
    # ========================================================================
    init_parser = subparsers.add_parser(
        'init',
        help='Create a new configuration file',
        description='Write a commented search configuration template'
    )

    init_parser.add_argument(
        '--force', '-f',
        action='store_true',
        help='Overwrite existing configuration file'
    )

    init_parser.add_argument(
        '--path', '-p',
        type=str,
        help='Custom path for config file (default: ./crucible.yaml)'
    )

    # ========================================================================
    # SOLVE SUBCOMMAND
    # ========================================================================
    solve_parser = subparsers.add_parser(
        'solve',
        help='Find the minimum-cost route through a grid',
        description='Search a digit grid and print the minimum total entry cost'
    )

    solve_parser.add_argument(
        'input_file',
        help='Path to the grid file (one row of digits per line)'
    )

    solve_parser.add_argument(
        '--config', '-c',
        help='Path to YAML configuration file'
    )

    solve_parser.add_argument(
        '--max-straight', '-k',
        type=int,
        help='Longest straight run before a turn is required (default: 3)'
    )

    solve_parser.add_argument(
        '--start',
        nargs=2,
        type=_cell,
        metavar=('ROW', 'COL'),
        help='Start cell (default: 0 0)'
    )

    solve_parser.add_argument(
        '--target',
        nargs=2,
        type=_cell,
        metavar=('ROW', 'COL'),
        help='Target cell (default: bottom-right)'
    )

    solve_parser.add_argument(
        '--heading',
        nargs='+',
        choices=[heading.value for heading in Heading],
        help='Initial heading(s) to search from (default: east south)'
    )

    solve_parser.add_argument(
        '--show-path',
        action='store_true',
        help='Print the grid with the cheapest route drawn on it'
    )

    solve_parser.add_argument(
        '--export',
        nargs='+',
        choices=['json', 'csv'],
        help='Export sweep results in the given formats'
    )

    solve_parser.add_argument(
        '--output-dir', '-o',
        help='Directory for exported files (default: current directory)'
    )

    solve_parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Set logging level (default: INFO). Use DEBUG to trace each search.'
    )

    solve_parser.add_argument(
        '--log-file',
        help='Also write logs to this file'
    )

    return parser
