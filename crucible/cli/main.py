"""
Command-line entry point for crucible
Usage: crucible solve INPUT [--max-straight K] [--show-path] ...
"""

import sys
import logging
from pathlib import Path
from typing import List, Optional

from ..core.config import SearchConfig
from ..core.exceptions import ConfigError, MalformedInputError, UnreachableError
from ..core.grid import Grid
from ..core.sweep import SweepResult, best_result, sweep
from ..exporters import ExporterError, export_to_dataframe, export_to_json
from ..exporters.utils import DEFAULT_CSV_FILENAME, DEFAULT_JSON_FILENAME
from .argument_parser import setup_argument_parser
from .init_command import run_init_command
from .output import format_result, print_separator, render_route

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_UNREACHABLE = 3

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(log_level: str = 'INFO', log_file: Optional[Path] = None) -> None:
    """
    Configure the crucible logger to output to the console and optionally a file

    Handlers from an earlier call are replaced, so repeated invocations in one
    process do not duplicate output.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path to log file (always written at DEBUG)
    """
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    package_logger = logging.getLogger('crucible')
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.DEBUG)

    # Console handler (stderr keeps stdout for results)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, log_level.upper()))
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)


def load_config(args) -> SearchConfig:
    """
    Build the search configuration from an optional YAML file plus CLI overrides

    Raises:
        ConfigError: If the merged configuration is invalid
        FileNotFoundError: If --config points at a missing file
    """
    config = SearchConfig.from_yaml(args.config) if args.config else SearchConfig()

    return config.with_overrides(
        max_straight=args.max_straight,
        start=args.start,
        target=args.target,
        headings=args.heading,
        formats=args.export,
        directory=args.output_dir,
        log_level=args.log_level,
    )


def export_results(results: List[SweepResult], config: SearchConfig, logger: logging.Logger) -> None:
    """
    Write sweep results in every configured export format

    Args:
        results: Sweep results to export
        config: Search configuration (formats and output directory)
        logger: Logger instance
    """
    if not config.export_formats:
        return

    output_dir = config.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)

    if 'json' in config.export_formats:
        output_file = output_dir / DEFAULT_JSON_FILENAME
        export_to_json(results, output_file)
        print(f"📄 JSON saved to: {output_file}")

    if 'csv' in config.export_formats:
        output_file = output_dir / DEFAULT_CSV_FILENAME
        export_to_dataframe(results).write_csv(str(output_file))
        logger.info(f"CSV results exported to: {output_file}")
        print(f"📄 CSV saved to: {output_file}")


def run_solve_command(args) -> int:
    """
    Load a grid, search it, print the minimum cost and export results

    Returns:
        Exit code (0 = success, 1 = bad input or config, 3 = unreachable)
    """
    try:
        config = load_config(args)
    except (ConfigError, FileNotFoundError) as e:
        print(f"❌ {e}")
        return EXIT_INPUT_ERROR

    try:
        setup_logging(config.log_level, Path(args.log_file) if args.log_file else None)
    except OSError as e:
        print(f"❌ Cannot open log file {args.log_file}: {e}")
        return EXIT_INPUT_ERROR
    logger = logging.getLogger(__name__)

    try:
        grid = Grid.from_file(args.input_file)
    except FileNotFoundError:
        print(f"❌ Input file not found: {args.input_file}")
        return EXIT_INPUT_ERROR
    except (OSError, UnicodeDecodeError) as e:
        print(f"❌ Cannot read input file {args.input_file}: {e}")
        return EXIT_INPUT_ERROR
    except MalformedInputError as e:
        logger.error(f"Malformed grid in {args.input_file}: {e}")
        print(f"❌ Malformed grid: {e}")
        return EXIT_INPUT_ERROR

    target = config.resolve_target(grid)
    logger.info(
        f"Loaded {grid.rows}x{grid.cols} grid from {args.input_file}; "
        f"target {target}, max_straight={config.max_straight}"
    )

    results = sweep(grid, config.start_states(), target, config.max_straight)

    if len(results) > 1:
        for result in results:
            print(format_result(result))
        print_separator()

    try:
        export_results(results, config, logger)
    except (ExporterError, OSError) as e:
        logger.error(f"Export failed: {e}")
        print(f"❌ Export failed: {e}")
        return EXIT_INPUT_ERROR

    try:
        best = best_result(results)
    except UnreachableError as e:
        print(f"❌ {e}")
        return EXIT_UNREACHABLE

    if args.show_path:
        print(render_route(grid, best.route))
        print_separator()

    print(best.cost)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for crucible CLI"""
    parser = setup_argument_parser()
    args = parser.parse_args(argv)

    if args.command == 'init':
        return run_init_command(force=args.force, path=args.path)

    return run_solve_command(args)


if __name__ == '__main__':
    sys.exit(main())
