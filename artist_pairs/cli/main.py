"""
CLI main application module.

This module contains the main application entry point and high-level
application flow coordination for the artist pair finder.
"""

import logging
import sys

from ..constants import (
    EXIT_CONFIG_ERROR,
    EXIT_INPUT_ERROR,
    EXIT_UNEXPECTED_ERROR,
)

from ..core import (
    read_records,
    find_artist_pairs,
    log_processing_start,
    log_processing_summary,
    write_report,
    write_report_file,
)

from .parser import (
    create_argument_parser,
)

from ..utils import (
    setup_logging,
    _is_output_path_writable,
)

from ..config import ConfigError, ConfigLoader, ConfigSchema

logger = logging.getLogger(__name__)


def main(argv=None):
    """Main entry point for the script."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose)

    try:
        config = ConfigLoader.load(schema=ConfigSchema, cli_args=args)
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(EXIT_CONFIG_ERROR)

    if config.output_path:
        ok, reason = _is_output_path_writable(config.output_path)
        if not ok:
            logger.error(f"Invalid output path: {reason}")
            sys.exit(EXIT_INPUT_ERROR)

    read_result = read_records(config.input_path, strip_names=config.strip_names)
    if not read_result.ok:
        logger.error(f"Error: {read_result.error}")
        sys.exit(EXIT_INPUT_ERROR)

    try:
        log_processing_start(
            total_records=len(read_result.records),
            input_file=config.input_path,
            min_times=config.min_times,
        )

        entries, stats = find_artist_pairs(
            read_result.records,
            min_times=config.min_times,
            max_artists=config.max_artists_per_record,
        )

        if config.output_path:
            write_report_file(entries, config.output_path)
        else:
            write_report(entries, sys.stdout)
            sys.stdout.flush()

        log_processing_summary(stats)

    except OSError as e:
        logger.error(f"Failed to write report: {e}")
        sys.exit(EXIT_INPUT_ERROR)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        sys.exit(EXIT_UNEXPECTED_ERROR)
