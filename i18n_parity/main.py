"""Command line entry point for i18n-parity."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import structlog

from i18n_parity import __version__
from i18n_parity.config import Settings, load_config
from i18n_parity.errors import ConfigurationError, LocaleLoadError
from i18n_parity.parity import check_all_locales_sync, failing_locales, render

EXIT_OK = 0
EXIT_THRESHOLD_FAILED = 1
EXIT_CONFIG_ERROR = 2
EXIT_LOAD_ERROR = 3

EPILOG = """\
examples:
  i18n-parity --ref fr --dir ./src/locales
  i18n-parity --ref en --format json --fail-on missing,empty

exit codes:
  0  all checks passed
  1  a --fail-on category has findings
  2  invalid configuration
  3  locale files could not be loaded
"""


def setup_logging(debug: bool = False) -> None:
    """Configure structured logging. Logs go to stderr, reports to stdout."""
    level = logging.DEBUG if debug else logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=level,
        handlers=[handler],
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            (
                structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
                if debug
                else structlog.processors.JSONRenderer()
            ),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Unset options stay ``None`` so config file and environment values apply.
    """
    parser = argparse.ArgumentParser(
        prog="i18n-parity",
        description="Compare locale JSON files against a reference locale.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version", action="version", version=f"i18n-parity {__version__}"
    )
    parser.add_argument(
        "--ref", dest="reference_locale",
        help="Reference locale file name without extension (default: fr)",
    )
    parser.add_argument(
        "--dir", dest="locale_dir", type=Path,
        help="Locales directory (default: src/locales)",
    )
    parser.add_argument(
        "--format", dest="output_format", choices=["table", "json"],
        help="Output format (default: table)",
    )
    parser.add_argument(
        "--fail-on", dest="fail_on",
        help="Comma list of missing,empty,extra (default: none)",
    )
    parser.add_argument("--config-file", type=Path, help="Path to a YAML config file")
    parser.add_argument(
        "--debug", action="store_true", default=None, help="Enable debug logging"
    )

    return parser.parse_args(argv)


def run_check(settings: Settings) -> int:
    """Run the comparison described by ``settings`` and print the report."""
    logger = structlog.get_logger(__name__)

    results = check_all_locales_sync(
        settings.reference_locale,
        settings.resolved_locale_dir(),
        settings.extension,
    )
    print(render(results, settings.output_format))

    failing = failing_locales(results, settings.fail_on_categories)
    if failing:
        logger.warning(
            "Locale check failed",
            fail_on=settings.fail_on,
            locales=failing,
        )
        return EXIT_THRESHOLD_FAILED
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return the process exit code."""
    args = parse_args(argv)
    setup_logging(bool(args.debug))

    try:
        settings = load_config(
            args.config_file,
            reference_locale=args.reference_locale,
            locale_dir=args.locale_dir,
            output_format=args.output_format,
            fail_on=args.fail_on,
            debug=args.debug,
        )
    except ConfigurationError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    if settings.debug and not args.debug:
        setup_logging(True)

    try:
        return run_check(settings)
    except LocaleLoadError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return EXIT_LOAD_ERROR
    except ConfigurationError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return EXIT_CONFIG_ERROR


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
