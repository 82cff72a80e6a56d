"""
datefmt CLI

Thin demonstration driver around the formatting library.

Usage:
    python -m datefmt.cli                          # Format the current date
    python -m datefmt.cli 2023-06-15 --style full  # Format a given date
    python -m datefmt.cli 1686839445000 --ms --time
    python -m datefmt.cli --demo                   # Example table across locales and styles
"""

import argparse
import logging
import sys
from datetime import datetime
from typing import List, Optional

from dotenv import load_dotenv

from datefmt import api
from datefmt.config import Config
from datefmt.errors import InvalidInput, LocaleFallback

logger = logging.getLogger(__name__)

DEMO_DATE = datetime(2023, 6, 15, 14, 30, 45)
DEMO_LOCALES = ["en", "en-US", "es", "es-MX", "fr", "de", "it", "ja", "pt", "ru", "zh", "ar"]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="datefmt", description="Format dates for a locale and style")
    parser.add_argument("value", nargs="?", default=None,
                        help="Date string or epoch milliseconds (with --ms). Defaults to now.")
    parser.add_argument("--locale", "-l", default=None,
                        help="Locale code, e.g. en, es-MX. Defaults to DATEFMT_LOCALE or 'en'.")
    parser.add_argument("--style", "-s", default=Config.DEFAULT_STYLE,
                        help="simple, long or full (unknown styles render as simple)")
    parser.add_argument("--time", "-t", action="store_true", help="Include HH:MM:SS")
    parser.add_argument("--ms", action="store_true", help="Treat VALUE as epoch milliseconds")
    parser.add_argument("--strict", action="store_true", help="Fail on unrecognized locales")
    parser.add_argument("--demo", action="store_true", help="Print an example table and exit")
    parser.add_argument("--config", action="store_true", help="Print the configuration summary and exit")
    return parser.parse_args(argv)


def display_demo() -> None:
    """Print a fixed example date across locales and styles"""
    print("\n" + "=" * 80)
    print(f"datefmt examples for {DEMO_DATE.isoformat()}")
    print("=" * 80)

    for locale in DEMO_LOCALES:
        print(f"\n{locale}:")
        print("-" * 80)
        for style in Config.STYLES:
            print(f"  {'date ' + style:20s} {api.format_date(DEMO_DATE, locale, style)}")
        print(f"  {'datetime simple':20s} {api.format_date_time_simple(DEMO_DATE, locale)}")
        print(f"  {'datetime full':20s} {api.format_date_time_full(DEMO_DATE, locale)}")
    print("=" * 80 + "\n")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI"""
    load_dotenv()
    logging.basicConfig(
        level=Config.cli_log_level(),
        format=Config.LOG_FORMAT,
        datefmt=Config.LOG_DATE_FORMAT
    )
    args = parse_args(argv)

    if args.config:
        Config.print_config_summary()
        return 0
    if args.demo:
        display_demo()
        return 0

    value = args.value
    if value is not None and args.ms:
        try:
            value = float(value)
        except ValueError:
            print(f"Error: --ms expects a number, got {args.value!r}", file=sys.stderr)
            return 1

    try:
        result = api.format(
            value,
            args.locale or Config.cli_locale(),
            include_time=args.time,
            style=args.style,
            strict=args.strict or None,
        )
    except (InvalidInput, LocaleFallback) as e:
        logger.debug(f"Formatting failed: {e}", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
