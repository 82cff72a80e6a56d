"""
Public entry points.

Every function normalizes its input and renders it with the shared
PatternFormatter. The convenience functions only fix (style, include_time)
and call format().

Usage:
    from datefmt.api import format_date_simple, format_date_full
    format_date_simple("2023-06-15")          # "2023-06-15"
    format_date_full("2023-06-15", "en")      # "Thursday, June 15, 2023"
"""

from typing import Optional

from datefmt.config import Config
from datefmt.formatting.pattern_formatter import get_pattern_formatter
from datefmt.normalization.date_normalizer import get_date_normalizer
from datefmt.normalization.instant import Instant


def normalize(value=None) -> Instant:
    """Normalize a date input to a local Instant (raises InvalidInput)"""
    return get_date_normalizer().normalize(value)


def format(
    value=None,
    locale: Optional[str] = None,
    include_time: bool = False,
    style: str = Config.DEFAULT_STYLE,
    strict: Optional[bool] = None,
) -> str:
    """
    Format a date according to the given options.

    Args:
        value: datetime, date, epoch milliseconds, date string, or None for now
        locale: Locale code (e.g., "en", "es", "fr", "en-US"), None for Config.DEFAULT_LOCALE
        include_time: Whether to append HH:MM:SS
        style: "simple", "long" or "full"; unknown styles render as simple
        strict: Raise LocaleFallback on unrecognized locales, None for Config.STRICT_LOCALE

    Returns:
        Formatted date string

    Raises:
        InvalidInput: if the value cannot be parsed
        LocaleFallback: only in strict mode
    """
    instant = normalize(value)
    formatter = get_pattern_formatter()
    if strict is not None and strict != formatter.strict_locale:
        formatter = formatter.with_strict_locale(strict)
    return formatter.render(instant, locale, style, include_time)


def format_date(value=None, locale: Optional[str] = None, style: str = Config.DEFAULT_STYLE) -> str:
    """Format a date without time in the given style"""
    return format(value, locale, include_time=False, style=style)


def format_date_time(value=None, locale: Optional[str] = None, style: str = Config.DEFAULT_STYLE) -> str:
    """Format a date with time in the given style"""
    return format(value, locale, include_time=True, style=style)


def format_date_simple(value=None, locale: Optional[str] = None) -> str:
    """Numeric date, e.g. 2023-06-15"""
    return format_date(value, locale, Config.STYLE_SIMPLE)


def format_date_long(value=None, locale: Optional[str] = None) -> str:
    """Date with month name and no weekday, e.g. June 15, 2023"""
    return format_date(value, locale, Config.STYLE_LONG)


def format_date_full(value=None, locale: Optional[str] = None) -> str:
    """Date with weekday and month name, e.g. Thursday, June 15, 2023"""
    return format_date(value, locale, Config.STYLE_FULL)


def format_date_time_simple(value=None, locale: Optional[str] = None) -> str:
    """Numeric date and time, e.g. 2023-06-15 14:30:45"""
    return format_date_time(value, locale, Config.STYLE_SIMPLE)


def format_date_time_full(value=None, locale: Optional[str] = None) -> str:
    """Full date and time, e.g. Thursday, June 15, 2023 14:30:45"""
    return format_date_time(value, locale, Config.STYLE_FULL)
