"""
Central configuration for the date formatting library.

This module contains the library defaults and constants.
All other modules import configuration from here to maintain consistency.
The library itself reads no environment variables; only the CLI does.
"""

import os
from typing import Dict, Tuple


class Config:
    """Library configuration and constants"""

    # ==========================================
    # Locale Settings
    # ==========================================
    DEFAULT_LOCALE = "en"

    # When True an unrecognized locale raises instead of falling back
    STRICT_LOCALE = False

    # Languages whose month/weekday names get capitalized after localization.
    # Empty means localized output is returned exactly as the localizer emits it.
    CAPITALIZE_LANGUAGES: Tuple[str, ...] = ()

    # ==========================================
    # Format Styles
    # ==========================================
    STYLE_SIMPLE = "simple"
    STYLE_LONG = "long"
    STYLE_FULL = "full"
    STYLES: Tuple[str, ...] = (STYLE_SIMPLE, STYLE_LONG, STYLE_FULL)
    DEFAULT_STYLE = STYLE_SIMPLE

    SCOPE_DATE = "date"
    SCOPE_DATETIME = "datetime"

    # ==========================================
    # Input Parsing
    # ==========================================
    # Reject absurdly long strings before they reach the free-form parser
    MAX_INPUT_LENGTH = 256

    # Settings for the free-form parser (dateparser). RETURN_AS_TIMEZONE_AWARE
    # is left at its default: aware when the string names a zone, naive otherwise.
    DATEPARSER_SETTINGS: Dict[str, object] = {
        "PREFER_DAY_OF_MONTH": "first",
    }

    # ==========================================
    # Logging Configuration
    # ==========================================
    LOG_LEVEL = "WARNING"  # CLI default, overridden by LOG_LEVEL in the environment
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    # ==========================================
    # Class Methods
    # ==========================================
    @classmethod
    def cli_log_level(cls) -> str:
        """
        Log level for the demonstration CLI.

        Returns:
            str: LOG_LEVEL from the environment, or the class default
        """
        return os.getenv("LOG_LEVEL", cls.LOG_LEVEL).upper()

    @classmethod
    def cli_locale(cls) -> str:
        """
        Default locale for the demonstration CLI.

        Returns:
            str: DATEFMT_LOCALE from the environment, or DEFAULT_LOCALE
        """
        return os.getenv("DATEFMT_LOCALE", cls.DEFAULT_LOCALE)

    @classmethod
    def print_config_summary(cls) -> None:
        """Print configuration summary for debugging"""
        print("=" * 60)
        print("datefmt - Configuration Summary")
        print("=" * 60)
        print(f"Default locale:       {cls.DEFAULT_LOCALE}")
        print(f"CLI locale:           {cls.cli_locale()}")
        print(f"Default style:        {cls.DEFAULT_STYLE}")
        print(f"Styles:               {', '.join(cls.STYLES)}")
        print(f"Strict locale:        {cls.STRICT_LOCALE}")
        print(f"Capitalize languages: {', '.join(cls.CAPITALIZE_LANGUAGES) or '(none)'}")
        print(f"Max input length:     {cls.MAX_INPUT_LENGTH}")
        print(f"Log level:            {cls.cli_log_level()}")
        print("=" * 60)
