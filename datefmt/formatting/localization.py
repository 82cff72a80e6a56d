"""
Localization backends for named month/weekday rendering.

Defines the abstract interface the formatter delegates to, so that tests can
inject a deterministic stub instead of the live locale database.
"""

import logging
from abc import ABC, abstractmethod
from typing import List

from babel import Locale, UnknownLocaleError
from babel.dates import format_date, get_day_names, get_month_names

from datefmt.errors import LocaleFallback
from datefmt.normalization.instant import Instant

logger = logging.getLogger(__name__)


class BaseLocalizer(ABC):
    """Abstract base class for localization backends"""

    @abstractmethod
    def resolve_locale(self, locale: str) -> str:
        """
        Check a locale tag and return the identifier the backend will use.

        Args:
            locale: Locale tag (e.g., "en", "es-MX", "pt_BR")

        Returns:
            Canonical locale identifier

        Raises:
            LocaleFallback: if the backend does not recognize the tag
        """
        pass

    @abstractmethod
    def format_fields(self, instant: Instant, locale: str, fields: str) -> str:
        """
        Render the date part of an instant with localized names.

        Args:
            instant: Normalized instant
            locale: Identifier returned by resolve_locale
            fields: "long" (year, month name, day) or "full" (weekday too)

        Returns:
            Localized date string
        """
        pass

    @abstractmethod
    def name_tokens(self, locale: str) -> List[str]:
        """
        Localized full month and weekday names for a locale.

        Used for cosmetic capitalization of localized output.
        """
        pass


class BabelLocalizer(BaseLocalizer):
    """Localizer backed by Babel and the CLDR data it ships"""

    def resolve_locale(self, locale: str) -> str:
        return str(self._parse(locale))

    def format_fields(self, instant: Instant, locale: str, fields: str) -> str:
        if fields not in ("long", "full"):
            raise ValueError(f"Unknown localized field set: {fields!r}")
        return format_date(instant.to_date(), format=fields, locale=self._parse(locale))

    def name_tokens(self, locale: str) -> List[str]:
        parsed = self._parse(locale)
        months = get_month_names("wide", locale=parsed)
        days = get_day_names("wide", locale=parsed)
        return list(months.values()) + list(days.values())

    @staticmethod
    def _parse(locale: str) -> Locale:
        # accept BCP-47 style "en-US" as well as "en_US"
        if not isinstance(locale, str):
            raise LocaleFallback(locale, "locale tag must be a string")
        try:
            return Locale.parse(locale.replace("-", "_"))
        except UnknownLocaleError as e:
            raise LocaleFallback(locale, f"unknown locale ({e})") from e
        except (ValueError, TypeError) as e:
            raise LocaleFallback(locale, f"malformed locale tag ({e})") from e
