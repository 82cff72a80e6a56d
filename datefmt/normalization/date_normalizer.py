"""
Date normalization module for turning heterogeneous date inputs into an Instant.

Accepts datetime/date objects, epoch milliseconds, and strings. Strings are
tried against strict date-only patterns first so that a bare calendar date is
always read in local time, then ISO-8601 with time, then free-form text.
"""

import logging
import math
import re
from datetime import date, datetime
from typing import Optional

import ciso8601
import dateparser

from datefmt.config import Config
from datefmt.errors import InvalidInput
from datefmt.normalization.instant import Instant

logger = logging.getLogger(__name__)

ISO_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
US_DATE_RE = re.compile(r"^(\d{2})/(\d{2})/(\d{4})$")


class DateNormalizer:
    """Normalizes date inputs to a local-calendar Instant"""

    def __init__(self, max_input_length: int = Config.MAX_INPUT_LENGTH,
                 parser_settings: Optional[dict] = None):
        """
        Initialize date normalizer.

        Args:
            max_input_length: Longest string handed to the parsers
            parser_settings: dateparser settings, defaults to Config.DATEPARSER_SETTINGS
        """
        self.max_input_length = max_input_length
        self.parser_settings = dict(parser_settings or Config.DATEPARSER_SETTINGS)

    def normalize(self, value=None) -> Instant:
        """
        Normalize any accepted input to an Instant.

        Args:
            value: None (now), datetime, date, epoch milliseconds (int/float) or str

        Returns:
            Instant in host local time

        Raises:
            InvalidInput: if the value is of an unsupported type or cannot be parsed
        """
        if value is None:
            return Instant.now()

        # datetime is a subclass of date, check it first
        if isinstance(value, datetime):
            return Instant.from_datetime(value)
        if isinstance(value, date):
            return Instant(value.year, value.month, value.day)

        # bool is an int subclass but never a timestamp
        if isinstance(value, bool):
            raise InvalidInput(value, "expected a date, timestamp, or date string")
        if isinstance(value, (int, float)):
            return self._from_timestamp_ms(value)

        if isinstance(value, str):
            return self._from_string(value)

        raise InvalidInput(value, "expected a date, timestamp, or date string")

    def _from_timestamp_ms(self, value) -> Instant:
        """Epoch milliseconds (UTC) to local calendar fields"""
        if isinstance(value, float) and not math.isfinite(value):
            raise InvalidInput(value, "timestamp is not a finite number")
        try:
            dt = datetime.fromtimestamp(value / 1000)
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidInput(value, f"timestamp out of range ({e})") from e
        return Instant.from_datetime(dt)

    def _from_string(self, value: str) -> Instant:
        text = value.strip()
        if not text:
            raise InvalidInput(value, "empty date string")
        if len(text) > self.max_input_length:
            raise InvalidInput(value, f"longer than {self.max_input_length} characters")

        # Fast path: YYYY-MM-DD as a local calendar date, never UTC midnight
        match = ISO_DATE_RE.match(text)
        if match:
            year, month, day = (int(part) for part in match.groups())
            return self._local_date(value, year, month, day)

        # Fast path: MM/DD/YYYY
        match = US_DATE_RE.match(text)
        if match:
            month, day, year = (int(part) for part in match.groups())
            return self._local_date(value, year, month, day)

        # ISO-8601 with a time component; offsets are honored
        try:
            parsed = ciso8601.parse_datetime(text)
        except ValueError:
            parsed = None
        if parsed is not None:
            logger.debug(f"Parsed {value!r} as ISO-8601 datetime")
            return Instant.from_datetime(parsed)

        # Flexible fallback
        try:
            parsed = dateparser.parse(text, settings=self.parser_settings)
        except (ValueError, TypeError, OverflowError) as e:
            raise InvalidInput(value, f"free-form parser failed ({e})") from e
        if parsed is None:
            raise InvalidInput(value)

        logger.debug(f"Parsed {value!r} with free-form parser")
        return Instant.from_datetime(parsed)

    @staticmethod
    def _local_date(value: str, year: int, month: int, day: int) -> Instant:
        try:
            return Instant(year, month, day)
        except InvalidInput as e:
            raise InvalidInput(value, e.reason) from e


# Global instance (singleton)
_date_normalizer_instance = None


def get_date_normalizer() -> DateNormalizer:
    """Get global DateNormalizer instance"""
    global _date_normalizer_instance
    if _date_normalizer_instance is None:
        _date_normalizer_instance = DateNormalizer()
    return _date_normalizer_instance
