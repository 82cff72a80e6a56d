"""
Canonical normalized date value.

An Instant is a point in local calendar time. It holds plain calendar fields
and no timezone; every input is converted to host local time before it
becomes an Instant.
"""

from dataclasses import dataclass
from datetime import date, datetime

from datefmt.errors import InvalidInput


@dataclass(frozen=True)
class Instant:
    """Immutable local-calendar instant"""
    year: int
    month: int  # 1-12
    day: int  # calendar-valid for month/year
    hour: int = 0
    minute: int = 0
    second: int = 0

    def __post_init__(self):
        # datetime enforces proleptic Gregorian ranges, including leap days
        try:
            datetime(self.year, self.month, self.day, self.hour, self.minute, self.second)
        except (TypeError, ValueError) as e:
            fields = (self.year, self.month, self.day, self.hour, self.minute, self.second)
            raise InvalidInput(fields, f"out of range calendar fields ({e})") from e

    @classmethod
    def from_datetime(cls, value: datetime) -> "Instant":
        """
        Build an Instant from a datetime.

        Aware datetimes are converted to host local time first.
        Microseconds are dropped.
        """
        if value.tzinfo is not None:
            value = value.astimezone()
        return cls(value.year, value.month, value.day,
                   value.hour, value.minute, value.second)

    @classmethod
    def now(cls) -> "Instant":
        """Current local instant"""
        return cls.from_datetime(datetime.now())

    def to_datetime(self) -> datetime:
        """Naive local datetime with the same fields"""
        return datetime(self.year, self.month, self.day,
                        self.hour, self.minute, self.second)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def date_token(self) -> str:
        """Zero-padded YYYY-MM-DD"""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def time_token(self) -> str:
        """Zero-padded 24-hour HH:MM:SS"""
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
