"""Typed exceptions for date normalization and locale resolution."""


class DateFormatError(ValueError):
    """Base class for datefmt errors."""


class InvalidInput(DateFormatError):
    """Raised when an input cannot be resolved to a valid calendar instant."""

    def __init__(self, value, reason: str = "could not parse into a valid date"):
        self.value = value
        self.reason = reason
        shown = repr(value)
        if len(shown) > 80:
            shown = shown[:77] + "..."
        super().__init__(f"Invalid date input {shown}: {reason}")


class LocaleFallback(DateFormatError):
    """Raised when the localization backend rejects a locale tag."""

    def __init__(self, locale, reason: str = "unrecognized locale"):
        self.locale = locale
        self.reason = reason
        super().__init__(f"Locale {locale!r} rejected: {reason}")
