"""
Pattern formatter for rendering an Instant as a string.

Simple style is rendered directly from the numeric fields. Long and full
styles delegate month/weekday names, ordering, and punctuation to the
localizer. Time, when requested, is always appended as 24-hour HH:MM:SS.
"""

import logging
import re
from typing import Iterable, Optional

from datefmt.config import Config
from datefmt.errors import LocaleFallback
from datefmt.formatting.format_spec import FormatSpec, resolve_spec
from datefmt.formatting.localization import BabelLocalizer, BaseLocalizer
from datefmt.normalization.instant import Instant

logger = logging.getLogger(__name__)


class PatternFormatter:
    """
    Renders instants for a (locale, style, include_time) request.

    Locale handling is best-effort: a rejected locale is logged and the
    render is retried with the default locale. With strict_locale=True the
    LocaleFallback error is raised to the caller instead.
    """

    def __init__(
        self,
        localizer: Optional[BaseLocalizer] = None,
        default_locale: Optional[str] = None,
        strict_locale: Optional[bool] = None,
        capitalize_languages: Optional[Iterable[str]] = None,
    ):
        """
        Initialize pattern formatter.

        Settings left as None follow the current Config values at render time.

        Args:
            localizer: Localization backend, defaults to BabelLocalizer
            default_locale: Locale used when none is given or the given one is rejected
            strict_locale: Raise LocaleFallback instead of falling back
            capitalize_languages: Languages whose lower-case month/weekday names get capitalized
        """
        self.localizer = localizer or BabelLocalizer()
        self._default_locale = default_locale
        self._strict_locale = strict_locale
        self._capitalize_languages = (
            None if capitalize_languages is None
            else frozenset(lang.lower() for lang in capitalize_languages)
        )

    @property
    def default_locale(self) -> str:
        return Config.DEFAULT_LOCALE if self._default_locale is None else self._default_locale

    @property
    def strict_locale(self) -> bool:
        return Config.STRICT_LOCALE if self._strict_locale is None else self._strict_locale

    @property
    def capitalize_languages(self) -> frozenset:
        if self._capitalize_languages is None:
            return frozenset(lang.lower() for lang in Config.CAPITALIZE_LANGUAGES)
        return self._capitalize_languages

    def with_strict_locale(self, strict_locale: bool) -> "PatternFormatter":
        """Copy of this formatter with an explicit strict-locale setting"""
        formatter = PatternFormatter(localizer=self.localizer, strict_locale=strict_locale)
        formatter._default_locale = self._default_locale
        formatter._capitalize_languages = self._capitalize_languages
        return formatter

    def render(
        self,
        instant: Instant,
        locale: Optional[str] = None,
        style: Optional[str] = Config.DEFAULT_STYLE,
        include_time: bool = False,
    ) -> str:
        """
        Render an instant.

        Args:
            instant: Normalized instant
            locale: Locale tag, None for the default locale
            style: "simple", "long" or "full"; anything else renders as simple
            include_time: Append HH:MM:SS

        Returns:
            Formatted string

        Raises:
            LocaleFallback: only in strict mode, when the locale is rejected
        """
        spec = resolve_spec(style, include_time)
        if spec.style != style:
            logger.debug(f"Unknown style {style!r}, using {spec.style!r}")

        requested = locale or self.default_locale
        try:
            return self._render_spec(instant, requested, spec)
        except LocaleFallback as e:
            if self.strict_locale or requested == self.default_locale:
                raise
            logger.warning(f"{e}. Using default locale {self.default_locale!r}")
            return self._render_spec(instant, self.default_locale, spec)

    def _render_spec(self, instant: Instant, locale: str, spec: FormatSpec) -> str:
        # resolve for every style so that strict mode rejects bad tags uniformly
        resolved = self.localizer.resolve_locale(locale)

        if spec.localized:
            text = self.localizer.format_fields(instant, resolved, spec.fields)
            text = self._capitalize_names(text, resolved)
        else:
            text = instant.date_token()

        if spec.include_time:
            text = f"{text} {instant.time_token()}"
        return text

    def _capitalize_names(self, text: str, locale: str) -> str:
        """Capitalize lower-case month/weekday names for configured languages"""
        language = re.split(r"[-_]", locale, maxsplit=1)[0].lower()
        if language not in self.capitalize_languages:
            return text

        tokens = sorted(
            {token for token in self.localizer.name_tokens(locale) if token[:1].islower()},
            key=len,
            reverse=True,
        )
        for token in tokens:
            text = re.sub(rf"\b{re.escape(token)}\b", token[0].upper() + token[1:], text)
        return text


# Global instance (singleton)
_pattern_formatter_instance = None


def get_pattern_formatter() -> PatternFormatter:
    """Get global PatternFormatter instance"""
    global _pattern_formatter_instance
    if _pattern_formatter_instance is None:
        _pattern_formatter_instance = PatternFormatter()
    return _pattern_formatter_instance
