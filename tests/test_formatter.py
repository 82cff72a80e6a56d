"""
Tests for the PatternFormatter and the format spec table.

Uses a deterministic stub localizer so results do not depend on the
installed CLDR data.
"""

import logging
import re

import pytest

from datefmt.config import Config
from datefmt.errors import LocaleFallback
from datefmt.formatting.format_spec import FORMAT_SPECS, FormatSpec, resolve_spec
from datefmt.formatting.localization import BaseLocalizer
from datefmt.formatting.pattern_formatter import PatternFormatter, get_pattern_formatter
from datefmt.normalization.instant import Instant

MONTHS = {
    "en": ["January", "February", "March", "April", "May", "June", "July",
           "August", "September", "October", "November", "December"],
    "es": ["enero", "febrero", "marzo", "abril", "mayo", "junio", "julio",
           "agosto", "septiembre", "octubre", "noviembre", "diciembre"],
}
WEEKDAYS = {
    "en": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"],
    "es": ["lunes", "martes", "miércoles", "jueves", "viernes", "sábado", "domingo"],
}


class StubLocalizer(BaseLocalizer):
    """Knows only 'en' and 'es' and records every call"""

    def __init__(self):
        self.calls = []

    def resolve_locale(self, locale):
        self.calls.append(("resolve", locale))
        if locale not in MONTHS:
            raise LocaleFallback(locale)
        return locale

    def format_fields(self, instant, locale, fields):
        self.calls.append(("format", locale, fields))
        d = instant.to_date()
        month = MONTHS[locale][d.month - 1]
        weekday = WEEKDAYS[locale][d.weekday()]
        if locale == "es":
            text = f"{d.day} de {month} de {d.year}"
            return f"{weekday}, {text}" if fields == "full" else text
        text = f"{month} {d.day}, {d.year}"
        return f"{weekday}, {text}" if fields == "full" else text

    def name_tokens(self, locale):
        return MONTHS[locale] + WEEKDAYS[locale]


class TestFormatSpecs:
    """Test suite for the format spec table"""

    def test_matrix_covers_every_scope_and_style(self):
        for scope in (Config.SCOPE_DATE, Config.SCOPE_DATETIME):
            for style in Config.STYLES:
                spec = FORMAT_SPECS[(scope, style)]
                assert spec.scope == scope
                assert spec.style == style
                assert spec.include_time is (scope == Config.SCOPE_DATETIME)

    def test_simple_is_numeric(self):
        assert not FORMAT_SPECS[(Config.SCOPE_DATE, "simple")].localized
        assert FORMAT_SPECS[(Config.SCOPE_DATE, "long")].fields == "long"
        assert FORMAT_SPECS[(Config.SCOPE_DATETIME, "full")].fields == "full"

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            FORMAT_SPECS[("date", "short")] = FormatSpec("date", "short", None, False)

    @pytest.mark.parametrize("style", ["bogus", "", None, 3, "SIMPLE"])
    def test_unknown_style_resolves_to_simple(self, style):
        assert resolve_spec(style, False).style == "simple"
        assert resolve_spec(style, True).style == "simple"
        assert resolve_spec(style, True).include_time is True


class TestPatternFormatter:
    """Test suite for PatternFormatter"""

    @pytest.fixture
    def localizer(self):
        return StubLocalizer()

    @pytest.fixture
    def formatter(self, localizer):
        """Create formatter with the stub localizer"""
        return PatternFormatter(localizer=localizer)

    @pytest.fixture
    def instant(self):
        return Instant(2023, 6, 15, 14, 30, 45)

    @pytest.mark.parametrize("style,include_time,expected", [
        ("simple", False, "2023-06-15"),
        ("simple", True, "2023-06-15 14:30:45"),
        ("long", False, "June 15, 2023"),
        ("long", True, "June 15, 2023 14:30:45"),
        ("full", False, "Thursday, June 15, 2023"),
        ("full", True, "Thursday, June 15, 2023 14:30:45"),
    ])
    def test_render_matrix(self, formatter, instant, style, include_time, expected):
        assert formatter.render(instant, "en", style, include_time) == expected

    @pytest.mark.parametrize("style", Config.STYLES)
    def test_time_only_when_requested(self, formatter, style):
        instant = Instant(2021, 1, 2, 3, 4, 5)
        without_time = formatter.render(instant, "en", style, False)
        with_time = formatter.render(instant, "en", style, True)
        assert not re.search(r"\d{2}:\d{2}", without_time)
        assert with_time.endswith(" 03:04:05")
        assert with_time == f"{without_time} 03:04:05"

    def test_long_day_has_no_leading_zero(self, formatter):
        assert formatter.render(Instant(2023, 6, 5), "en", "long") == "June 5, 2023"

    def test_simple_does_not_call_format_fields(self, formatter, localizer, instant):
        formatter.render(instant, "en", "simple")
        assert not [call for call in localizer.calls if call[0] == "format"]

    def test_unknown_style_matches_simple(self, formatter, instant):
        assert formatter.render(instant, "en", "bogus") == formatter.render(instant, "en", "simple")
        assert formatter.render(instant, "en", "bogus", True) == "2023-06-15 14:30:45"

    def test_default_locale_when_none(self, formatter, localizer, instant):
        assert formatter.render(instant, None, "long") == "June 15, 2023"
        assert ("resolve", Config.DEFAULT_LOCALE) in localizer.calls

    def test_other_locale(self, formatter, instant):
        assert formatter.render(instant, "es", "full") == "jueves, 15 de junio de 2023"

    def test_unknown_locale_falls_back(self, formatter, instant, caplog):
        with caplog.at_level(logging.WARNING):
            result = formatter.render(instant, "zz-ZZ", "full")
        assert result == "Thursday, June 15, 2023"
        assert "zz-ZZ" in caplog.text

    def test_unknown_locale_simple_returns_string(self, formatter, instant):
        assert formatter.render(instant, "zz-ZZ", "simple") == "2023-06-15"

    def test_strict_mode_raises(self, localizer, instant):
        formatter = PatternFormatter(localizer=localizer, strict_locale=True)
        with pytest.raises(LocaleFallback) as exc_info:
            formatter.render(instant, "zz-ZZ", "simple")
        assert exc_info.value.locale == "zz-ZZ"

    def test_rejected_default_locale_raises(self, localizer, instant):
        formatter = PatternFormatter(localizer=localizer, default_locale="xx")
        with pytest.raises(LocaleFallback):
            formatter.render(instant, "zz-ZZ", "long")

    def test_settings_follow_config(self, formatter, instant, monkeypatch):
        monkeypatch.setattr(Config, "STRICT_LOCALE", True)
        with pytest.raises(LocaleFallback):
            formatter.render(instant, "zz-ZZ", "simple")
        monkeypatch.setattr(Config, "STRICT_LOCALE", False)
        monkeypatch.setattr(Config, "DEFAULT_LOCALE", "es")
        assert formatter.render(instant, "zz-ZZ", "long") == "15 de junio de 2023"

    def test_explicit_settings_override_config(self, localizer, instant, monkeypatch):
        monkeypatch.setattr(Config, "STRICT_LOCALE", True)
        formatter = PatternFormatter(localizer=localizer, strict_locale=False)
        assert formatter.render(instant, "zz-ZZ", "simple") == "2023-06-15"
        assert formatter.with_strict_locale(True).strict_locale is True

    def test_capitalization_off_by_default(self, formatter, instant):
        assert formatter.render(instant, "es", "full") == "jueves, 15 de junio de 2023"

    def test_capitalization_for_configured_language(self, localizer, instant):
        formatter = PatternFormatter(localizer=localizer, capitalize_languages=["es"])
        assert formatter.render(instant, "es", "full") == "Jueves, 15 de Junio de 2023"
        # "de" is not a month or weekday name
        assert " de " in formatter.render(instant, "es", "long")

    def test_capitalization_leaves_other_languages_alone(self, localizer, instant):
        formatter = PatternFormatter(localizer=localizer, capitalize_languages=["es"])
        assert formatter.render(instant, "en", "full") == "Thursday, June 15, 2023"

    def test_shared_instance(self):
        assert get_pattern_formatter() is get_pattern_formatter()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
