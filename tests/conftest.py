"""
Shared fixtures.

Timezones are given as POSIX TZ strings so the tests do not depend on the
host's zoneinfo database.
"""

import time

import pytest

TIMEZONES = [
    "UTC0",
    "EST5",        # UTC-5, behind UTC
    "HST10",       # UTC-10
    "IST-5:30",    # UTC+5:30
    "LINT-14",     # UTC+14, furthest ahead
]


def _set_tz(monkeypatch, tz):
    monkeypatch.setenv("TZ", tz)
    time.tzset()


@pytest.fixture(params=TIMEZONES)
def any_tz(request, monkeypatch):
    """Run a test once per host timezone"""
    _set_tz(monkeypatch, request.param)
    yield request.param
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def set_tz(monkeypatch):
    """Switch the host timezone for a single test"""
    def _switch(tz):
        _set_tz(monkeypatch, tz)
    yield _switch
    monkeypatch.undo()
    time.tzset()
