import pytest
from datetime import date
from pydantic import ValidationError

from app.config import Settings
from app.utils.clock import FixedClock, SystemClock


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("", []),
        ("30,23,16,9,2", [30, 23, 16, 9, 2]),
        (" 7 , 1 ,", [7, 1]),
    ],
)
def test_expiry_reminder_days_parsing(raw, expected):
    assert Settings(EXPIRY_REMINDER_DAYS=raw).expiry_reminder_days == expected


@pytest.mark.parametrize("raw", ["30,weekly", "7;1", "-2"])
def test_malformed_reminder_days_rejected(raw):
    with pytest.raises(ValidationError):
        Settings(EXPIRY_REMINDER_DAYS=raw)


def test_malformed_reminder_days_from_environment(monkeypatch):
    monkeypatch.setenv("EXPIRY_REMINDER_DAYS", "30,weekly")

    with pytest.raises(ValidationError):
        Settings()


def test_fixed_clock():
    assert FixedClock(date(2026, 3, 1)).today() == date(2026, 3, 1)


def test_system_clock_uses_timezone():
    # Kiritimati (UTC+14) and Niue (UTC-11) never share a calendar day
    ahead = SystemClock("Pacific/Kiritimati").today()
    behind = SystemClock("Pacific/Niue").today()

    assert ahead > behind
