from __future__ import annotations

from datetime import date, datetime

FRENCH_DAYS = ["Dimanche", "Lundi", "Mardi", "Mercredi", "Jeudi", "Vendredi", "Samedi"]


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def iso_day(value: datetime | date) -> str:
    return value.strftime("%Y-%m-%d")


def french_weekday(value: datetime | date) -> str:
    # Python: Monday=0, the planning grid starts on Sunday.
    return FRENCH_DAYS[(value.weekday() + 1) % 7]
