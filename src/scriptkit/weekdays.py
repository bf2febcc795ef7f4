"""Weekday name lookup."""

import calendar
from datetime import date


def weekday_name(day=None, *, abbreviated: bool = False) -> str:
    """
    Return the weekday name for `day`.

    day: cron-style number 0..7 (0 and 7 are Sunday, 1 is Monday),
         a date/datetime, or None for today.
    """
    if day is None:
        day = date.today()

    if isinstance(day, date):
        index = day.weekday()
    elif isinstance(day, int) and not isinstance(day, bool):
        if not 0 <= day <= 7:
            raise ValueError(f"Weekday number must be in 0..7, got {day}")
        index = (day - 1) % 7
    else:
        raise TypeError(f"Expected int, date or None, got {type(day).__name__}")

    names = calendar.day_abbr if abbreviated else calendar.day_name
    return names[index]
