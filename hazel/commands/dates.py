"""Due-date phrases for reminders.

Handles:
    "today 10:35pm"
    "tomorrow 10:35pm", "tmr 10:35pm", "tml 10:35pm"
    "9jun 10:30pm"

A phrase is a day part and a clock part separated by whitespace. Each part has
its own small grammar (parse_day, parse_clock); resolve() combines them into
a local datetime.

An explicit day like "9jun" always lands in the current year, even if that
date has already passed.
"""

import re
from datetime import datetime, time, timedelta, date

_TODAY = {"today"}
_TOMORROW = {"tomorrow", "tmr", "tml"}

_MONTHS = {
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
}

# "9jun", "25dec"
_EXPLICIT_DAY = re.compile(r"(\d{1,2})([a-z]{3})", re.ASCII)

# "10:35pm", "1:05am"
_CLOCK = re.compile(r"(\d{1,2}):(\d{2})([ap]m)", re.ASCII)


# --- Day parsing ---

def parse_day(text, today):
    """Parse a day part relative to `today`. Returns a date or None."""
    t = text.strip().lower()
    if t in _TODAY:
        return today
    if t in _TOMORROW:
        return today + timedelta(days=1)

    m = _EXPLICIT_DAY.fullmatch(t)
    if m is None:
        return None
    month = _MONTHS.get(m.group(2))
    if month is None:
        return None
    try:
        return date(today.year, month, int(m.group(1)))
    except ValueError:
        return None  # "31feb", "0jun"


# --- Clock parsing ---

def parse_clock(text):
    """Parse "H:MM am/pm" (12-hour clock). Returns a time or None."""
    m = _CLOCK.fullmatch(text.strip().lower())
    if m is None:
        return None
    hour, minute = int(m.group(1)), int(m.group(2))
    if not 1 <= hour <= 12 or minute > 59:
        return None
    return time(_apply_ampm(hour, m.group(3)), minute)


def _apply_ampm(hour, ampm):
    """Convert a 12-hour clock hour to 24h."""
    if ampm == "pm" and hour != 12:
        return hour + 12
    if ampm == "am" and hour == 12:
        return 0
    return hour


# --- Resolution ---

def _local_now(now):
    if now is None:
        return datetime.now()
    if now.tzinfo is not None:
        return now.astimezone().replace(tzinfo=None)
    return now


def resolve(phrase, now=None):
    """Resolve a full phrase like "tmr 10:35pm" to an aware local datetime.

    Args:
        phrase: Day part and clock part separated by whitespace.
        now: Current moment; defaults to datetime.now(). Only "today" and
            the tomorrow words, plus the year of explicit days, depend on it.

    Returns:
        datetime (seconds and microseconds zero, tzinfo set to the local
        zone) or None if the phrase doesn't fit the grammar.
    """
    parts = phrase.split()
    if len(parts) != 2:
        return None
    day_text, clock_text = parts

    day = parse_day(day_text, _local_now(now).date())
    if day is None:
        return None
    clock = parse_clock(clock_text)
    if clock is None:
        return None
    return datetime.combine(day, clock).astimezone()


# --- Standalone test ---

if __name__ == "__main__":
    tests = [
        "today 10:35pm",
        "ToDay 10:35pm",
        "tmr 10:35pm",
        "tml 12:05am",
        "9jun 10:30pm",
        "31feb 10:30pm",
        "9jun",
        "9jun 22:30",
        "next friday 10:30pm",
    ]
    for t in tests:
        result = resolve(t)
        print(f"  {t!r:30s} => {result.isoformat() if result else None}")
