"""Heuristic date normalization for loosely-typed export values.

Rules are tried in rank order and the first one producing a valid calendar
day wins:

1. bare 10-13 digit number -> Unix epoch (milliseconds at or above
   ``EPOCH_MILLIS_THRESHOLD``, seconds otherwise)
2. text starting with ``YYYY-MM-DD`` -> ISO-style date/time, keyed on the
   date as written (offsets are ignored)
3. text carrying a month name, a day and a 4-digit year -> calendar text parse
4. first three numeric groups -> (year, month, day) when the first group is a
   year, otherwise (month, day, year) unless the first group exceeds 12, in
   which case (day, month, year)

Two-digit years are not interpreted; such values come back as ``None``.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from datetime import date, datetime

import pandas as pd
import pytz

from .config import EPOCH_MILLIS_THRESHOLD, TIMEZONE
from .models import NormalizedDate

_EPOCH = re.compile(r"^\d{10,13}$")
_ISO_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}")
_MONTH_NAME = re.compile(r"\b(jan|feb|mar|apr|may|jun|jul|aug|sep|sept|oct|nov|dec)[a-z]*\.?\b", re.IGNORECASE)
_YEAR = re.compile(r"(?<!\d)\d{4}(?!\d)")
_DAY = re.compile(r"(?<!\d)\d{1,2}(?!\d)")
_NUMBER = re.compile(r"\d+")


def _local_day(ts) -> date | None:
    if ts is None or pd.isna(ts):
        return None
    if getattr(ts, "tzinfo", None) is not None:
        ts = ts.tz_convert(pytz.timezone(TIMEZONE))
    return date(ts.year, ts.month, ts.day)


def parse_epoch(text: str) -> date | None:
    if not _EPOCH.match(text):
        return None
    value = int(text)
    unit = "ms" if value >= EPOCH_MILLIS_THRESHOLD else "s"
    return _local_day(pd.to_datetime(value, unit=unit, utc=True, errors="coerce"))


def parse_iso(text: str) -> date | None:
    if not _ISO_PREFIX.match(text):
        return None
    ts = pd.to_datetime(text.replace(" ", "T", 1), errors="coerce")
    if pd.isna(ts):
        return None
    # wall-clock date as written; an offset never moves the day
    return date(ts.year, ts.month, ts.day)


def parse_calendar_text(text: str) -> date | None:
    # Require every component to be present so the parser never fills gaps from "today"
    if not (_MONTH_NAME.search(text) and _YEAR.search(text) and _DAY.search(text)):
        return None
    try:
        return _local_day(pd.to_datetime(text, errors="coerce"))
    except (TypeError, ValueError, OverflowError):
        return None


def parse_numeric_groups(text: str) -> date | None:
    groups = [int(g) for g in _NUMBER.findall(text)[:3]]
    if len(groups) < 3:
        return None
    first, second, third = groups
    if first > 1000:
        year, month, day = first, second, third
    elif third > 1000:
        year = third
        if first > 12:
            day, month = first, second
        else:
            month, day = first, second
    else:
        return None
    try:
        return date(year, month, day)
    except ValueError:
        return None


DATE_RULES: tuple[tuple[str, Callable[[str], date | None]], ...] = (
    ("epoch", parse_epoch),
    ("iso", parse_iso),
    ("calendar_text", parse_calendar_text),
    ("numeric_groups", parse_numeric_groups),
)


def _to_text(value) -> str | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return str(int(value)) if value.is_integer() else str(value)
    text = str(value).strip()
    return text or None


def _from_day(day: date) -> NormalizedDate:
    return NormalizedDate(
        date_key=f"{day.year:04d}-{day.month:02d}-{day.day:02d}",
        formatted=f"{day.day:02d}/{day.month:02d}/{day.year:04d}",
        year=day.year,
    )


def normalize_date(value) -> NormalizedDate | None:
    """Normalize a date-ish value into a sortable key, display string and year.

    Never raises; returns ``None`` when no rule yields a valid calendar day.

    Examples
    --------
    >>> normalize_date("2025-07-04 17:50:01").date_key
    '2025-07-04'
    >>> normalize_date("21/08/2023").formatted
    '21/08/2023'
    >>> normalize_date("N/A") is None
    True
    """
    if value is pd.NaT:
        return None
    if isinstance(value, pd.Timestamp):
        day = _local_day(value)
        return _from_day(day) if day is not None else None
    if isinstance(value, datetime):
        return _from_day(value.date())
    if isinstance(value, date):
        return _from_day(value)

    text = _to_text(value)
    if text is None:
        return None
    for _name, rule in DATE_RULES:
        day = rule(text)
        if day is not None:
            return _from_day(day)
    return None
