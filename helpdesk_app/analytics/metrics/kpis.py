"""Daily report KPIs and categorical distributions (pure functions)."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

import pandas as pd

from helpdesk_app.analytics.metrics.derived import parse_number
from helpdesk_app.core.config import DEFAULT_CATEGORY, DEFAULT_ISO_CLAUSE, RAW_FIELDS
from helpdesk_app.core.models import DailyBucket
from helpdesk_app.core.status import is_closed_status

CRITICAL_PRIORITY_MARKERS: tuple[str, ...] = ("urgent", "critical")


@dataclass(frozen=True, slots=True)
class DailyKpis:
    total_today: int
    pending_today: int
    closed_today: int
    critical_today: int
    avg_time_spent: str
    closure_rate: int


def average_time_spent(historical: Iterable[Mapping[str, str]]) -> str:
    """Mean of positive, parsable time-spent values over all records ("N/A" when none)."""
    values = pd.Series([parse_number(r.get(RAW_FIELDS["time_spent"])) for r in historical], dtype=float)
    positive = values[values > 0]
    if positive.empty:
        return "N/A"
    return f"{positive.mean():.2f}"


def daily_kpis(bucket: DailyBucket, historical: Iterable[Mapping[str, str]]) -> DailyKpis:
    closed_main = sum(1 for t in bucket.main if is_closed_status(t.status))
    closed_all = closed_main + sum(1 for t in bucket.preventive if is_closed_status(t.status))
    critical = sum(
        1 for t in bucket.main if any(marker in t.priority.lower() for marker in CRITICAL_PRIORITY_MARKERS)
    )
    total_all = bucket.ticket_count
    return DailyKpis(
        total_today=len(bucket.main) + len(bucket.collaboration),
        pending_today=len(bucket.pending),
        closed_today=closed_main,
        critical_today=critical,
        avg_time_spent=average_time_spent(historical),
        closure_rate=math.floor(closed_all * 100 / total_all + 0.5) if total_all else 0,
    )


def distribution(records: Iterable[Mapping[str, str]], field: str, fallback: str = "Unknown") -> dict[str, int]:
    """Count records per value of a raw field, most common first."""
    values = [(r.get(field) or "").strip() or fallback for r in records]
    if not values:
        return {}
    counts = pd.Series(values).value_counts(sort=True)
    return {str(k): int(v) for k, v in counts.items()}


def priority_distribution(records: Iterable[Mapping[str, str]]) -> dict[str, int]:
    return distribution(records, RAW_FIELDS["priority"])


def category_distribution(records: Iterable[Mapping[str, str]]) -> dict[str, int]:
    return distribution(records, RAW_FIELDS["category"], fallback=DEFAULT_CATEGORY)


def compliance_distribution(records: Iterable[Mapping[str, str]]) -> dict[str, int]:
    return distribution(records, RAW_FIELDS["iso_clause"], fallback=DEFAULT_ISO_CLAUSE)
