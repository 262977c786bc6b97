"""Pure helpers to build the daily dashboard context for testing (no Streamlit)."""

from __future__ import annotations

from dataclasses import dataclass, field

from helpdesk_app.analytics.metrics.kpis import (
    DailyKpis,
    category_distribution,
    compliance_distribution,
    daily_kpis,
    priority_distribution,
)
from helpdesk_app.analytics.segments.filters import SortConfig, TicketFilter, filter_options, sort_and_filter
from helpdesk_app.core.models import DailyBucket, Dataset, Ticket


@dataclass(slots=True)
class DashboardContext:
    """Everything the dashboard page shows for one selected day."""

    bucket: DailyBucket | None
    index: int = 0
    day_count: int = 0
    has_older: bool = False
    has_newer: bool = False
    excluded_count: int = 0
    kpis: DailyKpis | None = None
    # Filtered and sorted lists for the selected day
    main: list[Ticket] = field(default_factory=list)
    pending: list[Ticket] = field(default_factory=list)
    collaboration: list[Ticket] = field(default_factory=list)
    preventive: list[Ticket] = field(default_factory=list)
    # Filter picker options
    statuses: list[str] = field(default_factory=list)
    priorities: list[str] = field(default_factory=list)
    # Chart data over the full history
    priority_distribution: dict[str, int] = field(default_factory=dict)
    category_distribution: dict[str, int] = field(default_factory=dict)
    compliance_distribution: dict[str, int] = field(default_factory=dict)


def build_dashboard_context(
    dataset: Dataset,
    index: int = 0,
    flt: TicketFilter | None = None,
    sort: SortConfig | None = None,
) -> DashboardContext:
    """Build context for the day at ``index`` (0 = most recent).

    Parameters
    ----------
    dataset : Dataset
        Result of a full pipeline pass.
    index : int
        Position in the descending day list; clamped into range.
    flt, sort : optional
        Applied independently to each of the four ticket lists.
    """
    if dataset.is_empty:
        return DashboardContext(bucket=None, excluded_count=dataset.excluded_count)

    index = min(max(index, 0), len(dataset.days) - 1)
    bucket = dataset.day(index)
    has_older, has_newer = dataset.neighbours(index)
    statuses, priorities = filter_options(bucket.all_tickets())
    history = dataset.historical
    return DashboardContext(
        bucket=bucket,
        index=index,
        day_count=len(dataset.days),
        has_older=has_older,
        has_newer=has_newer,
        excluded_count=dataset.excluded_count,
        kpis=daily_kpis(bucket, history),
        main=sort_and_filter(bucket.main, flt, sort),
        pending=sort_and_filter(bucket.pending, flt, sort),
        collaboration=sort_and_filter(bucket.collaboration, flt, sort),
        preventive=sort_and_filter(bucket.preventive, flt, sort),
        statuses=statuses,
        priorities=priorities,
        priority_distribution=priority_distribution(history),
        category_distribution=category_distribution(history),
        compliance_distribution=compliance_distribution(history),
    )
