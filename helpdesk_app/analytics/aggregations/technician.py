"""Technician-based aggregations."""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from helpdesk_app.analytics.metrics.derived import format_hours, parse_number
from helpdesk_app.core.config import DEFAULT_ASSIGNEE, METRIC_STATUS_ORDER
from helpdesk_app.core.models import TechnicianMetric, Ticket
from helpdesk_app.core.status import metric_status_bucket

COUNTER_COLUMNS: tuple[str, ...] = tuple(counter for counter, _ in METRIC_STATUS_ORDER) + ("other",)


def compute_technician_metrics(tickets: Iterable[Ticket]) -> list[TechnicianMetric]:
    """Roll tickets up per assignee: status counters, total tickets and logged hours.

    Rows come out in order of each technician's first ticket. ``total_tickets``
    always equals the sum of the status counters.
    """
    rows = [
        {
            "assignee": (t.assignee or "").strip() or DEFAULT_ASSIGNEE,
            "bucket": metric_status_bucket(t.status),
            "hours": parse_number(t.duration),
        }
        for t in tickets
    ]
    if not rows:
        return []
    df = pd.DataFrame(rows)
    counts = df.groupby(["assignee", "bucket"], sort=False).size().unstack(fill_value=0)
    hours = df.groupby("assignee", sort=False)["hours"].sum()

    metrics: list[TechnicianMetric] = []
    for name in df["assignee"].drop_duplicates():
        counters = {col: int(counts.loc[name].get(col, 0)) for col in COUNTER_COLUMNS}
        metrics.append(
            TechnicianMetric(
                name=name,
                **counters,
                total_tickets=sum(counters.values()),
                total_work_hours=format_hours(float(hours.loc[name])),
            )
        )
    return metrics
