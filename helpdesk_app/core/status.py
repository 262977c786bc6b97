"""Lifecycle classification and status bucketing.

This module provides the classification rules the daily aggregation applies
to every ticket. It uses the configuration from config.py
(PENDING_STATUSES, PREVENTIVE_KEYWORDS, METRIC_STATUS_ORDER).
"""

from __future__ import annotations

from .config import (
    LIFECYCLE_MAIN,
    LIFECYCLE_PENDING,
    LIFECYCLE_PREVENTIVE,
    METRIC_STATUS_ORDER,
    PENDING_STATUSES,
    PREVENTIVE_KEYWORDS,
)
from .models import Ticket

CLOSED_STATUSES_LOWER: frozenset[str] = frozenset({"closed", "resolved"})


def is_pending_status(value: str | None) -> bool:
    """Check whether a stage keeps the ticket in the pending list.

    Parameters
    ----------
    value : str | None
        Raw stage string.

    Returns
    -------
    bool
        True for in progress, open, on hold and scheduled (case-insensitive).
    """
    if not value:
        return False
    return str(value).strip().lower() in PENDING_STATUSES


def is_preventive(*labels: str | None) -> bool:
    """Check whether any category/tag label marks preventive maintenance work."""
    for label in labels:
        text = (label or "").lower()
        if any(keyword in text for keyword in PREVENTIVE_KEYWORDS):
            return True
    return False


def classify_lifecycle(ticket: Ticket) -> str:
    """Return the lifecycle list a first-seen ticket belongs to.

    Pending is checked first, then preventive maintenance, then main; a
    ticket lands in exactly one of them.
    """
    if is_pending_status(ticket.status):
        return LIFECYCLE_PENDING
    if is_preventive(ticket.category, ticket.tags):
        return LIFECYCLE_PREVENTIVE
    return LIFECYCLE_MAIN


def metric_status_bucket(value: str | None) -> str:
    """Map a stage to the technician metric counter it increments.

    Returns "other" when no counter substring matches.
    """
    text = (value or "").lower()
    for counter, needle in METRIC_STATUS_ORDER:
        if needle in text:
            return counter
    return "other"


def is_closed_status(value: str | None) -> bool:
    return (value or "").strip().lower() in CLOSED_STATUSES_LOWER
