"""Per-day bucketing, lifecycle classification and collaboration linkage.

One full pass over the decoded records; nothing is carried between passes.
Records whose creation date cannot be normalized are left out of every
bucket but stay in ``Dataset.historical``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

from helpdesk_app.analytics.aggregations.technician import compute_technician_metrics
from helpdesk_app.core.config import LIFECYCLE_COLLABORATION, RAW_FIELDS
from helpdesk_app.core.dates import normalize_date
from helpdesk_app.core.mappers import map_ticket
from helpdesk_app.core.models import DailyBucket, Dataset, RawRecord, Ticket, UpcomingProject
from helpdesk_app.core.status import classify_lifecycle

logger = logging.getLogger(__name__)


def place_ticket(bucket: DailyBucket, first_assignees: dict[str, str], ticket: Ticket) -> str | None:
    """Place one ticket into its day bucket, linking repeat ticket numbers.

    Parameters
    ----------
    bucket : DailyBucket
        The day the ticket was created on.
    first_assignees : dict[str, str]
        Ticket number -> assignee first observed on this day (updated in place).
    ticket : Ticket
        The projected ticket.

    Returns
    -------
    str or None
        The lifecycle list the ticket (or its collaboration entry) went to,
        or None when it was a same-assignee duplicate and dropped.
    """
    number = ticket.ticket_number
    if number and number in first_assignees:
        original = first_assignees[number]
        if ticket.assignee == original:
            return None
        bucket.collaboration.append(ticket.with_collaborator(original, ticket.assignee))
        return LIFECYCLE_COLLABORATION

    if number:
        first_assignees[number] = ticket.assignee
    lifecycle = classify_lifecycle(ticket)
    # lifecycle names double as DailyBucket list attributes
    getattr(bucket, lifecycle).append(ticket)
    return lifecycle


def build_daily_dataset(
    records: Iterable[RawRecord],
    upcoming: Mapping[str, Sequence[UpcomingProject]] | None = None,
) -> Dataset:
    """Group records by creation day and compute each day's rollups.

    Parameters
    ----------
    records : iterable of dict
        Decoded export rows, in source order.
    upcoming : mapping, optional
        Date key -> upcoming projects, attached unmodified to matching days.

    Returns
    -------
    Dataset
        Buckets ordered by descending date key, the full record list, and
        the number of records excluded for an unparsable date.
    """
    historical = list(records)
    buckets: dict[str, DailyBucket] = {}
    first_seen: dict[str, dict[str, str]] = {}
    excluded = 0
    duplicates = 0

    for record in historical:
        normalized = normalize_date(record.get(RAW_FIELDS["created_on"]))
        if normalized is None:
            excluded += 1
            continue
        key = normalized.date_key
        bucket = buckets.get(key)
        if bucket is None:
            bucket = DailyBucket(date_key=key, date=normalized.formatted)
            buckets[key] = bucket
            first_seen[key] = {}
        if place_ticket(bucket, first_seen[key], map_ticket(record)) is None:
            duplicates += 1

    upcoming = upcoming or {}
    for key, bucket in buckets.items():
        bucket.technician_metrics = compute_technician_metrics(bucket.all_tickets())
        bucket.upcoming_projects = list(upcoming.get(key, ()))

    if duplicates:
        logger.debug("Dropped %s same-assignee duplicate row(s)", duplicates)
    ordered = {key: buckets[key] for key in sorted(buckets, reverse=True)}
    return Dataset(historical=historical, days=ordered, excluded_count=excluded)
