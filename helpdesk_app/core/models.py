"""Domain data models for service-desk tickets, daily buckets, and technician rollups."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

RawRecord = dict[str, str]


@dataclass(frozen=True, slots=True)
class NormalizedDate:
    date_key: str
    formatted: str
    year: int


@dataclass(slots=True)
class Ticket:
    ticket_number: str
    item: str
    category: str
    priority: str
    status: str
    assignee: str
    created_on: str
    created_by: str = ""
    duration: str = "0"
    team: str = ""
    ticket_age_hours: str = "0"
    escalation: str = "No"
    remarks: str = ""
    zone: str = ""
    unit: str = ""
    location: str = ""
    customer: str = ""
    iso_clause: str = ""
    tags: str = ""
    description: str = ""
    collab: str | None = None

    # Risk & compliance enrichment
    risk_likelihood: int = 0
    risk_impact: int = 0
    risk_level: int = 0
    hazard_category: str = ""
    root_cause: str = ""
    corrective_action: str = ""
    preventive_action: str = ""
    objective_id: str = ""
    facility_location: str = ""
    stakeholder_type: str = ""

    # Uninterpreted columns from the source row
    extra: dict[str, str] = field(default_factory=dict)

    @property
    def id(self) -> str:
        return self.ticket_number

    def with_collaborator(self, original_assignee: str, collaborator: str) -> Ticket:
        """Copy of this ticket owned by ``original_assignee`` with ``collaborator`` attached."""
        return replace(self, assignee=original_assignee, collab=collaborator, extra=dict(self.extra))


@dataclass(frozen=True, slots=True)
class TechnicianMetric:
    name: str
    open: int = 0
    in_progress: int = 0
    on_hold: int = 0
    scheduled: int = 0
    resolved: int = 0
    closed: int = 0
    other: int = 0
    total_tickets: int = 0
    total_work_hours: str = "0"

    @property
    def id(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class UpcomingProject:
    date: str
    item: str
    ticket_number: str
    duration: str = ""
    assignee: str = ""
    status: str = ""
    team: str = ""
    ticket_age_hours: str = ""
    escalation: str = ""
    deadline: str = ""
    due_date: str = ""
    remarks: str = ""


@dataclass(slots=True)
class DailyBucket:
    date_key: str
    date: str
    main: list[Ticket] = field(default_factory=list)
    pending: list[Ticket] = field(default_factory=list)
    collaboration: list[Ticket] = field(default_factory=list)
    preventive: list[Ticket] = field(default_factory=list)
    technician_metrics: list[TechnicianMetric] = field(default_factory=list)
    upcoming_projects: list[UpcomingProject] = field(default_factory=list)

    def all_tickets(self) -> list[Ticket]:
        return [*self.main, *self.pending, *self.preventive, *self.collaboration]

    @property
    def ticket_count(self) -> int:
        return len(self.main) + len(self.pending) + len(self.preventive) + len(self.collaboration)


@dataclass(slots=True)
class Dataset:
    """Result of one full pipeline pass over the current text."""

    historical: list[RawRecord] = field(default_factory=list)
    days: dict[str, DailyBucket] = field(default_factory=dict)
    excluded_count: int = 0

    @property
    def date_keys(self) -> list[str]:
        return list(self.days)

    @property
    def main(self) -> list[Ticket]:
        return [t for bucket in self.days.values() for t in bucket.main]

    @property
    def pending(self) -> list[Ticket]:
        return [t for bucket in self.days.values() for t in bucket.pending]

    @property
    def collaboration(self) -> list[Ticket]:
        return [t for bucket in self.days.values() for t in bucket.collaboration]

    @property
    def preventive(self) -> list[Ticket]:
        return [t for bucket in self.days.values() for t in bucket.preventive]

    @property
    def is_empty(self) -> bool:
        return not self.days

    def day(self, index: int = 0) -> DailyBucket | None:
        """Bucket at ``index`` in descending date order (0 is the most recent day)."""
        keys = self.date_keys
        if not keys or index < 0 or index >= len(keys):
            return None
        return self.days[keys[index]]

    def neighbours(self, index: int) -> tuple[bool, bool]:
        """Return ``(has_older, has_newer)`` for navigation from ``index``."""
        count = len(self.days)
        return index < count - 1, index > 0
