"""Central configuration, constants, classification rules, and shared column definitions."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

# =============================================================================
# Tabular Codec Settings
# =============================================================================
FIELD_DELIMITER = ","
RECORD_DELIMITER = "\n"
QUOTE_CHAR = '"'
BYTE_ORDER_MARK = "\ufeff"

# =============================================================================
# Date Normalization
# =============================================================================
# Epoch values at or above this are milliseconds, below are seconds
EPOCH_MILLIS_THRESHOLD: int = 10_000_000_000
# Timezone used when converting epoch values into calendar days
TIMEZONE = "UTC"

# =============================================================================
# Lifecycle Classification
# =============================================================================
# Lowercase stage values that keep a ticket in the pending list
PENDING_STATUSES: frozenset[str] = frozenset(
    {
        "in progress",
        "open",
        "on hold",
        "scheduled",
    }
)

# Lowercase substrings of category/tags that mark preventive maintenance work
PREVENTIVE_KEYWORDS: Sequence[str] = ("pm", "preventive", "maintenance")

LIFECYCLE_MAIN = "main"
LIFECYCLE_PENDING = "pending"
LIFECYCLE_COLLABORATION = "collaboration"
LIFECYCLE_PREVENTIVE = "preventive"

# =============================================================================
# Technician Metrics
# =============================================================================
# (counter attribute, lowercase substring) checked in order; first match wins
METRIC_STATUS_ORDER: Sequence[tuple[str, str]] = (
    ("open", "open"),
    ("in_progress", "in progress"),
    ("on_hold", "on hold"),
    ("scheduled", "scheduled"),
    ("resolved", "resolved"),
    ("closed", "closed"),
)

# =============================================================================
# Ticket Projection
# =============================================================================
# Normalized raw header keys read by the ticket projection
RAW_FIELDS = {
    "ticket_number": "ticketIDsSequence",
    "created_on": "createdOn",
    "created_by": "createdBy",
    "subject": "subject",
    "assignee": "assignedTo",
    "status": "stage",
    "priority": "priority",
    "team": "helpdeskTeam",
    "category": "category",
    "tags": "tags",
    "time_spent": "timeSpent",
    "open_hours": "openTimeHours",
    "failed_sla": "failedSLAPolicy",
    "resolution": "resolution",
    "zone": "zone",
    "unit": "unit",
    "location": "location",
    "customer": "customer",
    "iso_clause": "isoClause",
    "description": "description",
    "risk_likelihood": "riskLikelihood",
    "risk_impact": "riskImpact",
    "hazard_category": "hazardCategory",
    "root_cause": "rootCause",
    "corrective_action": "correctiveAction",
    "preventive_action": "preventiveAction",
    "objective_id": "objectiveID",
    "facility_location": "facilityLocation",
    "stakeholder_type": "stakeholderType",
}

DEFAULT_CATEGORY = "General"
DEFAULT_ASSIGNEE = "Unassigned"
DEFAULT_ISO_CLAUSE = "N/A"

# =============================================================================
# Search / Sort
# =============================================================================
# Ticket attributes compared numerically (non-numeric coerced to 0)
NUMERIC_SORT_FIELDS: frozenset[str] = frozenset({"ticket_age_hours", "duration"})
SEARCH_FIELDS: Sequence[str] = ("item", "ticket_number", "assignee", "collab")
MATCH_ALL = "all"

# =============================================================================
# Staging Audit & Compliance
# =============================================================================
MANDATORY_CRITICAL: Sequence[tuple[str, str]] = (
    ("ticketIDsSequence", "Ticket ID"),
    ("createdOn", "Creation Date"),
    ("subject", "Subject"),
    ("stage", "Status"),
)

MANDATORY_WARNING: Sequence[tuple[str, str]] = (
    ("assignedTo", "Assignee"),
    ("priority", "Priority"),
)

RECOGNIZED_ISO_STANDARDS: Sequence[str] = ("ISO 9001", "ISO 14001", "ISO 41001", "ISO 45001")

# Minimal header set an ingest file must carry (display names, before normalization)
REQUIRED_HEADERS: Sequence[str] = (
    "Ticket IDs Sequence",
    "Created on",
    "Assigned to",
    "Subject",
    "Stage",
    "Priority",
)

# =============================================================================
# Draft Store Keys
# =============================================================================
DRAFT_TEXT_KEY = "app_ticket_data"
DRAFT_FORMAT_KEY = "app_ticket_format"
FORMAT_CSV = "csv"
FORMAT_JSON = "json"

# =============================================================================
# Display Columns
# =============================================================================
TICKET_TABLE_COLUMNS: Sequence[str] = (
    "ticket_number",
    "item",
    "assignee",
    "status",
    "priority",
    "category",
    "duration",
    "ticket_age_hours",
    "escalation",
)

COLLAB_TABLE_COLUMNS: Sequence[str] = (
    "ticket_number",
    "item",
    "assignee",
    "collab",
    "status",
    "priority",
    "duration",
)

METRIC_TABLE_COLUMNS: Sequence[str] = (
    "name",
    "open",
    "in_progress",
    "on_hold",
    "scheduled",
    "resolved",
    "closed",
    "other",
    "total_tickets",
    "total_work_hours",
)


@dataclass(slots=True)
class AppSettings:
    max_table_rows: int = 1000
    download_encoding: str = "utf-8"
    min_plausible_year: int = 2000


SETTINGS = AppSettings()
