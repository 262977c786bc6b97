"""Mapping decoded export rows into Ticket instances and tabular views."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import asdict

import pandas as pd

from helpdesk_app.analytics.metrics.derived import parse_int

from .config import DEFAULT_CATEGORY, DEFAULT_ISO_CLAUSE, RAW_FIELDS
from .models import TechnicianMetric, Ticket

_PROJECTED_KEYS: frozenset[str] = frozenset(RAW_FIELDS.values())


def _field(record: Mapping[str, str], name: str) -> str:
    value = record.get(RAW_FIELDS[name])
    if value is None:
        return ""
    return str(value).strip()


def map_escalation(failed_sla: str | None) -> str:
    return "Yes" if (failed_sla or "").strip().upper() == "TRUE" else "No"


def map_ticket(record: Mapping[str, str]) -> Ticket:
    """Project a raw record onto the fixed Ticket schema.

    Missing and empty values are treated alike. Category falls back to the
    tags field, then to "General"; numeric risk scores degrade to 0.
    Columns the projection does not read are kept in ``extra``.
    """
    tags = _field(record, "tags")
    likelihood = parse_int(_field(record, "risk_likelihood"))
    impact = parse_int(_field(record, "risk_impact"))
    return Ticket(
        ticket_number=_field(record, "ticket_number"),
        item=_field(record, "subject"),
        category=_field(record, "category") or tags or DEFAULT_CATEGORY,
        priority=_field(record, "priority"),
        status=_field(record, "status"),
        assignee=_field(record, "assignee"),
        created_on=_field(record, "created_on"),
        created_by=_field(record, "created_by"),
        duration=_field(record, "time_spent") or "0",
        team=_field(record, "team"),
        ticket_age_hours=_field(record, "open_hours") or "0",
        escalation=map_escalation(_field(record, "failed_sla")),
        remarks=_field(record, "resolution"),
        zone=_field(record, "zone"),
        unit=_field(record, "unit"),
        location=_field(record, "location"),
        customer=_field(record, "customer"),
        iso_clause=_field(record, "iso_clause") or DEFAULT_ISO_CLAUSE,
        tags=tags,
        description=_field(record, "description"),
        risk_likelihood=likelihood,
        risk_impact=impact,
        risk_level=likelihood * impact,
        hazard_category=_field(record, "hazard_category"),
        root_cause=_field(record, "root_cause"),
        corrective_action=_field(record, "corrective_action"),
        preventive_action=_field(record, "preventive_action"),
        objective_id=_field(record, "objective_id"),
        facility_location=_field(record, "facility_location"),
        stakeholder_type=_field(record, "stakeholder_type"),
        extra={k: v for k, v in record.items() if k not in _PROJECTED_KEYS},
    )


def tickets_to_dataframe(tickets: Iterable[Ticket], *, include_extra: bool = False) -> pd.DataFrame:
    rows = []
    for t in tickets:
        row = asdict(t)
        extra = row.pop("extra")
        row["collab"] = row["collab"] or ""
        if include_extra:
            for key, value in extra.items():
                row.setdefault(key, value)
        rows.append(row)
    return pd.DataFrame(rows)


def metrics_to_dataframe(metrics: Iterable[TechnicianMetric]) -> pd.DataFrame:
    return pd.DataFrame([asdict(m) for m in metrics])
