"""Reconciliation audit for a candidate batch before it joins the history."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

from helpdesk_app.core.codec import decode, encode
from helpdesk_app.core.config import (
    DEFAULT_ISO_CLAUSE,
    MANDATORY_CRITICAL,
    MANDATORY_WARNING,
    RAW_FIELDS,
    RECOGNIZED_ISO_STANDARDS,
    SETTINGS,
)
from helpdesk_app.core.dates import normalize_date
from helpdesk_app.core.models import RawRecord

logger = logging.getLogger(__name__)

VALID = "valid"
WARNING = "warning"
ERROR = "error"

APPEND = "append"
REPLACE = "replace"


@dataclass(slots=True)
class AuditRow:
    data: RawRecord
    status: str = VALID
    issues: list[str] = field(default_factory=list)
    is_duplicate: bool = False

    def flag(self, issue: str, severity: str) -> None:
        self.issues.append(issue)
        if severity == ERROR or self.status != ERROR:
            self.status = severity


@dataclass(frozen=True, slots=True)
class AuditSummary:
    total: int = 0
    errors: int = 0
    warnings: int = 0
    duplicates: int = 0
    valid: int = 0


def _blank(value) -> bool:
    return value is None or str(value).strip() == ""


def audit_record(record: RawRecord, existing_ids: set[str]) -> AuditRow:
    """Classify one decoded row as valid, warning or error and note its issues."""
    row = AuditRow(data=record, is_duplicate=record.get(RAW_FIELDS["ticket_number"], "") in existing_ids)

    for key, label in MANDATORY_CRITICAL:
        if _blank(record.get(key)):
            row.flag(f"Empty {label}", ERROR)
    for key, label in MANDATORY_WARNING:
        if _blank(record.get(key)):
            row.flag(f"Empty {label}", WARNING)

    raw_date = record.get(RAW_FIELDS["created_on"])
    normalized = normalize_date(raw_date)
    if not _blank(raw_date) and normalized is None:
        row.flag("Unrecognized date format (expected a standard date or timestamp)", ERROR)
    elif normalized is not None and normalized.year < SETTINGS.min_plausible_year:
        row.flag(f"Suspicious date year: {normalized.year}", WARNING)

    clause = (record.get(RAW_FIELDS["iso_clause"]) or "").strip()
    if clause and clause != DEFAULT_ISO_CLAUSE and not any(std in clause for std in RECOGNIZED_ISO_STANDARDS):
        row.flag(f"Non-standard ISO reference: {clause}", WARNING)
    return row


def audit_batch(text, historical: Iterable[Mapping[str, str]]) -> list[AuditRow]:
    """Decode ``text`` and audit every non-empty row against ``historical``.

    Raises
    ------
    DecodeError
        When the batch cannot be read as text.
    """
    existing = {r.get(RAW_FIELDS["ticket_number"], "") for r in historical}
    existing.discard("")
    rows = [audit_record(rec, existing) for rec in decode(text) if not all(_blank(v) for v in rec.values())]
    logger.debug("Audited %s staged row(s)", len(rows))
    return rows


def summarize(rows: Sequence[AuditRow]) -> AuditSummary:
    return AuditSummary(
        total=len(rows),
        errors=sum(1 for r in rows if r.status == ERROR),
        warnings=sum(1 for r in rows if r.status == WARNING),
        duplicates=sum(1 for r in rows if r.is_duplicate),
        valid=sum(1 for r in rows if r.status == VALID and not r.is_duplicate),
    )


def select_rows(rows: Sequence[AuditRow], view: str = "all") -> list[AuditRow]:
    """Rows shown under one audit tab: all, errors, warnings or duplicates."""
    if view == "errors":
        return [r for r in rows if r.status == ERROR]
    if view == "warnings":
        return [r for r in rows if r.status == WARNING]
    if view == "duplicates":
        return [r for r in rows if r.is_duplicate]
    return list(rows)


def commit_batch(historical: Sequence[Mapping[str, str]], rows: Sequence[AuditRow], mode: str = APPEND) -> str:
    """Encode the committable (non-error) rows into tabular text.

    ``append`` writes the history followed by the batch; ``replace`` writes
    the batch alone.

    Raises
    ------
    ValueError
        On an unknown mode or when every row carries an error.
    """
    if mode not in (APPEND, REPLACE):
        raise ValueError(f"Unknown commit mode: {mode!r}")
    clean = [r.data for r in rows if r.status != ERROR]
    if not clean:
        raise ValueError("No valid rows to commit; fix the critical errors first")
    skipped = len(rows) - len(clean)
    if skipped:
        logger.info("Skipping %s row(s) with critical errors", skipped)
    final = [*historical, *clean] if mode == APPEND else clean
    return encode(final)
