"""Staging feature: audit a candidate batch and commit its clean rows."""

from helpdesk_app.features.staging.audit import (
    APPEND,
    ERROR,
    REPLACE,
    VALID,
    WARNING,
    AuditRow,
    AuditSummary,
    audit_batch,
    audit_record,
    commit_batch,
    select_rows,
    summarize,
)

__all__ = [
    "APPEND",
    "ERROR",
    "REPLACE",
    "VALID",
    "WARNING",
    "AuditRow",
    "AuditSummary",
    "audit_batch",
    "audit_record",
    "commit_batch",
    "select_rows",
    "summarize",
]
