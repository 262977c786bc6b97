"""Reusable table helpers for Streamlit rendering."""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd
import streamlit as st

from helpdesk_app.core.column_config import get_columns
from helpdesk_app.core.config import SETTINGS
from helpdesk_app.core.mappers import metrics_to_dataframe, tickets_to_dataframe
from helpdesk_app.core.models import TechnicianMetric, Ticket

COLUMN_LABELS = {
    "ticket_number": "Ticket #",
    "item": "Subject",
    "assignee": "Assignee",
    "collab": "Collaborator",
    "status": "Status",
    "priority": "Priority",
    "category": "Category",
    "duration": "Duration (h)",
    "ticket_age_hours": "Age (h)",
    "escalation": "Escalated",
    "name": "Technician",
    "open": "Open",
    "in_progress": "In Progress",
    "on_hold": "On Hold",
    "scheduled": "Scheduled",
    "resolved": "Resolved",
    "closed": "Closed",
    "other": "Other",
    "total_tickets": "Total",
    "total_work_hours": "Work Hours",
}


def prepare_table(df: pd.DataFrame, set_name: str) -> pd.DataFrame:
    """Select the configured column set (in order) and apply display labels."""
    if df.empty:
        return df
    cols = [c for c in get_columns(set_name) if c in df.columns] or list(df.columns)
    return df[cols].rename(columns=COLUMN_LABELS)


def ticket_table(tickets: Iterable[Ticket], set_name: str = "tickets") -> pd.DataFrame:
    return prepare_table(tickets_to_dataframe(tickets), set_name)


def metric_table(metrics: Iterable[TechnicianMetric]) -> pd.DataFrame:
    return prepare_table(metrics_to_dataframe(metrics), "metrics")


def render_table(title: str, table: pd.DataFrame, *, empty_message: str = "No tickets.") -> None:
    st.subheader(f"{title} ({len(table)})")
    if table.empty:
        st.caption(empty_message)
        return
    st.dataframe(table.head(SETTINGS.max_table_rows), hide_index=True, use_container_width=True)


def download_button(label: str, table: pd.DataFrame, file_name: str, *, key: str | None = None) -> None:
    if table.empty:
        return
    csv = table.to_csv(index=False).encode(SETTINGS.download_encoding)
    st.download_button(label, data=csv, file_name=file_name, mime="text/csv", key=key)
