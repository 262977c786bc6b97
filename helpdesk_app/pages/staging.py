"""Staging room page: audit a pasted batch, then append or replace history."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from helpdesk_app.app import current_dataset, draft_store, register_page
from helpdesk_app.core.codec import DecodeError
from helpdesk_app.core.config import FORMAT_CSV
from helpdesk_app.features.staging import APPEND, REPLACE, audit_batch, commit_batch, select_rows, summarize


@register_page("Staging Room")
def staging_page():
    st.title("Data Reconciliation & Staging")
    st.caption("Flags rows with missing IDs, statuses or subjects, unparsable dates and non-standard ISO clauses.")
    dataset = current_dataset()
    if dataset is None:
        return
    historical = dataset.historical

    batch = st.text_area("Paste CSV batch", height=240)
    if st.button("Analyze", type="primary", disabled=not batch.strip()):
        try:
            st.session_state["staging_rows"] = audit_batch(batch, historical)
        except DecodeError as exc:
            st.error(f"Failed to parse batch: {exc}")

    rows = st.session_state.get("staging_rows")
    if not rows:
        return
    summary = summarize(rows)
    cols = st.columns(5)
    cols[0].metric("Total", summary.total)
    cols[1].metric("Verified", summary.valid)
    cols[2].metric("Critical", summary.errors)
    cols[3].metric("Warnings", summary.warnings)
    cols[4].metric("Duplicates", summary.duplicates)

    view = st.radio("Show", ["all", "errors", "warnings", "duplicates"], horizontal=True)
    shown = select_rows(rows, view)
    st.dataframe(
        pd.DataFrame(
            [
                {**r.data, "audit_status": r.status, "issues": "; ".join(r.issues), "duplicate": r.is_duplicate}
                for r in shown
            ]
        ),
        hide_index=True,
    )

    append_col, replace_col = st.columns(2)
    mode = None
    if append_col.button("Append to history"):
        mode = APPEND
    if replace_col.button("Replace history"):
        mode = REPLACE
    if mode:
        try:
            draft_store().save(commit_batch(historical, rows, mode), FORMAT_CSV)
        except ValueError as exc:
            st.error(str(exc))
            return
        if summary.errors:
            st.info(f"{summary.errors} row(s) with critical errors were skipped.")
        st.session_state.pop("staging_rows", None)
        st.success("History updated.")
