"""Compliance library page: browse the standards catalog and review clause suggestions."""

from __future__ import annotations

import json

import pandas as pd
import streamlit as st

from helpdesk_app.app import current_dataset, draft_store, register_page
from helpdesk_app.core.codec import encode
from helpdesk_app.core.config import FORMAT_CSV
from helpdesk_app.features.compliance import (
    apply_suggestions,
    build_suggestion_request,
    parse_suggestions,
    search_standards,
    standard_domains,
)


@register_page("Compliance Library")
def compliance_page():
    st.title("Regulatory Compliance Library")
    domain_col, search_col = st.columns([1, 2])
    domain = domain_col.selectbox("Domain", standard_domains())
    term = search_col.text_input("Search standards or clauses", "")
    matches = search_standards(term, domain)
    if matches:
        st.dataframe(pd.DataFrame([s.to_dict() for s in matches]), hide_index=True)
    else:
        st.info("No standards match the current search.")

    dataset = current_dataset()
    if dataset is None or dataset.is_empty:
        return
    st.markdown("---")
    st.subheader("Clause suggestions")
    st.caption("Send the request to a classification service and paste its JSON reply below.")
    request = build_suggestion_request(dataset.main + dataset.preventive)
    st.download_button(
        "Download suggestion request",
        data=json.dumps(request, indent=2).encode("utf-8"),
        file_name="clause_request.json",
        mime="application/json",
    )
    reply = st.text_area("Suggestion reply (JSON)", height=200)
    if not reply.strip():
        return
    try:
        suggestions = parse_suggestions(reply)
    except ValueError as exc:
        st.warning(str(exc))
        return
    accepted = [s for s in suggestions if st.checkbox(f"{s.ticket_id}: {s.suggested_clause} ({s.confidence:.0%}) {s.reason}")]
    if accepted and st.button("Apply accepted suggestions", type="primary"):
        draft_store().save(encode(apply_suggestions(dataset.historical, accepted)), FORMAT_CSV)
        st.success(f"Applied {len(accepted)} suggestion(s).")
