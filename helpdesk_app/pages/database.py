"""Database page: view, edit, convert and reset the current ticket data."""

from __future__ import annotations

import streamlit as st

from helpdesk_app.app import draft_store, register_page
from helpdesk_app.core.codec import FormatConversionError, convert_format, decode, records_to_json
from helpdesk_app.core.config import FORMAT_CSV, FORMAT_JSON, SETTINGS
from helpdesk_app.core.service import load_sample_text, missing_required_headers


@register_page("Database")
def database_page():
    st.title("Database")
    st.caption("The single text blob every dashboard pass is computed from.")
    store = draft_store()
    text, fmt = store.load(load_sample_text())

    target = st.radio("Format", [FORMAT_CSV, FORMAT_JSON], index=0 if fmt == FORMAT_CSV else 1, horizontal=True)
    if target != fmt:
        try:
            store.save(convert_format(text, fmt, target), target)
            st.rerun()
        except FormatConversionError as exc:
            st.warning(f"Could not convert to {target.upper()}: {exc}")

    edited = st.text_area("Data", value=text, height=420)
    save_col, upload_col, reset_col = st.columns(3)

    if save_col.button("Save", type="primary"):
        try:
            csv_text = convert_format(edited, fmt, FORMAT_CSV)
        except FormatConversionError as exc:
            st.warning(f"Not saved: {exc}")
        else:
            missing = missing_required_headers(csv_text)
            if missing:
                st.warning(f"Missing expected column(s): {', '.join(missing)}")
            store.save(edited, fmt)
            st.success("Saved.")

    uploaded = upload_col.file_uploader("Upload CSV", type=["csv"])
    if uploaded is not None:
        try:
            store.save(uploaded.getvalue().decode("utf-8"), FORMAT_CSV)
            st.success(f"Loaded {uploaded.name}.")
        except UnicodeDecodeError:
            st.error("Uploaded file is not UTF-8 text.")

    if reset_col.button("Reset to sample"):
        store.reset()
        st.rerun()

    try:
        csv_text = convert_format(text, fmt, FORMAT_CSV)
    except FormatConversionError as exc:
        st.warning(f"Downloads unavailable: {exc}")
        return
    csv_col, json_col = st.columns(2)
    csv_col.download_button(
        "Download CSV",
        data=csv_text.encode(SETTINGS.download_encoding),
        file_name="tickets.csv",
        mime="text/csv",
    )
    json_col.download_button(
        "Download JSON",
        data=records_to_json(decode(csv_text)).encode(SETTINGS.download_encoding),
        file_name="tickets.json",
        mime="application/json",
    )
