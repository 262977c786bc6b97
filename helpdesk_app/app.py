"""Application entry point: page registry, router and shared pipeline state."""

from __future__ import annotations

import streamlit as st

from helpdesk_app.core.codec import DecodeError, FormatConversionError
from helpdesk_app.core.drafts import DraftStore
from helpdesk_app.core.models import Dataset
from helpdesk_app.core.service import TicketService, load_sample_text
from helpdesk_app.visual.progress import PassReporter

PAGES = {}

_DATASET_KEY = "helpdesk_dataset"
_DATASET_SOURCE_KEY = "helpdesk_dataset_source"


def register_page(label):
    def decorator(func):
        PAGES[label] = func
        return func

    return decorator


def draft_store() -> DraftStore:
    return DraftStore(st.session_state)


def current_dataset() -> Dataset | None:
    """Dataset for the current draft text, rebuilt only when the text changes.

    Returns None (after showing a blocking error) when the draft cannot be read.
    The previously published dataset is replaced only by a completed pass.
    """
    try:
        text = draft_store().load_tabular(load_sample_text())
    except FormatConversionError as exc:
        st.error(f"Could not read ticket data: {exc}")
        return None
    if st.session_state.get(_DATASET_SOURCE_KEY) == text and _DATASET_KEY in st.session_state:
        return st.session_state[_DATASET_KEY]
    reporter = PassReporter("Processing ticket export")
    try:
        dataset = TicketService().build(text, progress=reporter.callback)
    except DecodeError as exc:
        reporter.error(f"Could not read ticket data: {exc}")
        return None
    st.session_state[_DATASET_KEY] = dataset
    st.session_state[_DATASET_SOURCE_KEY] = text
    reporter.complete(f"Loaded {len(dataset.historical)} record(s) across {len(dataset.days)} day(s).")
    return dataset


def main():
    st.sidebar.title("Helpdesk Daily Dashboard")
    pages = list(PAGES.keys())
    if not pages:
        st.write("No pages registered yet.")
        return
    preferred_order = [
        "Daily Dashboard",
        "Database",
        "Staging Room",
        "Compliance Library",
    ]
    ordered = [name for name in preferred_order if name in pages]
    trailing = sorted(name for name in pages if name not in preferred_order)
    pages = ordered + trailing
    page = st.sidebar.selectbox("Page", pages, index=0)
    PAGES[page]()


if __name__ == "__main__":
    main()
