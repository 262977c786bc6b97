"""Daily dashboard page.

Shows one day at a time (most recent first) with KPIs, the four ticket
lists, technician metrics and history-wide distributions.
"""

from __future__ import annotations

import pandas as pd
import streamlit as st

from helpdesk_app.analytics.segments.filters import ASC, DESC, SortConfig, TicketFilter
from helpdesk_app.app import current_dataset, register_page
from helpdesk_app.core.config import MATCH_ALL
from helpdesk_app.features.dashboard import build_dashboard_context
from helpdesk_app.visual.tables import download_button, metric_table, render_table, ticket_table

SORTABLE = ["ticket_number", "item", "assignee", "status", "priority", "duration", "ticket_age_hours"]


@register_page("Daily Dashboard")
def dashboard_page():
    st.title("Daily Dashboard")
    dataset = current_dataset()
    if dataset is None:
        return
    if dataset.is_empty:
        st.info("No dated tickets found in the current data.")
        if dataset.excluded_count:
            st.caption(f"{dataset.excluded_count} record(s) skipped: unrecognized creation date.")
        return

    index = min(st.session_state.get("day_index", 0), len(dataset.days) - 1)
    nav_older, nav_label, nav_newer = st.columns([1, 3, 1])
    has_older, has_newer = dataset.neighbours(index)
    if nav_newer.button("Newer ▶", disabled=not has_newer):
        st.session_state["day_index"] = index - 1
        st.rerun()
    if nav_older.button("◀ Older", disabled=not has_older):
        st.session_state["day_index"] = index + 1
        st.rerun()

    with st.sidebar:
        st.markdown("### Filters")
        search = st.text_input("Search", "")
        sort_key = st.selectbox("Sort by", ["(source order)", *SORTABLE])
        direction = st.radio("Direction", [ASC, DESC], horizontal=True)

    base = build_dashboard_context(dataset, index)
    with st.sidebar:
        status = st.selectbox("Status", [MATCH_ALL, *base.statuses])
        priority = st.selectbox("Priority", [MATCH_ALL, *base.priorities])
    flt = TicketFilter(status=status, priority=priority, search=search)
    sort = SortConfig(None if sort_key == "(source order)" else sort_key, direction)
    ctx = build_dashboard_context(dataset, index, flt, sort)

    nav_label.markdown(f"#### {ctx.bucket.date}  ·  day {ctx.index + 1} of {ctx.day_count}")
    if ctx.excluded_count:
        st.caption(f"{ctx.excluded_count} record(s) skipped: unrecognized creation date.")

    kpis = ctx.kpis
    cols = st.columns(6)
    cols[0].metric("Tickets Today", kpis.total_today)
    cols[1].metric("Pending", kpis.pending_today)
    cols[2].metric("Closed", kpis.closed_today)
    cols[3].metric("Critical", kpis.critical_today)
    cols[4].metric("Avg Time Spent (h)", kpis.avg_time_spent)
    cols[5].metric("Closure Rate", f"{kpis.closure_rate}%")

    st.markdown("---")
    render_table("Tickets", ticket_table(ctx.main))
    render_table("Pending", ticket_table(ctx.pending))
    render_table("Preventive Maintenance", ticket_table(ctx.preventive))
    render_table("Collaboration", ticket_table(ctx.collaboration, "collaboration"))

    metrics = metric_table(ctx.bucket.technician_metrics)
    render_table("Technician Metrics", metrics, empty_message="No technician activity.")
    download_button("Download metrics CSV", metrics, f"technician_metrics_{ctx.bucket.date_key}.csv")

    if ctx.bucket.upcoming_projects:
        st.subheader("Upcoming Projects")
        st.dataframe(pd.DataFrame(ctx.bucket.upcoming_projects), hide_index=True)

    st.markdown("---")
    st.subheader("Distributions (all history)")
    dist_cols = st.columns(3)
    for col, title, counts in (
        (dist_cols[0], "Priority", ctx.priority_distribution),
        (dist_cols[1], "Category", ctx.category_distribution),
        (dist_cols[2], "Compliance Clause", ctx.compliance_distribution),
    ):
        col.caption(title)
        if counts:
            col.bar_chart(pd.Series(counts, name="tickets"))
