from helpdesk_app.analytics.segments.filters import DESC, SortConfig, TicketFilter
from helpdesk_app.core.models import Dataset
from helpdesk_app.core.service import TicketService, load_sample_text
from helpdesk_app.features.dashboard import build_dashboard_context


def _dataset():
    return TicketService().build(load_sample_text())


def test_dashboard_context_latest_day():
    ctx = build_dashboard_context(_dataset())
    assert ctx.bucket.date_key == "2025-11-17"
    assert (ctx.index, ctx.day_count) == (0, 5)
    assert (ctx.has_older, ctx.has_newer) == (True, False)
    assert ctx.excluded_count == 1
    assert ctx.kpis.total_today == 2
    assert ctx.kpis.closure_rate == 100
    assert ctx.kpis.avg_time_spent == "1.41"
    assert ctx.statuses == ["Closed"]
    assert ctx.priority_distribution["Urgent"] == 5
    assert ctx.compliance_distribution["N/A"] == 2


def test_dashboard_context_filters_and_sorts_each_list():
    ctx = build_dashboard_context(
        _dataset(),
        index=0,
        flt=TicketFilter(search="lv7"),
        sort=SortConfig("ticket_number", DESC),
    )
    assert [t.ticket_number for t in ctx.main] == ["2358", "2357"]
    assert ctx.preventive == []
    # the bucket itself is untouched
    assert len(ctx.bucket.preventive) == 1


def test_dashboard_context_clamps_index():
    ctx = build_dashboard_context(_dataset(), index=99)
    assert ctx.index == 4
    assert ctx.bucket.date_key == "2024-10-01"
    assert (ctx.has_older, ctx.has_newer) == (False, True)
    assert ctx.kpis.closure_rate == 100


def test_dashboard_context_empty_dataset():
    ctx = build_dashboard_context(Dataset(excluded_count=3))
    assert ctx.bucket is None
    assert ctx.excluded_count == 3
    assert ctx.kpis is None
