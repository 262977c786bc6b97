from helpdesk_app.analytics.aggregations.technician import compute_technician_metrics
from helpdesk_app.core.models import Ticket


def _ticket(assignee, status, duration="0", number="1"):
    return Ticket(
        ticket_number=number,
        item="x",
        category="M&E",
        priority="Low",
        status=status,
        assignee=assignee,
        created_on="2025-01-01",
        duration=duration,
    )


def test_counters_and_hours_per_technician():
    tickets = [
        _ticket("Jefry", "Closed", "1.25"),
        _ticket("Jefry", "In Progress", "0.75"),
        _ticket("Syawal", "On Hold"),
        _ticket("Jefry", "Resolved", "n/a"),
    ]
    metrics = compute_technician_metrics(tickets)
    assert [m.name for m in metrics] == ["Jefry", "Syawal"]
    jefry = metrics[0]
    assert (jefry.closed, jefry.in_progress, jefry.resolved) == (1, 1, 1)
    assert jefry.total_tickets == 3
    assert jefry.total_work_hours == "2.00"
    assert metrics[1].on_hold == 1
    assert metrics[1].total_work_hours == "0"


def test_status_substring_order_and_other_bucket():
    metrics = compute_technician_metrics(
        [
            _ticket("A", "Reopened"),
            _ticket("A", "Scheduled visit"),
            _ticket("A", "Cancelled"),
        ]
    )
    a = metrics[0]
    assert a.open == 1
    assert a.scheduled == 1
    assert a.other == 1
    assert a.total_tickets == 3


def test_total_equals_sum_of_counters():
    statuses = ["Open", "Closed", "On Hold", "weird", "", "Resolved"]
    metric = compute_technician_metrics([_ticket("A", s) for s in statuses])[0]
    counters = (
        metric.open,
        metric.in_progress,
        metric.on_hold,
        metric.scheduled,
        metric.resolved,
        metric.closed,
        metric.other,
    )
    assert metric.total_tickets == sum(counters) == len(statuses)


def test_blank_assignee_reported_as_unassigned():
    metrics = compute_technician_metrics([_ticket("", "Closed"), _ticket("  ", "Open")])
    assert [m.name for m in metrics] == ["Unassigned"]
    assert metrics[0].total_tickets == 2


def test_no_tickets_no_metrics():
    assert compute_technician_metrics([]) == []
