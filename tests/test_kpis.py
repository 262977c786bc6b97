from helpdesk_app.analytics.aggregations.daily import build_daily_dataset
from helpdesk_app.analytics.metrics.kpis import (
    average_time_spent,
    category_distribution,
    compliance_distribution,
    daily_kpis,
    priority_distribution,
)


def _sample_records():
    return [
        {"ticketIDsSequence": "1", "createdOn": "2025-03-01", "assignedTo": "A", "stage": "Closed",
         "priority": "Urgent", "timeSpent": "2", "category": "M&E", "isoClause": "ISO 9001"},
        {"ticketIDsSequence": "1", "createdOn": "2025-03-01", "assignedTo": "B", "stage": "Closed",
         "priority": "Urgent", "timeSpent": "1", "category": "M&E", "isoClause": "ISO 9001"},
        {"ticketIDsSequence": "2", "createdOn": "2025-03-01", "assignedTo": "A", "stage": "Open",
         "priority": "Critical", "timeSpent": "x", "category": "Card Access"},
        {"ticketIDsSequence": "3", "createdOn": "2025-03-01", "assignedTo": "A", "stage": "Resolved",
         "priority": "Low", "timeSpent": "0", "category": "Preventive Maintenance"},
        {"ticketIDsSequence": "4", "createdOn": "2025-03-01", "assignedTo": "C", "stage": "New",
         "priority": "critical - site down", "timeSpent": "", "category": ""},
    ]


def test_daily_kpis():
    records = _sample_records()
    bucket = build_daily_dataset(records).day(0)
    kpis = daily_kpis(bucket, records)
    assert kpis.total_today == 3  # tickets 1 and 4 in main, plus one collaboration
    assert kpis.pending_today == 1
    assert kpis.closed_today == 1
    assert kpis.critical_today == 2
    assert kpis.avg_time_spent == "1.50"
    # closed or resolved in main and preventive: 2 of the 5 listed tickets
    assert kpis.closure_rate == 40


def test_average_time_spent_without_values():
    assert average_time_spent([{"timeSpent": "0"}, {"timeSpent": "N/A"}, {}]) == "N/A"
    assert average_time_spent([]) == "N/A"


def test_distributions():
    records = _sample_records()
    assert priority_distribution(records) == {"Urgent": 2, "Critical": 1, "Low": 1, "critical - site down": 1}
    assert category_distribution(records)["General"] == 1
    assert category_distribution(records)["M&E"] == 2
    assert compliance_distribution(records) == {"N/A": 3, "ISO 9001": 2}
    assert priority_distribution([]) == {}
