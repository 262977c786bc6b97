from helpdesk_app.analytics.metrics.derived import format_hours, parse_number
from helpdesk_app.core.mappers import map_ticket, metrics_to_dataframe, tickets_to_dataframe
from helpdesk_app.core.models import TechnicianMetric


def _sample_record():
    return {
        "ticketIDsSequence": "1324",
        "createdOn": "2024-10-01 14:55:03",
        "subject": "L3-RZ-Power trip",
        "assignedTo": "Jefry",
        "stage": "Closed",
        "priority": "Urgent",
        "tags": "Electrical",
        "timeSpent": "0.10",
        "openTimeHours": "",
        "failedSLAPolicy": "true",
        "riskLikelihood": "3",
        "riskImpact": "4 (major)",
        "vendor": "ACME",
    }


def test_map_ticket_projection_and_fallbacks():
    ticket = map_ticket(_sample_record())
    assert ticket.ticket_number == "1324"
    assert ticket.item == "L3-RZ-Power trip"
    assert ticket.category == "Electrical"
    assert ticket.duration == "0.10"
    assert ticket.ticket_age_hours == "0"
    assert ticket.escalation == "Yes"
    assert ticket.iso_clause == "N/A"
    assert ticket.risk_level == 12
    assert ticket.extra == {"vendor": "ACME"}
    assert ticket.id == "1324"


def test_map_ticket_on_empty_record():
    ticket = map_ticket({})
    assert ticket.category == "General"
    assert ticket.escalation == "No"
    assert ticket.duration == "0"
    assert ticket.assignee == ""


def test_parse_number_best_effort():
    assert parse_number("6.50") == 6.5
    assert parse_number(" 2 hrs") == 2.0
    assert parse_number("N/A") == 0.0
    assert parse_number(None) == 0.0
    assert parse_number(float("nan")) == 0.0
    assert format_hours(5.5) == "5.50"
    assert format_hours(0) == "0"


def test_dataframe_exports():
    ticket = map_ticket(_sample_record())
    df = tickets_to_dataframe([ticket])
    assert df.loc[0, "ticket_number"] == "1324"
    assert "extra" not in df.columns
    assert "vendor" not in df.columns
    assert tickets_to_dataframe([ticket], include_extra=True).loc[0, "vendor"] == "ACME"

    metrics = metrics_to_dataframe([TechnicianMetric(name="Jefry", closed=1, total_tickets=1)])
    assert list(metrics["name"]) == ["Jefry"]
    assert metrics_to_dataframe([]).empty

