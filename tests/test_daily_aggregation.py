from helpdesk_app.analytics.aggregations.daily import build_daily_dataset, place_ticket
from helpdesk_app.core.mappers import map_ticket
from helpdesk_app.core.models import DailyBucket, UpcomingProject


def _record(number, created, assignee, stage="Closed", spent="1", category="M&E", tags="", subject="Issue"):
    return {
        "ticketIDsSequence": number,
        "createdOn": created,
        "assignedTo": assignee,
        "stage": stage,
        "timeSpent": spent,
        "category": category,
        "tags": tags,
        "subject": subject,
        "priority": "Urgent",
    }


def _sample_records():
    return [
        _record("2032", "2025-07-04 09:00", "A", spent="2.0", subject="Power trip"),
        _record("2032", "2025-07-04 10:00", "B", spent="3.5", subject="Power trip follow-up"),
        _record("2296", "2025-07-04 11:00", "C", stage="In Progress"),
        _record("2360", "2025-07-05 08:00", "C", category="Preventive Maintenance"),
        _record("2361", "2025-07-05 09:00", "D", category="", tags="PM"),
        _record("1000", "N/A", "E"),
        _record("1001", "", "E"),
    ]


def test_collaboration_linkage():
    dataset = build_daily_dataset(_sample_records())
    day = dataset.days["2025-07-04"]
    assert [t.ticket_number for t in day.main] == ["2032"]
    assert day.main[0].assignee == "A" and day.main[0].collab is None
    assert len(day.collaboration) == 1
    collab = day.collaboration[0]
    assert (collab.ticket_number, collab.assignee, collab.collab) == ("2032", "A", "B")
    # descriptive fields come from the later record
    assert collab.item == "Power trip follow-up"
    assert collab.duration == "3.5"

    metric = next(m for m in day.technician_metrics if m.name == "A")
    assert metric.closed == 2
    assert metric.total_tickets == 2
    assert metric.total_work_hours == "5.50"


def test_lifecycle_lists_are_disjoint():
    dataset = build_daily_dataset(_sample_records())
    assert [t.ticket_number for t in dataset.days["2025-07-04"].pending] == ["2296"]
    later = dataset.days["2025-07-05"]
    assert [t.ticket_number for t in later.preventive] == ["2360", "2361"]
    assert later.main == []
    for bucket in dataset.days.values():
        firsts = bucket.main + bucket.pending + bucket.preventive
        assert len({id(t) for t in firsts}) == len(firsts)
        assert not set(map(id, firsts)) & set(map(id, bucket.collaboration))


def test_pending_wins_over_preventive():
    records = [_record("1", "2025-01-01", "A", stage="Scheduled", category="Preventive Maintenance")]
    bucket = build_daily_dataset(records).days["2025-01-01"]
    assert [t.ticket_number for t in bucket.pending] == ["1"]
    assert bucket.preventive == []


def test_unparsable_dates_excluded_but_kept_in_history():
    records = _sample_records()
    dataset = build_daily_dataset(records)
    assert dataset.excluded_count == 2
    assert len(dataset.historical) == len(records)
    numbers = {t.ticket_number for b in dataset.days.values() for t in b.all_tickets()}
    assert "1000" not in numbers and "1001" not in numbers


def test_days_ordered_most_recent_first():
    dataset = build_daily_dataset(_sample_records())
    assert dataset.date_keys == ["2025-07-05", "2025-07-04"]
    assert dataset.day(0).date == "05/07/2025"
    assert dataset.neighbours(0) == (True, False)
    assert dataset.neighbours(1) == (False, True)
    assert dataset.day(5) is None


def test_same_assignee_repeat_is_dropped():
    records = [_record("7", "2025-01-01", "A"), _record("7", "2025-01-01 15:00", "A")]
    bucket = build_daily_dataset(records).days["2025-01-01"]
    assert len(bucket.main) == 1
    assert bucket.collaboration == []


def test_repeat_on_another_day_is_independent():
    records = [_record("7", "2025-01-01", "A"), _record("7", "2025-01-02", "B")]
    dataset = build_daily_dataset(records)
    assert len(dataset.days["2025-01-01"].main) == 1
    assert len(dataset.days["2025-01-02"].main) == 1
    assert dataset.collaboration == []


def test_empty_ticket_numbers_never_deduplicated():
    records = [_record("", "2025-01-01", "A"), _record("", "2025-01-01", "A")]
    bucket = build_daily_dataset(records).days["2025-01-01"]
    assert len(bucket.main) == 2


def test_place_ticket_reports_destination():
    bucket = DailyBucket(date_key="2025-01-01", date="01/01/2025")
    seen: dict[str, str] = {}
    assert place_ticket(bucket, seen, map_ticket(_record("9", "2025-01-01", "A"))) == "main"
    assert place_ticket(bucket, seen, map_ticket(_record("9", "2025-01-01", "A"))) is None
    assert place_ticket(bucket, seen, map_ticket(_record("9", "2025-01-01", "B"))) == "collaboration"
    assert seen == {"9": "A"}


def test_rebuild_is_idempotent():
    records = _sample_records()
    assert build_daily_dataset(records) == build_daily_dataset(records)


def test_upcoming_projects_attached_per_day():
    project = UpcomingProject(date="2025-07-05", item="Chiller overhaul", ticket_number="P-1")
    dataset = build_daily_dataset(_sample_records(), upcoming={"2025-07-05": [project]})
    assert dataset.days["2025-07-05"].upcoming_projects == [project]
    assert dataset.days["2025-07-04"].upcoming_projects == []


def test_no_records_gives_empty_dataset():
    dataset = build_daily_dataset([])
    assert dataset.is_empty
    assert dataset.excluded_count == 0
