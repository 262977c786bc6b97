import pytest

from helpdesk_app.core.codec import decode
from helpdesk_app.features.staging import (
    APPEND,
    ERROR,
    REPLACE,
    VALID,
    WARNING,
    audit_batch,
    commit_batch,
    select_rows,
    summarize,
)

HEADER = "Ticket IDs Sequence,Created on,Subject,Stage,Assigned to,Priority,Iso Clause"


def _historical():
    return [{"ticketIDsSequence": "100", "createdOn": "2025-01-01", "subject": "Old", "stage": "Closed"}]


def _batch(*rows):
    return "\n".join([HEADER, *rows])


def test_valid_row():
    rows = audit_batch(_batch("200,2025-02-01,Door,Closed,Jefry,Low,ISO 9001 (Clause 8.5.1)"), _historical())
    assert len(rows) == 1
    assert rows[0].status == VALID
    assert rows[0].issues == []
    assert not rows[0].is_duplicate


def test_critical_and_warning_issues():
    rows = audit_batch(
        _batch(
            ",2025-02-01,Door,Closed,Jefry,Low,",
            "201,someday,Door,Closed,Jefry,Low,",
            "202,2025-02-01,Door,Closed,,,",
            "203,1999-12-31,Door,Closed,Jefry,Low,Fire Code 12",
            "204,2025-02-01,Door,,,Low,N/A",
        ),
        _historical(),
    )
    missing_id, bad_date, no_owner, old_date, no_status = rows
    assert missing_id.status == ERROR and "Empty Ticket ID" in missing_id.issues
    assert bad_date.status == ERROR
    assert any("Unrecognized date" in issue for issue in bad_date.issues)
    assert no_owner.status == WARNING
    assert no_owner.issues == ["Empty Assignee", "Empty Priority"]
    assert old_date.status == WARNING
    assert "Suspicious date year: 1999" in old_date.issues
    assert "Non-standard ISO reference: Fire Code 12" in old_date.issues
    # an error is never downgraded by a later warning
    assert no_status.status == ERROR
    assert no_status.issues == ["Empty Status", "Empty Assignee"]


def test_duplicates_and_blank_rows():
    rows = audit_batch(_batch("100,2025-02-01,Door,Closed,Jefry,Low,", ",,,,,,", "300,2025-02-01,Lift,Open,A,High,"), _historical())
    assert len(rows) == 2
    assert rows[0].is_duplicate
    summary = summarize(rows)
    assert (summary.total, summary.duplicates, summary.valid, summary.errors) == (2, 1, 1, 0)
    assert select_rows(rows, "duplicates") == [rows[0]]
    assert select_rows(rows, "errors") == []
    assert select_rows(rows, "all") == rows


def test_commit_append_and_replace():
    historical = _historical()
    rows = audit_batch(_batch("200,2025-02-01,Door,Closed,Jefry,Low,", ",2025-02-01,Bad,Closed,A,Low,"), historical)

    appended = decode(commit_batch(historical, rows, APPEND))
    assert [r["ticketIDsSequence"] for r in appended] == ["100", "200"]
    assert appended[0]["assignedTo"] == ""

    replaced = decode(commit_batch(historical, rows, REPLACE))
    assert [r["ticketIDsSequence"] for r in replaced] == ["200"]


def test_commit_rejects_when_nothing_committable():
    rows = audit_batch(_batch(",,Door,Closed,A,Low,"), _historical())
    with pytest.raises(ValueError):
        commit_batch(_historical(), rows, APPEND)
    with pytest.raises(ValueError):
        commit_batch(_historical(), rows, "merge")
