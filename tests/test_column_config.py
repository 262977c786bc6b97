from helpdesk_app.core.column_config import get_columns, load_column_sets
from helpdesk_app.core.config import COLLAB_TABLE_COLUMNS, METRIC_TABLE_COLUMNS


def test_column_sets_load():
    sets = load_column_sets(refresh=True)
    assert {"tickets", "collaboration", "metrics"} <= set(sets)
    assert get_columns("tickets")[0] == "ticket_number"
    assert "collab" in get_columns("collaboration")
    assert get_columns("unknown") == []


def test_missing_yaml_falls_back_to_config(tmp_path):
    try:
        sets = load_column_sets(tmp_path, refresh=True)
        assert sets["metrics"] == list(METRIC_TABLE_COLUMNS)
    finally:
        load_column_sets(refresh=True)


def test_partial_yaml_keeps_defaults_for_missing_sets(tmp_path):
    (tmp_path / "columns.yaml").write_text("sets:\n  tickets: [item, status]\n", encoding="utf-8")
    try:
        sets = load_column_sets(tmp_path, refresh=True)
        assert sets["tickets"] == ["item", "status"]
        assert sets["collaboration"] == list(COLLAB_TABLE_COLUMNS)
    finally:
        load_column_sets(refresh=True)


def test_unreadable_yaml_falls_back(tmp_path):
    (tmp_path / "columns.yaml").write_text("sets: [unbalanced", encoding="utf-8")
    try:
        assert load_column_sets(tmp_path, refresh=True)["tickets"][0] == "ticket_number"
    finally:
        load_column_sets(refresh=True)
