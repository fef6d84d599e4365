from datetime import datetime, timezone

from src.stamp.domain import apply_updated_at


NOW = datetime(2024, 6, 1, 9, 30, tzinfo=timezone.utc)


def test_overwrites_null_updated_at():
    row = {"id": 1, "lastname": "Doe", "updated_at": None}

    assert apply_updated_at(row, NOW) == {"id": 1, "lastname": "Doe", "updated_at": NOW}


def test_overwrites_explicit_value():
    row = {"id": 1, "updated_at": datetime(2000, 1, 1, tzinfo=timezone.utc)}

    assert apply_updated_at(row, NOW)["updated_at"] == NOW


def test_row_without_column_is_untouched():
    row = {"id": 1, "name": "Acme"}

    assert apply_updated_at(row, NOW) == row


def test_created_at_is_not_touched():
    created = datetime(2024, 1, 1, tzinfo=timezone.utc)
    row = {"created_at": created, "updated_at": None}

    assert apply_updated_at(row, NOW)["created_at"] == created


def test_input_not_mutated():
    row = {"updated_at": None}

    apply_updated_at(row, NOW)

    assert row == {"updated_at": None}


def test_defaults_to_current_utc_time():
    before = datetime.now(timezone.utc)

    stamped = apply_updated_at({"updated_at": None})

    assert stamped["updated_at"] >= before
    assert stamped["updated_at"].tzinfo is not None
