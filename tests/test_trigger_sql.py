import pytest

from src.db.table import base
from src.db.table.base import (
    InvalidIdentifierError,
    attach_updated_at_trigger,
    create_trigger_sql,
    detach_updated_at_trigger,
    drop_trigger_sql,
    trigger_name,
)


def _flat(sql):
    return " ".join(sql.split())


def test_function_sql_only_touches_updated_at_when_present():
    sql = _flat(base.UPDATE_TIMESTAMP_FUNCTION_SQL)

    assert "CREATE OR REPLACE FUNCTION set_updated_at_to_now()" in sql
    assert "RETURNS TRIGGER" in sql
    assert "IF to_jsonb(NEW) ? 'updated_at' THEN NEW.updated_at = NOW(); END IF;" in sql
    assert "RETURN NEW;" in sql
    assert "created_at" not in sql


def test_trigger_name():
    assert trigger_name("persons") == "set_persons_updated_at"
    assert trigger_name("public.companies") == "set_companies_updated_at"


def test_trigger_name_too_long():
    with pytest.raises(InvalidIdentifierError):
        trigger_name("t" * 60)


def test_create_trigger_sql():
    sql = _flat(create_trigger_sql("persons"))

    assert sql == (
        "CREATE TRIGGER set_persons_updated_at BEFORE UPDATE ON persons "
        "FOR EACH ROW EXECUTE FUNCTION set_updated_at_to_now();"
    )


def test_drop_trigger_sql():
    assert _flat(drop_trigger_sql("public.persons")) == (
        "DROP TRIGGER IF EXISTS set_persons_updated_at ON public.persons;"
    )


@pytest.mark.parametrize("table", ["persons; DROP TABLE persons", "Persons", ""])
def test_unsafe_table_names_rejected(table):
    with pytest.raises(InvalidIdentifierError):
        create_trigger_sql(table)


def test_invalid_identifier_is_value_error():
    assert issubclass(InvalidIdentifierError, ValueError)


async def test_attach_drops_then_creates(fake_db):
    await attach_updated_at_trigger(fake_db, "companies")

    assert fake_db.sql == [
        "DROP TRIGGER IF EXISTS set_companies_updated_at ON companies;",
        "CREATE TRIGGER set_companies_updated_at BEFORE UPDATE ON companies "
        "FOR EACH ROW EXECUTE FUNCTION set_updated_at_to_now();",
    ]


async def test_attach_rejects_before_sending_sql(fake_db):
    with pytest.raises(InvalidIdentifierError):
        await attach_updated_at_trigger(fake_db, "bad name")

    assert fake_db.queries == []


async def test_detach(fake_db):
    await detach_updated_at_trigger(fake_db, "persons")

    assert fake_db.sql == ["DROP TRIGGER IF EXISTS set_persons_updated_at ON persons;"]
