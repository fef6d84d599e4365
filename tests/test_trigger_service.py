import pytest

from src.db.table.base import InvalidIdentifierError
from src.stamp.service import TriggerService, MissingUpdatedAtColumnError


async def test_has_updated_at_column_passes_qualified_name(fake_db):
    fake_db.fetchval_results = [True]

    assert await TriggerService(fake_db).has_updated_at_column("public.persons") is True
    _, args = fake_db.queries[0]
    assert args == ("public.persons", "updated_at")


async def test_has_updated_at_column_resolves_like_trigger_ddl(fake_db):
    fake_db.fetchval_results = [False]

    assert await TriggerService(fake_db).has_updated_at_column("persons") is False
    query, args = fake_db.queries[0]
    # Неквалифицированное имя ищется через search_path, как в CREATE TRIGGER
    assert "to_regclass($1::text)" in query
    assert "current_schema" not in query
    assert args == ("persons", "updated_at")


async def test_attach_refuses_table_without_column(fake_db):
    fake_db.fetchval_results = [False]

    with pytest.raises(MissingUpdatedAtColumnError):
        await TriggerService(fake_db).attach("audit_log")

    assert not any("CREATE TRIGGER" in s for s in fake_db.sql)


async def test_attach_registers_trigger(fake_db):
    fake_db.fetchval_results = [True]

    await TriggerService(fake_db).attach("orders")

    assert fake_db.sql[-2:] == [
        "DROP TRIGGER IF EXISTS set_orders_updated_at ON orders;",
        "CREATE TRIGGER set_orders_updated_at BEFORE UPDATE ON orders "
        "FOR EACH ROW EXECUTE FUNCTION set_updated_at_to_now();",
    ]


async def test_attach_invalid_name(fake_db):
    with pytest.raises(InvalidIdentifierError):
        await TriggerService(fake_db).attach("orders;--")

    assert fake_db.queries == []


async def test_is_attached(fake_db):
    fake_db.fetchval_results = [True]

    assert await TriggerService(fake_db).is_attached("orders") is True
    _, args = fake_db.queries[0]
    assert args == ("orders", "set_orders_updated_at")


async def test_detach(fake_db):
    await TriggerService(fake_db).detach("orders")

    assert fake_db.sql == ["DROP TRIGGER IF EXISTS set_orders_updated_at ON orders;"]


async def test_list_attached(fake_db):
    fake_db.fetch_results = [[{"table_name": "companies"}, {"table_name": "persons"}]]

    assert await TriggerService(fake_db).list_attached() == ["companies", "persons"]
    _, args = fake_db.queries[0]
    assert args == ("set_updated_at_to_now",)
