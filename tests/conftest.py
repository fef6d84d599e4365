import os
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from src.config import DatabaseConfig
from src.db.connection import DatabaseManager
from src.db.table import initialize_tables, drop_tables


class FakeDatabaseManager:
    """Заменитель DatabaseManager: запоминает запросы, отдает заготовленные ответы."""

    def __init__(self):
        self.queries = []
        self.fetchrow_results = []
        self.fetchval_results = []
        self.fetch_results = []

    async def execute(self, query, *args):
        self.queries.append((query, args))
        return "OK"

    async def fetchrow(self, query, *args):
        self.queries.append((query, args))
        return self.fetchrow_results.pop(0) if self.fetchrow_results else None

    async def fetchval(self, query, *args):
        self.queries.append((query, args))
        return self.fetchval_results.pop(0) if self.fetchval_results else None

    async def fetch(self, query, *args):
        self.queries.append((query, args))
        return self.fetch_results.pop(0) if self.fetch_results else []

    @property
    def sql(self):
        return [" ".join(q.split()) for q, _ in self.queries]


@pytest.fixture()
def fake_db():
    return FakeDatabaseManager()


@pytest.fixture()
def person_row():
    created = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

    def make(**overrides):
        row = {
            "id": uuid4(),
            "firstname": "John",
            "lastname": "Smith",
            "created_at": created,
            "updated_at": None,
        }
        row.update(overrides)
        return row

    make.created = created
    make.later = created + timedelta(seconds=5)
    return make


@pytest.fixture()
async def db_manager():
    if os.getenv("RUN_DB_TESTS", "false").lower() != "true":
        pytest.skip("RUN_DB_TESTS=true не установлен, PostgreSQL недоступен")

    manager = DatabaseManager(DatabaseConfig.from_env(), min_size=1, max_size=2)
    await manager.initialize()
    await drop_tables(manager)
    await initialize_tables(manager)
    try:
        yield manager
    finally:
        await drop_tables(manager)
        await manager.close()
