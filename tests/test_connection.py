import pytest

from src.config import DatabaseConfig
from src.db.connection import DatabaseManager


def _manager(**kwargs):
    config = DatabaseConfig(host="localhost", port=5432, user="postgres", password="", database="x")
    return DatabaseManager(config, **kwargs)


def test_not_initialized_until_pool_created():
    manager = _manager()

    assert manager.is_initialized is False
    assert manager.server_settings is None


async def test_queries_before_initialize_raise():
    manager = _manager()

    with pytest.raises(RuntimeError):
        await manager.execute("SELECT 1")
    with pytest.raises(RuntimeError):
        await manager.fetchval("SELECT 1")
    with pytest.raises(RuntimeError):
        async with manager.transaction():
            pass


async def test_close_without_pool_is_noop():
    manager = _manager(server_settings={"search_path": "app, public"})

    await manager.close()

    assert manager.is_initialized is False
    assert manager.server_settings == {"search_path": "app, public"}
