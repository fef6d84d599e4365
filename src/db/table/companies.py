"""
Таблица компаний.
"""
import logging

from src.db.connection import DatabaseManager
from src.db.table.base import attach_updated_at_trigger

logger = logging.getLogger(__name__)


TABLE_NAME = "companies"

TABLE_SQL = """
CREATE TABLE IF NOT EXISTS companies (
    id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
    name VARCHAR(255) NOT NULL,
    created_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT NOW(),
    updated_at TIMESTAMP WITH TIME ZONE
);
"""

# Индекс для быстрого поиска по названию компании
NAME_INDEX_SQL = """
CREATE INDEX IF NOT EXISTS idx_companies_name ON companies(name);
"""

DROP_TABLE_SQL = """
DROP TABLE IF EXISTS companies CASCADE;
"""


async def create_table(db_manager: DatabaseManager) -> None:
    """
    Создать таблицу компаний в базе данных.

    Args:
        db_manager: Менеджер подключения к базе данных
    """
    try:
        logger.info("Создание таблицы companies...")

        await db_manager.execute(TABLE_SQL)
        logger.debug("Таблица companies создана")

        await db_manager.execute(NAME_INDEX_SQL)
        logger.debug("Индекс idx_companies_name создан")

        await attach_updated_at_trigger(db_manager, TABLE_NAME)

        logger.info("Таблица companies успешно создана с индексами и триггером")

    except Exception as e:
        logger.error(f"Ошибка при создании таблицы companies: {e}", exc_info=True)
        raise


async def drop_table(db_manager: DatabaseManager) -> None:
    """Удалить таблицу компаний."""
    try:
        await db_manager.execute(DROP_TABLE_SQL)
        logger.info("Таблица companies удалена")
    except Exception as e:
        logger.error(f"Ошибка при удалении таблицы companies: {e}", exc_info=True)
        raise
