"""
Таблица людей (пример таблицы с автоматическим updated_at).
"""
import logging

from src.db.connection import DatabaseManager
from src.db.table.base import attach_updated_at_trigger

logger = logging.getLogger(__name__)


TABLE_NAME = "persons"

# Создание таблицы
# Примечание: gen_random_uuid() доступен в PostgreSQL 13+ по умолчанию.
# Для более старых версий может потребоваться расширение: CREATE EXTENSION IF NOT EXISTS pgcrypto;
# updated_at остается NULL до первого обновления строки.
TABLE_SQL = """
CREATE TABLE IF NOT EXISTS persons (
    id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
    firstname VARCHAR(255) NOT NULL,
    lastname VARCHAR(255) NOT NULL,
    created_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT NOW(),
    updated_at TIMESTAMP WITH TIME ZONE
);
"""

# Индекс для поиска по фамилии
LASTNAME_INDEX_SQL = """
CREATE INDEX IF NOT EXISTS idx_persons_lastname ON persons(lastname);
"""

DROP_TABLE_SQL = """
DROP TABLE IF EXISTS persons CASCADE;
"""


async def create_table(db_manager: DatabaseManager) -> None:
    """
    Создать таблицу людей в базе данных.

    Args:
        db_manager: Менеджер подключения к базе данных
    """
    try:
        logger.info("Создание таблицы persons...")

        await db_manager.execute(TABLE_SQL)
        logger.debug("Таблица persons создана")

        await db_manager.execute(LASTNAME_INDEX_SQL)
        logger.debug("Индекс idx_persons_lastname создан")

        await attach_updated_at_trigger(db_manager, TABLE_NAME)

        logger.info("Таблица persons успешно создана с индексами и триггером")

    except Exception as e:
        logger.error(f"Ошибка при создании таблицы persons: {e}", exc_info=True)
        raise


async def drop_table(db_manager: DatabaseManager) -> None:
    """Удалить таблицу людей."""
    try:
        await db_manager.execute(DROP_TABLE_SQL)
        logger.info("Таблица persons удалена")
    except Exception as e:
        logger.error(f"Ошибка при удалении таблицы persons: {e}", exc_info=True)
        raise
