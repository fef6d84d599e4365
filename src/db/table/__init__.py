"""
Модуль таблиц базы данных.
Содержит SQL схемы и функции инициализации таблиц.
"""
import logging

from src.db.connection import DatabaseManager
from src.db.table.base import create_timestamp_function, drop_timestamp_function
from src.db.table import persons
from src.db.table import companies

logger = logging.getLogger(__name__)


async def initialize_tables(db_manager: DatabaseManager) -> None:
    """
    Инициализировать все таблицы базы данных.

    Триггерная функция создается первой: триггеры таблиц ссылаются на нее.

    Args:
        db_manager: Менеджер подключения к базе данных
    """
    try:
        logger.info("Инициализация таблиц базы данных...")

        # Функция для обновления updated_at (общая для всех таблиц)
        await create_timestamp_function(db_manager)

        await persons.create_table(db_manager)
        await companies.create_table(db_manager)

        logger.info("Все таблицы успешно инициализированы")

    except Exception as e:
        logger.error(f"Ошибка при инициализации таблиц: {e}", exc_info=True)
        raise


async def drop_tables(db_manager: DatabaseManager) -> None:
    """
    Удалить таблицы-примеры и триггерную функцию.

    Args:
        db_manager: Менеджер подключения к базе данных
    """
    try:
        logger.info("Удаление таблиц базы данных...")

        await companies.drop_table(db_manager)
        await persons.drop_table(db_manager)
        await drop_timestamp_function(db_manager)

        logger.info("Все таблицы удалены")

    except Exception as e:
        logger.error(f"Ошибка при удалении таблиц: {e}", exc_info=True)
        raise


__all__ = ["initialize_tables", "drop_tables"]
