"""
Сервис для регистрации триггера updated_at на произвольных таблицах.
"""
import logging
from typing import List

from src.db.connection import DatabaseManager
from src.db.table.base import (
    FUNCTION_NAME,
    UPDATED_AT_COLUMN,
    attach_updated_at_trigger,
    detach_updated_at_trigger,
    normalize_table_name,
    trigger_name,
)

logger = logging.getLogger(__name__)


class MissingUpdatedAtColumnError(Exception):
    """Исключение при попытке навесить триггер на таблицу без колонки updated_at."""
    pass


# Имя таблицы разрешается через search_path, так же как в DDL триггера
HAS_COLUMN_SQL = """
SELECT EXISTS(
    SELECT 1
    FROM pg_attribute a
    WHERE a.attrelid = to_regclass($1::text)
      AND a.attname = $2
      AND a.attnum > 0
      AND NOT a.attisdropped
)
"""

IS_ATTACHED_SQL = """
SELECT EXISTS(
    SELECT 1
    FROM pg_trigger t
    WHERE t.tgrelid = to_regclass($1::text)
      AND t.tgname = $2
      AND NOT t.tgisinternal
)
"""

LIST_ATTACHED_SQL = """
SELECT DISTINCT t.tgrelid::regclass::text AS table_name
FROM pg_trigger t
JOIN pg_proc p ON p.oid = t.tgfoid
WHERE p.proname = $1
  AND NOT t.tgisinternal
ORDER BY table_name
"""


class TriggerService:
    """Сервис для подключения общей функции set_updated_at_to_now к таблицам."""

    def __init__(self, db_manager: DatabaseManager):
        """
        Инициализация сервиса.

        Args:
            db_manager: Менеджер подключения к БД
        """
        self._db = db_manager

    async def has_updated_at_column(self, table: str) -> bool:
        """
        Проверить, есть ли в таблице колонка updated_at.

        Args:
            table: Имя таблицы (можно schema.table)

        Returns:
            True, если колонка есть
        """
        table = normalize_table_name(table)
        return bool(await self._db.fetchval(HAS_COLUMN_SQL, table, UPDATED_AT_COLUMN))

    async def is_attached(self, table: str) -> bool:
        """Проверить, навешен ли на таблицу триггер updated_at."""
        table = normalize_table_name(table)
        return bool(await self._db.fetchval(IS_ATTACHED_SQL, table, trigger_name(table)))

    async def attach(self, table: str) -> None:
        """
        Навесить триггер updated_at на таблицу.

        Args:
            table: Имя таблицы

        Raises:
            MissingUpdatedAtColumnError: Если в таблице нет колонки updated_at
            InvalidIdentifierError: Если имя таблицы недопустимо
        """
        table = normalize_table_name(table)
        try:
            if not await self.has_updated_at_column(table):
                logger.warning(f"В таблице {table} нет колонки {UPDATED_AT_COLUMN}, триггер не создан")
                raise MissingUpdatedAtColumnError(
                    f"Таблица {table} не содержит колонку {UPDATED_AT_COLUMN}"
                )

            await attach_updated_at_trigger(self._db, table)
            logger.info(f"Триггер {trigger_name(table)} навешен на таблицу {table}")

        except MissingUpdatedAtColumnError:
            raise
        except Exception as e:
            logger.error(f"Ошибка при создании триггера для таблицы {table}: {e}", exc_info=True)
            raise

    async def detach(self, table: str) -> None:
        """Снять триггер updated_at с таблицы (если он есть)."""
        table = normalize_table_name(table)
        try:
            await detach_updated_at_trigger(self._db, table)
            logger.info(f"Триггер {trigger_name(table)} снят с таблицы {table}")
        except Exception as e:
            logger.error(f"Ошибка при удалении триггера для таблицы {table}: {e}", exc_info=True)
            raise

    async def list_attached(self) -> List[str]:
        """
        Получить таблицы, триггеры которых вызывают set_updated_at_to_now.

        Returns:
            Отсортированный список имен таблиц
        """
        rows = await self._db.fetch(LIST_ATTACHED_SQL, FUNCTION_NAME)
        return [row["table_name"] for row in rows]
