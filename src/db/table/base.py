"""
Базовые SQL-функции для таблиц.
Общая триггерная функция set_updated_at_to_now и построение DDL триггеров
для отдельных таблиц.
"""
import logging

from src.db.connection import DatabaseManager
from src.stamp.utils.validators import Validators, MAX_IDENTIFIER_LENGTH

logger = logging.getLogger(__name__)


UPDATED_AT_COLUMN = "updated_at"
FUNCTION_NAME = "set_updated_at_to_now"


class InvalidIdentifierError(ValueError):
    """Недопустимое имя таблицы или триггера."""
    pass


# Функция для автоматического обновления поля updated_at.
# Поле перезаписывается, только если оно есть в образе строки NEW,
# поэтому одну функцию можно навесить на любую таблицу.
UPDATE_TIMESTAMP_FUNCTION_SQL = f"""
CREATE OR REPLACE FUNCTION {FUNCTION_NAME}()
RETURNS TRIGGER AS $$
BEGIN
    IF to_jsonb(NEW) ? '{UPDATED_AT_COLUMN}' THEN
        NEW.{UPDATED_AT_COLUMN} = NOW();
    END IF;
    RETURN NEW;
END;
$$ LANGUAGE plpgsql;
"""

# Удаление функции (вместе со всеми триггерами, которые ее используют)
DROP_TIMESTAMP_FUNCTION_SQL = f"""
DROP FUNCTION IF EXISTS {FUNCTION_NAME}() CASCADE;
"""


def normalize_table_name(table: str) -> str:
    """
    Проверить имя таблицы и вернуть нормализованное.

    Raises:
        InvalidIdentifierError: Если имя нельзя безопасно подставить в DDL
    """
    result = Validators.validate_table_name(table)
    if not result.is_valid:
        raise InvalidIdentifierError(result.error)
    return result.normalized


def trigger_name(table: str) -> str:
    """
    Имя триггера для таблицы: set_<таблица>_updated_at.

    Для schema.table используется только имя таблицы: триггеры
    в PostgreSQL принадлежат таблице, а не схеме.
    """
    table = normalize_table_name(table)
    name = f"set_{table.split('.')[-1]}_{UPDATED_AT_COLUMN}"
    if len(name) > MAX_IDENTIFIER_LENGTH:
        raise InvalidIdentifierError(
            f"Имя триггера '{name}' длиннее {MAX_IDENTIFIER_LENGTH} символов"
        )
    return name


def drop_trigger_sql(table: str) -> str:
    """SQL удаления триггера updated_at с таблицы."""
    table = normalize_table_name(table)
    return f"""
DROP TRIGGER IF EXISTS {trigger_name(table)} ON {table};
"""


def create_trigger_sql(table: str) -> str:
    """SQL создания триггера updated_at (BEFORE UPDATE, на каждую строку)."""
    table = normalize_table_name(table)
    return f"""
CREATE TRIGGER {trigger_name(table)}
    BEFORE UPDATE ON {table}
    FOR EACH ROW
    EXECUTE FUNCTION {FUNCTION_NAME}();
"""


async def create_timestamp_function(db_manager: DatabaseManager) -> None:
    """
    Создать (или заменить) триггерную функцию set_updated_at_to_now.

    Args:
        db_manager: Менеджер подключения к базе данных
    """
    await db_manager.execute(UPDATE_TIMESTAMP_FUNCTION_SQL)
    logger.debug(f"Функция {FUNCTION_NAME} создана")


async def drop_timestamp_function(db_manager: DatabaseManager) -> None:
    """Удалить триггерную функцию и все зависящие от нее триггеры."""
    await db_manager.execute(DROP_TIMESTAMP_FUNCTION_SQL)
    logger.debug(f"Функция {FUNCTION_NAME} удалена (если существовала)")


async def attach_updated_at_trigger(db_manager: DatabaseManager, table: str) -> None:
    """
    Навесить триггер updated_at на таблицу.
    Старый триггер удаляется перед созданием, поэтому вызов идемпотентен.

    Args:
        db_manager: Менеджер подключения к базе данных
        table: Имя таблицы (с колонкой updated_at)
    """
    name = trigger_name(table)

    # Удаляем триггер, если существует (для идемпотентности)
    await db_manager.execute(drop_trigger_sql(table))
    logger.debug(f"Старый триггер {name} удален (если существовал)")

    await db_manager.execute(create_trigger_sql(table))
    logger.debug(f"Триггер {name} создан")


async def detach_updated_at_trigger(db_manager: DatabaseManager, table: str) -> None:
    """
    Снять триггер updated_at с таблицы.

    Args:
        db_manager: Менеджер подключения к базе данных
        table: Имя таблицы
    """
    await db_manager.execute(drop_trigger_sql(table))
    logger.debug(f"Триггер {trigger_name(table)} удален (если существовал)")
