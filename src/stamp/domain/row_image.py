"""
Правило проставления updated_at для образа строки.

То же правило, что выполняет триггерная функция set_updated_at_to_now
в базе: если в новом образе строки есть поле updated_at, оно
перезаписывается текущим временем, иначе строка возвращается как есть.
"""
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from src.db.table.base import UPDATED_AT_COLUMN


def apply_updated_at(row_image: Mapping[str, Any], now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Применить правило триггера к образу строки.

    Поле считается присутствующим, даже если его значение None:
    после вставки updated_at равен NULL, но колонка в таблице есть.

    Args:
        row_image: Новые значения колонок строки
        now: Текущее время; по умолчанию datetime.now(timezone.utc)

    Returns:
        Новый словарь; исходный образ строки не изменяется
    """
    new_row = dict(row_image)
    if UPDATED_AT_COLUMN in new_row:
        new_row[UPDATED_AT_COLUMN] = now or datetime.now(timezone.utc)
    return new_row
