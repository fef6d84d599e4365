"""
Доменная сущность компании.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID


@dataclass
class Company:
    """
    Компания (строка таблицы companies).

    Attributes:
        id: Уникальный идентификатор
        name: Название компании
        created_at: Дата и время создания
        updated_at: Дата и время последнего обновления
    """
    id: UUID
    name: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    @property
    def was_updated(self) -> bool:
        return self.updated_at is not None

    @classmethod
    def from_db_row(cls, row: dict) -> "Company":
        """Создать объект из строки БД."""
        return cls(
            id=row["id"],
            name=row["name"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
