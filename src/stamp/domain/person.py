"""
Доменная сущность человека.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID


@dataclass
class Person:
    """
    Человек (строка таблицы persons).

    Attributes:
        id: Уникальный идентификатор
        firstname: Имя
        lastname: Фамилия
        created_at: Дата и время создания
        updated_at: Дата и время последнего обновления (None, если строка не обновлялась)
    """
    id: UUID
    firstname: str
    lastname: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        """Полное имя."""
        return f"{self.firstname} {self.lastname}"

    @property
    def was_updated(self) -> bool:
        """Обновлялась ли строка после вставки."""
        return self.updated_at is not None

    @classmethod
    def from_db_row(cls, row: dict) -> "Person":
        """
        Создать объект из строки БД.

        Args:
            row: Словарь с данными из БД

        Returns:
            Экземпляр Person
        """
        return cls(
            id=row["id"],
            firstname=row["firstname"],
            lastname=row["lastname"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
