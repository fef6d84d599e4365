"""
Репозиторий для работы с людьми.
Только CRUD операции; updated_at проставляет триггер в базе.
"""
import logging
from typing import Optional, List, Union
from uuid import UUID

from src.db.connection import DatabaseManager
from src.stamp.domain.person import Person

logger = logging.getLogger(__name__)


_COLUMNS = "id, firstname, lastname, created_at, updated_at"


class PersonRepository:
    """
    Репозиторий для работы с таблицей persons.

    Responsibilities:
        - CRUD операции с людьми
        - Никогда не пишет created_at/updated_at сам
    """

    def __init__(self, db_manager: DatabaseManager):
        """
        Инициализация репозитория.

        Args:
            db_manager: Менеджер подключения к БД
        """
        self._db = db_manager

    async def create(
        self,
        firstname: str,
        lastname: str,
        person_id: Optional[Union[UUID, str]] = None,
    ) -> Person:
        """
        Создать нового человека.

        Args:
            firstname: Имя
            lastname: Фамилия
            person_id: Явный идентификатор; если не указан, генерирует база

        Returns:
            Созданный человек (updated_at = None)
        """
        try:
            if person_id is None:
                query = f"""
                    INSERT INTO persons (firstname, lastname)
                    VALUES ($1, $2)
                    RETURNING {_COLUMNS}
                """
                row = await self._db.fetchrow(query, firstname, lastname)
            else:
                query = f"""
                    INSERT INTO persons (id, firstname, lastname)
                    VALUES ($1, $2, $3)
                    RETURNING {_COLUMNS}
                """
                row = await self._db.fetchrow(query, UUID(str(person_id)), firstname, lastname)

            if not row:
                raise ValueError("Не удалось создать запись о человеке")

            person = Person.from_db_row(row)
            logger.info(f"Создан человек: {person.full_name} (id={person.id})")

            return person

        except Exception as e:
            logger.error(f"Ошибка при создании человека '{firstname} {lastname}': {e}", exc_info=True)
            raise

    async def get_by_id(self, person_id: Union[UUID, str]) -> Optional[Person]:
        """
        Получить человека по ID.

        Returns:
            Человек или None
        """
        try:
            query = f"""
                SELECT {_COLUMNS}
                FROM persons
                WHERE id = $1
            """

            row = await self._db.fetchrow(query, UUID(str(person_id)))

            if row:
                return Person.from_db_row(row)
            return None

        except Exception as e:
            logger.error(f"Ошибка при получении человека {person_id}: {e}", exc_info=True)
            raise

    async def get_all(self) -> List[Person]:
        """Получить всех людей, отсортированных по фамилии и имени."""
        try:
            query = f"""
                SELECT {_COLUMNS}
                FROM persons
                ORDER BY lastname, firstname
            """

            rows = await self._db.fetch(query)
            return [Person.from_db_row(row) for row in rows]

        except Exception as e:
            logger.error(f"Ошибка при получении списка людей: {e}", exc_info=True)
            raise

    async def update_name(
        self,
        person_id: Union[UUID, str],
        firstname: Optional[str] = None,
        lastname: Optional[str] = None,
    ) -> Optional[Person]:
        """
        Обновить имя и/или фамилию.
        Непереданные поля остаются прежними.

        Args:
            person_id: ID человека
            firstname: Новое имя
            lastname: Новая фамилия

        Returns:
            Обновленный человек или None, если не найден
        """
        try:
            query = f"""
                UPDATE persons
                SET firstname = COALESCE($2, firstname),
                    lastname = COALESCE($3, lastname)
                WHERE id = $1
                RETURNING {_COLUMNS}
            """

            row = await self._db.fetchrow(query, UUID(str(person_id)), firstname, lastname)

            if row:
                person = Person.from_db_row(row)
                logger.info(f"Обновлен человек {person_id}: {person.full_name}")
                return person
            return None

        except Exception as e:
            logger.error(f"Ошибка при обновлении человека {person_id}: {e}", exc_info=True)
            raise

    async def touch(self, person_id: Union[UUID, str]) -> Optional[Person]:
        """
        Обновить строку, не меняя ни одного бизнес-поля.
        Триггер все равно срабатывает и проставляет updated_at.

        Returns:
            Обновленный человек или None, если не найден
        """
        try:
            query = f"""
                UPDATE persons
                SET firstname = firstname
                WHERE id = $1
                RETURNING {_COLUMNS}
            """

            row = await self._db.fetchrow(query, UUID(str(person_id)))

            if row:
                return Person.from_db_row(row)
            return None

        except Exception as e:
            logger.error(f"Ошибка при обновлении человека {person_id}: {e}", exc_info=True)
            raise

    async def delete(self, person_id: Union[UUID, str]) -> bool:
        """
        Удалить человека.

        Returns:
            True если удален, False если не найден
        """
        try:
            query = "DELETE FROM persons WHERE id = $1 RETURNING id"
            row = await self._db.fetchrow(query, UUID(str(person_id)))

            if row:
                logger.info(f"Удален человек {person_id}")
                return True
            return False

        except Exception as e:
            logger.error(f"Ошибка при удалении человека {person_id}: {e}", exc_info=True)
            raise
