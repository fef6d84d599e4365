"""
Репозиторий для работы с компаниями.
"""
import logging
from typing import Optional, List, Union
from uuid import UUID

from src.db.connection import DatabaseManager
from src.stamp.domain.company import Company

logger = logging.getLogger(__name__)


_COLUMNS = "id, name, created_at, updated_at"


class CompanyRepository:
    """Репозиторий для работы с таблицей companies."""

    def __init__(self, db_manager: DatabaseManager):
        """
        Инициализация репозитория.

        Args:
            db_manager: Менеджер подключения к БД
        """
        self._db = db_manager

    async def create(self, name: str, company_id: Optional[Union[UUID, str]] = None) -> Company:
        """
        Создать новую компанию.

        Args:
            name: Название компании
            company_id: Явный идентификатор; если не указан, генерирует база

        Returns:
            Созданная компания
        """
        try:
            if company_id is None:
                query = f"""
                    INSERT INTO companies (name)
                    VALUES ($1)
                    RETURNING {_COLUMNS}
                """
                row = await self._db.fetchrow(query, name)
            else:
                query = f"""
                    INSERT INTO companies (id, name)
                    VALUES ($1, $2)
                    RETURNING {_COLUMNS}
                """
                row = await self._db.fetchrow(query, UUID(str(company_id)), name)

            if not row:
                raise ValueError("Не удалось создать компанию")

            company = Company.from_db_row(row)
            logger.info(f"Создана компания: {company.name} (id={company.id})")

            return company

        except Exception as e:
            logger.error(f"Ошибка при создании компании '{name}': {e}", exc_info=True)
            raise

    async def get_by_id(self, company_id: Union[UUID, str]) -> Optional[Company]:
        """
        Получить компанию по ID.

        Returns:
            Компания или None
        """
        try:
            query = f"SELECT {_COLUMNS} FROM companies WHERE id = $1"
            row = await self._db.fetchrow(query, UUID(str(company_id)))

            if row:
                return Company.from_db_row(row)
            return None

        except Exception as e:
            logger.error(f"Ошибка при получении компании {company_id}: {e}", exc_info=True)
            raise

    async def get_all(self) -> List[Company]:
        """Получить все компании, отсортированные по названию."""
        try:
            query = f"SELECT {_COLUMNS} FROM companies ORDER BY name"
            rows = await self._db.fetch(query)
            return [Company.from_db_row(row) for row in rows]

        except Exception as e:
            logger.error(f"Ошибка при получении списка компаний: {e}", exc_info=True)
            raise

    async def rename(self, company_id: Union[UUID, str], new_name: str) -> Optional[Company]:
        """
        Обновить название компании.

        Returns:
            Обновленная компания или None
        """
        try:
            query = f"""
                UPDATE companies
                SET name = $2
                WHERE id = $1
                RETURNING {_COLUMNS}
            """

            row = await self._db.fetchrow(query, UUID(str(company_id)), new_name)

            if row:
                company = Company.from_db_row(row)
                logger.info(f"Обновлено название компании {company_id}: {new_name}")
                return company
            return None

        except Exception as e:
            logger.error(f"Ошибка при обновлении компании {company_id}: {e}", exc_info=True)
            raise

    async def delete(self, company_id: Union[UUID, str]) -> bool:
        """
        Удалить компанию.

        Returns:
            True если удалена, False если не найдена
        """
        try:
            query = "DELETE FROM companies WHERE id = $1 RETURNING id"
            row = await self._db.fetchrow(query, UUID(str(company_id)))

            if row:
                logger.info(f"Удалена компания {company_id}")
                return True
            return False

        except Exception as e:
            logger.error(f"Ошибка при удалении компании {company_id}: {e}", exc_info=True)
            raise
