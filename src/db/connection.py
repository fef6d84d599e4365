"""
Менеджер подключения к базе данных.
Обеспечивает инициализацию и управление пулом соединений с PostgreSQL.
"""
import logging
from typing import Any, Dict, Optional
from contextlib import asynccontextmanager

import asyncpg
from asyncpg import Pool

from src.config import DatabaseConfig

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Менеджер для работы с базой данных."""

    def __init__(
        self,
        config: DatabaseConfig,
        min_size: int = 2,
        max_size: int = 10,
        server_settings: Optional[Dict[str, str]] = None,
    ):
        """
        Инициализация менеджера БД.

        Args:
            config: Конфигурация базы данных
            min_size: Минимальный размер пула
            max_size: Максимальный размер пула
            server_settings: Параметры сессии PostgreSQL (например, search_path)
        """
        self.config = config
        self.min_size = min_size
        self.max_size = max_size
        self.server_settings = server_settings
        self.pool: Optional[Pool] = None

    @property
    def is_initialized(self) -> bool:
        """Создан ли пул подключений."""
        return self.pool is not None

    def _require_pool(self) -> Pool:
        if not self.pool:
            raise RuntimeError("Пул подключений не инициализирован")
        return self.pool

    async def initialize(self) -> None:
        """Инициализация пула подключений к БД."""
        try:
            self.pool = await asyncpg.create_pool(
                host=self.config.host,
                port=self.config.port,
                user=self.config.user,
                password=self.config.password,
                database=self.config.database,
                min_size=self.min_size,
                max_size=self.max_size,
                server_settings=self.server_settings,
            )
            logger.info(
                f"Пул подключений к БД {self.config.database}@{self.config.host}:{self.config.port} создан"
            )

            # Проверка подключения
            async with self.pool.acquire() as conn:
                await conn.execute("SELECT 1")
            logger.info("Подключение к БД успешно проверено")

        except Exception as e:
            logger.error(f"Ошибка при создании пула подключений: {e}")
            raise

    @asynccontextmanager
    async def transaction(self):
        """
        Получить соединение с открытой транзакцией.
        Внутри одной транзакции NOW() возвращает одно и то же значение.

        Yields:
            Connection: Соединение с активной транзакцией
        """
        pool = self._require_pool()
        async with pool.acquire() as connection:
            async with connection.transaction():
                yield connection

    async def execute(self, query: str, *args) -> str:
        """
        Выполнить SQL запрос.

        Args:
            query: SQL запрос
            *args: Параметры запроса

        Returns:
            Статус выполнения запроса (например, "UPDATE 1")
        """
        pool = self._require_pool()
        async with pool.acquire() as conn:
            return await conn.execute(query, *args)

    async def fetch(self, query: str, *args) -> list:
        """
        Выполнить SELECT запрос и получить результаты.

        Args:
            query: SQL запрос
            *args: Параметры запроса

        Returns:
            Список результатов
        """
        pool = self._require_pool()
        async with pool.acquire() as conn:
            return await conn.fetch(query, *args)

    async def fetchrow(self, query: str, *args) -> Optional[dict]:
        """
        Выполнить запрос и получить одну строку.

        Args:
            query: SQL запрос
            *args: Параметры запроса

        Returns:
            Результат запроса или None
        """
        pool = self._require_pool()
        async with pool.acquire() as conn:
            return await conn.fetchrow(query, *args)

    async def fetchval(self, query: str, *args) -> Any:
        """Выполнить запрос и получить значение первой колонки первой строки."""
        pool = self._require_pool()
        async with pool.acquire() as conn:
            return await conn.fetchval(query, *args)

    async def close(self) -> None:
        """Закрыть пул подключений."""
        if self.pool:
            await self.pool.close()
            self.pool = None
            logger.info("Пул подключений к БД закрыт")
