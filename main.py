"""
Точка входа в приложение.
Подключается к базе данных, создает схему с триггером updated_at
и, если включено, выполняет демонстрационный сценарий.
"""
import asyncio
import logging
import sys
from typing import Optional

from src.config import get_config
from src.db.connection import DatabaseManager
from src.db.table import initialize_tables
from src.stamp.repo import PersonRepository
from src.stamp.service import TriggerService, run_demo

# Логирование настраивается автоматически при загрузке конфигурации
logger = logging.getLogger(__name__)


class SchemaApplication:
    """Основной класс приложения."""

    def __init__(self):
        """Инициализация приложения."""
        self.config = get_config()
        self.db_manager: Optional[DatabaseManager] = None

    async def initialize_database(self) -> None:
        """Инициализация подключения к базе данных и схемы."""
        try:
            logger.info("Инициализация подключения к базе данных...")
            self.db_manager = DatabaseManager(self.config.database)
            await self.db_manager.initialize()
            logger.info("Подключение к базе данных установлено")

            # Инициализация таблиц, функции и триггеров
            await initialize_tables(self.db_manager)

        except Exception as e:
            logger.error(f"Ошибка при инициализации БД: {e}", exc_info=True)
            raise

    async def start(self) -> None:
        """Запуск приложения."""
        try:
            await self.initialize_database()

            if not self.db_manager or not self.db_manager.is_initialized:
                raise RuntimeError("База данных не инициализирована")

            attached = await TriggerService(self.db_manager).list_attached()
            logger.info(f"Триггер updated_at навешен на таблицы: {', '.join(attached) or '-'}")

            if self.config.run_demo:
                logger.info("Запуск демонстрационного сценария...")
                result = await run_demo(PersonRepository(self.db_manager))
                logger.info(f"updated_at проставлен триггером: {result.stamped}")

        except Exception as e:
            logger.error(f"Критическая ошибка: {e}", exc_info=True)
            raise
        finally:
            await self.cleanup()

    async def cleanup(self) -> None:
        """Очистка ресурсов при завершении работы."""
        logger.info("Очистка ресурсов...")

        if self.db_manager:
            await self.db_manager.close()

        logger.info("Ресурсы освобождены")


async def main() -> None:
    """Главная функция запуска приложения."""
    app = SchemaApplication()
    await app.start()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Приложение остановлено пользователем")
    except Exception as e:
        logger.error(f"Критическая ошибка при запуске: {e}", exc_info=True)
        sys.exit(1)
