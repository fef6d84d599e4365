"""
Конфигурация приложения.
Загружает переменные окружения из .env файла.
"""
import os
import sys
import logging
from typing import Optional
from dataclasses import dataclass
from dotenv import load_dotenv

# Загружаем переменные окружения из .env
load_dotenv()


def _env_flag(name: str, default: str = "False") -> bool:
    """Прочитать булев флаг из переменной окружения."""
    return os.getenv(name, default).strip().lower() == "true"


@dataclass
class DatabaseConfig:
    """Конфигурация базы данных."""
    host: str
    port: int
    user: str
    password: str
    database: str

    @property
    def connection_string(self) -> str:
        """Возвращает строку подключения к БД."""
        return f"postgresql://{self.user}:{self.password}@{self.host}:{self.port}/{self.database}"

    @classmethod
    def from_env(cls) -> "DatabaseConfig":
        """Создает конфигурацию БД из переменных окружения."""
        port_str = os.getenv("DB_PORT", "5432")
        try:
            port = int(port_str)
        except ValueError:
            raise ValueError(f"DB_PORT должен быть целым числом, получено: {port_str!r}")

        return cls(
            host=os.getenv("DB_HOST", "localhost"),
            port=port,
            user=os.getenv("DB_USER", "postgres"),
            password=os.getenv("DB_PASSWORD", ""),
            database=os.getenv("DB_NAME", "updated_at_demo"),
        )


@dataclass
class Config:
    """Основная конфигурация приложения."""
    database: DatabaseConfig
    debug: bool = False
    run_demo: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        """Создает конфигурацию из переменных окружения."""
        return cls(
            database=DatabaseConfig.from_env(),
            debug=_env_flag("DEBUG"),
            run_demo=_env_flag("RUN_DEMO"),
        )


# Глобальный экземпляр конфигурации
config: Optional[Config] = None


def setup_logging(level: Optional[str] = None, format_string: Optional[str] = None) -> None:
    """
    Настройка логирования приложения.

    Args:
        level: Уровень логирования (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Если не указан, берется из переменной окружения LOG_LEVEL или INFO.
        format_string: Формат строки логирования. Если не указан, используется стандартный.
    """
    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_format = format_string or "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Преобразуем строку уровня в константу logging
    numeric_level = getattr(logging, log_level, logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,  # Перезаписываем существующую конфигурацию
    )


def get_config() -> Config:
    """Получить конфигурацию приложения (singleton)."""
    global config
    if config is None:
        config = Config.from_env()
        # Настраиваем логирование при первой загрузке конфигурации;
        # DEBUG=true включает подробный лог, если LOG_LEVEL не задан явно
        setup_logging("DEBUG" if config.debug and not os.getenv("LOG_LEVEL") else None)
    return config
