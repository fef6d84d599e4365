"""
Утилиты валидации SQL-идентификаторов.
Имена таблиц подставляются в DDL напрямую (параметры $1 для DDL не работают),
поэтому перед подстановкой они проверяются.
"""
import re
from dataclasses import dataclass
from typing import Optional


# Максимальная длина идентификатора в PostgreSQL (NAMEDATALEN - 1)
MAX_IDENTIFIER_LENGTH = 63

_IDENTIFIER_PATTERN = re.compile(r'^[a-z_][a-z0-9_]*$')


@dataclass
class ValidationResult:
    """
    Результат валидации.

    Attributes:
        is_valid: Прошла ли валидация
        error: Сообщение об ошибке (если не прошла)
        normalized: Нормализованное значение (если прошла)
    """
    is_valid: bool
    error: Optional[str] = None
    normalized: Optional[str] = None


class Validators:
    """Класс с методами валидации идентификаторов."""

    @staticmethod
    def validate_identifier(name: str) -> ValidationResult:
        """
        Валидация простого (без кавычек) идентификатора PostgreSQL.

        Правила:
        - Только строчные латинские буквы, цифры и подчеркивание
        - Первый символ — буква или подчеркивание
        - Не длиннее 63 символов

        Args:
            name: Имя колонки или таблицы

        Returns:
            ValidationResult с результатом проверки
        """
        if not name or not name.strip():
            return ValidationResult(False, "Идентификатор не может быть пустым")

        name = name.strip()

        if len(name) > MAX_IDENTIFIER_LENGTH:
            return ValidationResult(
                False,
                f"Идентификатор '{name}' длиннее {MAX_IDENTIFIER_LENGTH} символов"
            )

        if not _IDENTIFIER_PATTERN.match(name):
            return ValidationResult(
                False,
                f"'{name}' содержит недопустимые символы. "
                "Разрешены строчные латинские буквы, цифры и подчеркивание"
            )

        return ValidationResult(True, normalized=name)

    @staticmethod
    def validate_table_name(table: str) -> ValidationResult:
        """
        Валидация имени таблицы, возможно с указанием схемы (schema.table).

        Args:
            table: Имя таблицы

        Returns:
            ValidationResult; normalized содержит имя без лишних пробелов
        """
        if not table or not table.strip():
            return ValidationResult(False, "Имя таблицы не может быть пустым")

        parts = table.strip().split(".")
        if len(parts) > 2:
            return ValidationResult(
                False,
                f"'{table}': допускается только форма таблица или схема.таблица"
            )

        normalized_parts = []
        for part in parts:
            result = Validators.validate_identifier(part)
            if not result.is_valid:
                return result
            normalized_parts.append(result.normalized)

        return ValidationResult(True, normalized=".".join(normalized_parts))
