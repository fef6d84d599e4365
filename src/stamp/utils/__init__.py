"""Утилиты."""

from src.stamp.utils.validators import Validators, ValidationResult

__all__ = [
    "Validators",
    "ValidationResult",
]
