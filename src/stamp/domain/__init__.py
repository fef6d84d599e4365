"""Доменный слой (entities, правило проставления updated_at)."""

from src.stamp.domain.person import Person
from src.stamp.domain.company import Company
from src.stamp.domain.row_image import apply_updated_at

__all__ = [
    "Person",
    "Company",
    "apply_updated_at",
]
