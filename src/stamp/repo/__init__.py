"""Слой репозиториев (data access layer)."""

from src.stamp.repo.person_repository import PersonRepository
from src.stamp.repo.company_repository import CompanyRepository

__all__ = [
    "PersonRepository",
    "CompanyRepository",
]
