"""
Демонстрационный сценарий: вставка и обновление строки в persons.
"""
import logging
from dataclasses import dataclass
from uuid import UUID

from src.stamp.domain.person import Person
from src.stamp.repo.person_repository import PersonRepository

logger = logging.getLogger(__name__)


DEMO_PERSON_ID = UUID("425db3cc-6a1c-4b0e-9d3f-2f6f3b1c8e01")


@dataclass
class DemoResult:
    """
    Состояние строки до и после обновления.

    Attributes:
        before: Строка сразу после вставки
        after: Строка после UPDATE
    """
    before: Person
    after: Person

    @property
    def stamped(self) -> bool:
        """updated_at был NULL после вставки и стал позже created_at после обновления."""
        return (
            self.before.updated_at is None
            and self.after.updated_at is not None
            and self.after.updated_at > self.after.created_at
            and self.after.created_at == self.before.created_at
        )


async def run_demo(person_repository: PersonRepository) -> DemoResult:
    """
    Вставить John Smith, затем сменить фамилию на Doe.

    Запись с демонстрационным ID удаляется перед вставкой,
    поэтому сценарий можно запускать повторно.

    Args:
        person_repository: Репозиторий людей

    Returns:
        DemoResult со строкой до и после обновления
    """
    await person_repository.delete(DEMO_PERSON_ID)

    before = await person_repository.create("John", "Smith", person_id=DEMO_PERSON_ID)
    logger.info(
        f"После вставки: created_at={before.created_at.isoformat()}, updated_at={before.updated_at}"
    )

    after = await person_repository.update_name(DEMO_PERSON_ID, lastname="Doe")
    if after is None:
        raise RuntimeError(f"Строка {DEMO_PERSON_ID} исчезла до обновления")

    logger.info(
        f"После обновления: created_at={after.created_at.isoformat()}, "
        f"updated_at={after.updated_at.isoformat() if after.updated_at else None}"
    )

    result = DemoResult(before=before, after=after)
    if not result.stamped:
        logger.warning("Триггер не проставил updated_at, проверьте регистрацию триггера")
    return result
