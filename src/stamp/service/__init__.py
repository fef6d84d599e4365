"""Сервисный слой."""

from src.stamp.service.trigger_service import TriggerService, MissingUpdatedAtColumnError
from src.stamp.service.demo_service import DemoResult, run_demo, DEMO_PERSON_ID

__all__ = [
    "TriggerService",
    "MissingUpdatedAtColumnError",
    "DemoResult",
    "run_demo",
    "DEMO_PERSON_ID",
]
