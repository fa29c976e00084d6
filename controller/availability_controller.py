from typing import Any, Dict

from loguru import logger

from configs.constant import DAYS_IN_MONTH
from controller.catalog_controller import get_category_or_404
from db.store import JsonStore
from repos.availability_repos import normalize
from utils.exceptions import ValidationError


def parse_day(day: Any) -> int:
    """Accept 5, 5.0 or "5"; anything else is rejected."""
    value = None
    if isinstance(day, bool):
        value = None
    elif isinstance(day, int):
        value = day
    elif isinstance(day, float) and day.is_integer():
        value = int(day)
    elif isinstance(day, str) and day.strip().isdecimal():
        value = int(day.strip())

    if value is None or not 1 <= value <= DAYS_IN_MONTH:
        raise ValidationError(f"Day must be between 1 and {DAYS_IN_MONTH}")
    return value


def get_availability(store: JsonStore, category_id: str) -> Dict[int, bool]:
    with store.transaction() as doc:
        get_category_or_404(doc, category_id)
        normalize(doc, category_id)
        return dict(sorted(doc.availability[category_id].items()))


def set_availability(store: JsonStore, category_id: str, day: Any, available: Any) -> Dict[int, bool]:
    day_number = parse_day(day)
    if not isinstance(available, bool):
        raise ValidationError("Available must be true or false")
    with store.transaction() as doc:
        get_category_or_404(doc, category_id)
        normalize(doc, category_id)
        doc.availability[category_id][day_number] = available
    logger.info(f"Category {category_id} day {day_number} set to {'available' if available else 'unavailable'}")
    return dict(sorted(doc.availability[category_id].items()))
