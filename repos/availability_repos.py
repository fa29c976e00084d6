from loguru import logger

from configs.constant import DAYS_IN_MONTH, DEFAULT_AVAILABLE
from models.db import Document


def normalize(doc: Document, category_id: str) -> bool:
    """Fill every missing day 1..31 of a category's calendar with ``True``.

    Explicit values, ``False`` included, are never overwritten. Returns
    whether the document was changed.
    """
    days = doc.availability.setdefault(category_id, {})
    missing = [day for day in range(1, DAYS_IN_MONTH + 1) if day not in days]
    for day in missing:
        days[day] = DEFAULT_AVAILABLE
    if missing:
        logger.debug(f"Filled {len(missing)} availability days for {category_id}")
    return bool(missing)


def normalize_all(doc: Document) -> bool:
    changed = False
    for category in doc.categories:
        changed = normalize(doc, category.id) or changed
    return changed
