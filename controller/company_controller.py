from loguru import logger

from db.store import JsonStore
from models.db import Company
from utils.exceptions import ValidationError


def get_company(store: JsonStore) -> Company:
    return store.load().company


def rename_company(store: JsonStore, name: str | None) -> Company:
    if not name:
        raise ValidationError("Company name is required")
    with store.transaction() as doc:
        doc.company.name = name
    logger.info(f"Company renamed to '{name}'")
    return doc.company
