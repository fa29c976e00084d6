from typing import List

from loguru import logger

from controller.catalog_controller import get_product_or_404
from db.store import JsonStore
from models.db import Company, Product
from utils.exceptions import ValidationError


def set_company_logo(store: JsonStore, file_ref: str | None) -> Company:
    """Point the company at a new logo. The previous file stays on disk."""
    if not file_ref:
        raise ValidationError("Logo file is required")
    with store.transaction() as doc:
        doc.company.logoPath = file_ref
    logger.info(f"Company logo set to {file_ref}")
    return doc.company


def append_product_photos(store: JsonStore, product_id: str, file_refs: List[str]) -> Product:
    with store.transaction() as doc:
        product = get_product_or_404(doc, product_id)
        product.photos = [*product.photos, *file_refs]
    logger.info(f"Attached {len(file_refs)} photos to product {product_id}")
    return product
