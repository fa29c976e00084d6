import math
import uuid
from numbers import Number
from typing import Any, List

from loguru import logger

from configs.constant import CATEGORY_ID_PREFIX, PRODUCT_ID_PREFIX
from db.store import JsonStore
from models.db import Category, Document, Product
from models.schema import (
    CategoryCreate, CategoryUpdate, CategoryWithAvailability,
    ProductCreate, ProductUpdate
)
from repos.availability_repos import normalize, normalize_all
from utils.exceptions import InvalidReference, NotFound, ValidationError


def is_numeric(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, Number):
        return False
    return math.isfinite(value)


def get_category_or_404(doc: Document, category_id: str) -> Category:
    category = doc.find_category(category_id)
    if not category:
        raise NotFound("Category not found")
    return category


def get_product_or_404(doc: Document, product_id: str) -> Product:
    product = doc.find_product(product_id)
    if not product:
        raise NotFound("Product not found")
    return product


def ensure_category_exists(doc: Document, category_id: str) -> None:
    if not doc.find_category(category_id):
        raise InvalidReference("Category does not exist")


# ----- Categories -----

def list_categories(store: JsonStore) -> List[CategoryWithAvailability]:
    with store.transaction() as doc:
        normalize_all(doc)
        return [
            CategoryWithAvailability(
                **category.model_dump(),
                availability=dict(sorted(doc.availability[category.id].items()))
            )
            for category in doc.categories
        ]


def create_category(store: JsonStore, data: CategoryCreate) -> Category:
    if not data.name:
        raise ValidationError("Category name is required")
    with store.transaction() as doc:
        category = Category(
            id=f"{CATEGORY_ID_PREFIX}{uuid.uuid4()}",
            name=data.name,
            description=data.description or "",
        )
        doc.categories.append(category)
        normalize(doc, category.id)
    logger.info(f"Created category {category.id}")
    return category


def update_category(store: JsonStore, category_id: str, data: CategoryUpdate) -> Category:
    with store.transaction() as doc:
        category = get_category_or_404(doc, category_id)
        if data.name:
            category.name = data.name
        if "description" in data.model_fields_set and data.description is not None:
            category.description = data.description
    logger.info(f"Updated category {category_id}")
    return category


def delete_category(store: JsonStore, category_id: str) -> None:
    """Remove a category together with its calendar and all of its products."""
    with store.transaction() as doc:
        get_category_or_404(doc, category_id)
        doc.categories = [c for c in doc.categories if c.id != category_id]
        doc.availability.pop(category_id, None)
        before = len(doc.products)
        doc.products = [p for p in doc.products if p.categoryId != category_id]
    logger.info(f"Deleted category {category_id} and {before - len(doc.products)} products")


# ----- Products -----

def list_products(store: JsonStore) -> List[Product]:
    return store.load().products


def get_product(store: JsonStore, product_id: str) -> Product:
    return get_product_or_404(store.load(), product_id)


def create_product(store: JsonStore, data: ProductCreate) -> Product:
    if not data.name or not data.categoryId:
        raise ValidationError("Product name and category are required")
    with store.transaction() as doc:
        ensure_category_exists(doc, data.categoryId)
        product = Product(
            id=f"{PRODUCT_ID_PREFIX}{uuid.uuid4()}",
            name=data.name,
            categoryId=data.categoryId,
            description=data.description or "",
            price=data.price if is_numeric(data.price) else 0,
            photos=[],
        )
        doc.products.append(product)
    logger.info(f"Created product {product.id} in {product.categoryId}")
    return product


def update_product(store: JsonStore, product_id: str, data: ProductUpdate) -> Product:
    with store.transaction() as doc:
        product = get_product_or_404(doc, product_id)
        if data.categoryId:
            ensure_category_exists(doc, data.categoryId)
            product.categoryId = data.categoryId
        if data.name:
            product.name = data.name
        if "description" in data.model_fields_set and data.description is not None:
            product.description = data.description
        if is_numeric(data.price):
            product.price = data.price
    logger.info(f"Updated product {product_id}")
    return product


def delete_product(store: JsonStore, product_id: str) -> None:
    with store.transaction() as doc:
        get_product_or_404(doc, product_id)
        doc.products = [p for p in doc.products if p.id != product_id]
    logger.info(f"Deleted product {product_id}")
