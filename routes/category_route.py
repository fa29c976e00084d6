from typing import Dict, List

from fastapi import APIRouter, Depends, status

from controller import availability_controller, catalog_controller
from db.store import JsonStore, get_store
from models.db import Category, Identity
from models.schema import (
    ERROR_RESPONSES, AvailabilityUpdate, CategoryCreate, CategoryUpdate,
    CategoryWithAvailability, MessageResponse
)
from routes.user_route import get_current_identity

router = APIRouter(prefix="/api/categories", tags=['category'], responses=ERROR_RESPONSES)


@router.get("")
def list_categories(store: JsonStore = Depends(get_store)) -> List[CategoryWithAvailability]:
    return catalog_controller.list_categories(store)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_category(
    data: CategoryCreate,
    identity: Identity = Depends(get_current_identity),
    store: JsonStore = Depends(get_store),
) -> Category:
    return catalog_controller.create_category(store, data)


@router.put("/{category_id}")
def update_category(
    category_id: str,
    data: CategoryUpdate,
    identity: Identity = Depends(get_current_identity),
    store: JsonStore = Depends(get_store),
) -> Category:
    return catalog_controller.update_category(store, category_id, data)


@router.delete("/{category_id}")
def delete_category(
    category_id: str,
    identity: Identity = Depends(get_current_identity),
    store: JsonStore = Depends(get_store),
) -> MessageResponse:
    catalog_controller.delete_category(store, category_id)
    return MessageResponse(message="Category removed")


@router.get("/{category_id}/availability")
def get_availability(
    category_id: str,
    store: JsonStore = Depends(get_store),
) -> Dict[int, bool]:
    return availability_controller.get_availability(store, category_id)


@router.put("/{category_id}/availability")
def set_availability(
    category_id: str,
    data: AvailabilityUpdate,
    identity: Identity = Depends(get_current_identity),
    store: JsonStore = Depends(get_store),
) -> Dict[int, bool]:
    return availability_controller.set_availability(store, category_id, data.day, data.available)
