from typing import List, Optional

from fastapi import APIRouter, Depends, File, Request, UploadFile, status

from controller import catalog_controller, media_controller
from db.store import JsonStore, get_store
from models.db import Identity, Product
from models.schema import ERROR_RESPONSES, MessageResponse, ProductCreate, ProductUpdate
from routes.user_route import get_current_identity
from utils.exceptions import ValidationError
from utils.file_upload import save_uploads

router = APIRouter(prefix="/api/products", tags=['product'], responses=ERROR_RESPONSES)


@router.get("")
def list_products(store: JsonStore = Depends(get_store)) -> List[Product]:
    return catalog_controller.list_products(store)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_product(
    data: ProductCreate,
    identity: Identity = Depends(get_current_identity),
    store: JsonStore = Depends(get_store),
) -> Product:
    return catalog_controller.create_product(store, data)


@router.put("/{product_id}")
def update_product(
    product_id: str,
    data: ProductUpdate,
    identity: Identity = Depends(get_current_identity),
    store: JsonStore = Depends(get_store),
) -> Product:
    return catalog_controller.update_product(store, product_id, data)


@router.delete("/{product_id}")
def delete_product(
    product_id: str,
    identity: Identity = Depends(get_current_identity),
    store: JsonStore = Depends(get_store),
) -> MessageResponse:
    catalog_controller.delete_product(store, product_id)
    return MessageResponse(message="Product removed")


@router.post("/{product_id}/photos")
def upload_photos(
    request: Request,
    product_id: str,
    photos: Optional[List[UploadFile]] = File(None),
    identity: Identity = Depends(get_current_identity),
    store: JsonStore = Depends(get_store),
) -> Product:
    settings = request.app.state.settings
    files = [photo for photo in (photos or []) if photo.filename]
    if len(files) > settings.MAX_PHOTOS_PER_UPLOAD:
        raise ValidationError(f"At most {settings.MAX_PHOTOS_PER_UPLOAD} photos per upload")

    # 404 before anything touches the uploads directory
    catalog_controller.get_product(store, product_id)
    file_refs = save_uploads(files, settings.UPLOADS_DIR)
    return media_controller.append_product_photos(store, product_id, file_refs)
