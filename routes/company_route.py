from typing import Optional

from fastapi import APIRouter, Depends, File, Request, UploadFile

from controller import company_controller, media_controller
from db.store import JsonStore, get_store
from models.db import Company, Identity
from models.schema import ERROR_RESPONSES, CompanyUpdate
from routes.user_route import get_current_identity
from utils.exceptions import ValidationError
from utils.file_upload import save_upload

router = APIRouter(prefix="/api/company", tags=['company'], responses=ERROR_RESPONSES)


@router.get("")
def get_company(store: JsonStore = Depends(get_store)) -> Company:
    return company_controller.get_company(store)


@router.put("")
def update_company(
    data: CompanyUpdate,
    identity: Identity = Depends(get_current_identity),
    store: JsonStore = Depends(get_store),
) -> Company:
    return company_controller.rename_company(store, data.name)


@router.post("/logo")
def upload_logo(
    request: Request,
    logo: Optional[UploadFile] = File(None),
    identity: Identity = Depends(get_current_identity),
    store: JsonStore = Depends(get_store),
) -> Company:
    if logo is None or not logo.filename:
        raise ValidationError("Logo file is required")
    file_ref = save_upload(logo, request.app.state.settings.UPLOADS_DIR)
    return media_controller.set_company_logo(store, file_ref)
