from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse

from configs.constant import FRONTEND_ENTRY_PAGE
from utils.exceptions import NotFound

router = APIRouter(tags=['frontend'])


@router.get("/{full_path:path}", include_in_schema=False)
def serve_frontend(full_path: str, request: Request):
    """Serve a file from the public directory, or the front-end entry page."""
    public_dir = Path(request.app.state.settings.PUBLIC_DIR).resolve()
    if full_path:
        candidate = (public_dir / full_path).resolve()
        if candidate.is_file() and public_dir in candidate.parents:
            return FileResponse(candidate)

    entry_page = public_dir / FRONTEND_ENTRY_PAGE
    if not entry_page.is_file():
        raise NotFound("Front-end is not installed")
    return FileResponse(entry_page)
