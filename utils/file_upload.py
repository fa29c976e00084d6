import os
import re
import shutil
import time
from pathlib import Path
from typing import List

from fastapi import UploadFile
from loguru import logger

from configs.constant import UPLOADS_URL_PREFIX
from utils.exceptions import StorageWriteError


def build_upload_name(original_name: str | None) -> str:
    """``<epoch millis>-<original name>`` with whitespace runs turned into '-'.

    Only best-effort unique: two uploads with the same name in the same
    millisecond collide.
    """
    base = os.path.basename(original_name or "") or "upload"
    safe_name = re.sub(r"\s+", "-", base)
    return f"{int(time.time() * 1000)}-{safe_name}"


def save_upload(file: UploadFile, uploads_dir: str) -> str:
    """
    Stores an uploaded file in the uploads directory.

    :param file: The uploaded file.
    :param uploads_dir: Directory served under the public uploads path.
    :return: The public path of the stored file, e.g. ``/uploads/1700000000000-logo.png``.
    """
    filename = build_upload_name(file.filename)
    destination = Path(uploads_dir) / filename
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        with destination.open("wb") as out:
            shutil.copyfileobj(file.file, out)
    except OSError as e:
        logger.error(f"Failed to store upload {file.filename}: {e}")
        raise StorageWriteError("Uploaded file could not be stored") from e
    logger.debug(f"Stored upload {file.filename} as {destination}")
    return f"{UPLOADS_URL_PREFIX}/{filename}"


def save_uploads(files: List[UploadFile], uploads_dir: str) -> List[str]:
    return [save_upload(file, uploads_dir) for file in files]
