import json
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

import pydantic
from fastapi import Request
from loguru import logger

from models.db import Document
from utils.exceptions import StorageCorruptError, StorageWriteError


class JsonStore:
    """The whole application state, kept in one JSON file.

    Every call to ``load`` reads the file again and every ``save`` rewrites it
    in full, so nothing is cached between requests. Writes go through a
    temporary file and ``os.replace`` so a failed save never leaves a
    half-written document behind.

    ``transaction`` serialises load-modify-save cycles inside this process
    only. Several processes writing the same file still race, last writer wins.
    """

    def __init__(self, path: str, admin_username: str = "admin",
                 company_name: str = "Saree Availability Co."):
        self.path = Path(path)
        self.admin_username = admin_username
        self.company_name = company_name
        self._lock = threading.RLock()

    def ensure_initialized(self) -> bool:
        """Create the datastore with seed values if it does not exist yet."""
        with self._lock:
            if self.path.exists():
                return False
            logger.info(f"Initializing datastore at {self.path}")
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise StorageWriteError("Datastore directory could not be created") from e
            self.save(Document.initial(self.admin_username, self.company_name))
            return True

    def load(self) -> Document:
        self.ensure_initialized()
        try:
            content = self.path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to read datastore {self.path}: {e}")
            raise StorageCorruptError("Datastore could not be read") from e

        try:
            raw = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error(f"Datastore {self.path} is not valid JSON: {e}")
            raise StorageCorruptError("Datastore is not valid JSON") from e

        if not isinstance(raw, dict):
            raise StorageCorruptError("Datastore root must be an object")
        try:
            return Document.model_validate(raw)
        except pydantic.ValidationError as e:
            logger.error(f"Datastore {self.path} does not match the document shape: {e}")
            raise StorageCorruptError("Datastore does not match the expected shape") from e

    def save(self, doc: Document) -> None:
        try:
            payload = json.dumps(doc.model_dump(mode="json"), indent=2, allow_nan=False)
        except ValueError as e:
            logger.error(f"Refusing to write non-finite number to {self.path}: {e}")
            raise StorageWriteError() from e
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
        except OSError as e:
            logger.error(f"Failed to write datastore {self.path}: {e}")
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageWriteError() from e

    @contextmanager
    def transaction(self) -> Iterator[Document]:
        """Load a snapshot, let the caller change it, save it if it changed.

        Nothing is written when the block raises.
        """
        with self._lock:
            doc = self.load()
            before = doc.model_dump(mode="json")
            yield doc
            if doc.model_dump(mode="json") != before:
                self.save(doc)


def get_store(request: Request) -> JsonStore:
    return request.app.state.store
