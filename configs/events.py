from pathlib import Path

from fastapi import FastAPI
from loguru import logger

from controller.user_controller import set_admin_password


def startup_event(app: FastAPI):
    def startup_datastore():
        settings = app.state.settings
        store = app.state.store

        Path(settings.UPLOADS_DIR).mkdir(parents=True, exist_ok=True)
        logger.info(f"Serving uploads from {settings.UPLOADS_DIR}")

        if store.ensure_initialized():
            logger.info("Datastore created with default values")
        doc = store.load()
        logger.info(
            f"Datastore {settings.DATA_PATH} loaded: "
            f"{len(doc.categories)} categories, {len(doc.products)} products"
        )

        # Seed the admin password from settings only if none was ever set
        if not doc.admin.passwordHash:
            if settings.ADMIN_PASSWORD:
                logger.info(f"Setting initial password for admin '{doc.admin.username}'")
                set_admin_password(store, app.state.password_hasher, settings.ADMIN_PASSWORD)
            else:
                logger.warning(
                    "Admin password is not set, logins will fail until "
                    "`python manage.py set-admin-password` is run"
                )
    return startup_datastore


def shutdown_event(app: FastAPI):
    def shutdown_datastore():
        logger.info("Shutting down, datastore is persisted on every write")
    return shutdown_datastore
