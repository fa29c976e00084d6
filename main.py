import datetime
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from loguru import logger
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
import fastapi
from auth.auth import BcryptPasswordHasher, JwtTokenIssuer
from configs.constant import UPLOADS_URL_PREFIX
from configs.manager import BackendBaseSettings, settings as default_settings
from db.store import JsonStore
from middleware.exception import ExceptionHandlerMiddleware, register_exception_handlers
from configs.events import startup_event, shutdown_event
from fastapi.middleware.gzip import GZipMiddleware
from routes.user_route import router as user_router
from routes.company_route import router as company_router
from routes.category_route import router as category_router
from routes.product_route import router as product_router
from routes.frontend_route import router as frontend_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    startup_event(app)()
    yield
    shutdown_event(app)()


def initialize_backend_application(settings: BackendBaseSettings | None = None) -> fastapi.FastAPI:
    settings = settings or default_settings
    logger.info("Starting FastAPI application")
    app = FastAPI(
        title="Catalog & Availability Admin API",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = JsonStore(
        settings.DATA_PATH,
        admin_username=settings.ADMIN_USERNAME,
        company_name=settings.DEFAULT_COMPANY_NAME,
    )
    app.state.password_hasher = BcryptPasswordHasher(rounds=settings.BCRYPT_ROUNDS)
    app.state.token_issuer = JwtTokenIssuer(
        settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
        lifetime=datetime.timedelta(hours=settings.TOKEN_EXPIRE_HOURS),
    )

    app.add_middleware(GZipMiddleware, minimum_size=1000, compresslevel=2)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=settings.IS_ALLOWED_CREDENTIALS,
        allow_methods=settings.ALLOWED_METHODS,
        allow_headers=settings.ALLOWED_HEADERS,
    )
    app.add_middleware(ExceptionHandlerMiddleware)
    register_exception_handlers(app)

    app.include_router(user_router)
    app.include_router(company_router)
    app.include_router(category_router)
    app.include_router(product_router)
    app.mount(
        UPLOADS_URL_PREFIX,
        StaticFiles(directory=Path(settings.UPLOADS_DIR), check_dir=False),
        name="uploads",
    )
    # Catch-all, must stay last
    app.include_router(frontend_router)
    return app


backend_app: fastapi.FastAPI = initialize_backend_application()


if __name__ == "__main__":
    uvicorn.run("main:backend_app",
                host = default_settings.SERVER_HOST,
                workers = default_settings.SERVER_WORKERS,
                reload = default_settings.SERVER_RELOAD,
                port = default_settings.SERVER_PORT,
                log_level = default_settings.LOG_LEVEL)
