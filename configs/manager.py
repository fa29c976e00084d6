import decouple
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict

class BackendBaseSettings(BaseSettings):

    DATA_PATH: str = decouple.config("DATA_PATH", default="data/db.json")
    UPLOADS_DIR: str = decouple.config("UPLOADS_DIR", default="uploads")
    PUBLIC_DIR: str = decouple.config("PUBLIC_DIR", default="public")

    JWT_SECRET: str = decouple.config("JWT_SECRET", default="saree-secret-key-change-me-in-production")
    JWT_ALGORITHM: str = "HS256"
    TOKEN_EXPIRE_HOURS: int = 24
    BCRYPT_ROUNDS: int = decouple.config("BCRYPT_ROUNDS", default=12, cast=int)

    # Seed values for a brand new datastore
    ADMIN_USERNAME: str = decouple.config("ADMIN_USERNAME", default="admin")
    ADMIN_PASSWORD: str = decouple.config("ADMIN_PASSWORD", default="")
    DEFAULT_COMPANY_NAME: str = decouple.config("DEFAULT_COMPANY_NAME", default="Saree Availability Co.")

    MAX_PHOTOS_PER_UPLOAD: int = 5

    IS_ALLOWED_CREDENTIALS: bool = True
    ALLOWED_ORIGINS: list[str] = ["*"]
    ALLOWED_METHODS: list[str] = ["*"]
    ALLOWED_HEADERS: list[str] = ["*"]

    SERVER_HOST: str = "127.0.0.1"
    SERVER_PORT: int = decouple.config("PORT", default=4000, cast=int)
    # The JSON datastore is only safe inside a single process
    SERVER_WORKERS: int = 1
    LOG_LEVEL: str = "info"
    SERVER_RELOAD: bool = False
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings():
    return BackendBaseSettings()

settings = get_settings()
