from loguru import logger

from auth.auth import PasswordHasher, TokenIssuer
from db.store import JsonStore
from models.db import Identity
from utils.exceptions import InvalidCredentials, Unauthorized, ValidationError


def authenticate_user(store: JsonStore, hasher: PasswordHasher, username: str, password: str) -> Identity:
    admin = store.load().admin
    # Verify the hash even for an unknown username so both failures look alike
    password_ok = hasher.verify(password, admin.passwordHash)
    if username != admin.username or not password_ok:
        logger.warning(f"Failed login attempt for '{username}'")
        raise InvalidCredentials()
    return Identity(username=admin.username)


def login(store: JsonStore, hasher: PasswordHasher, issuer: TokenIssuer,
          username: str | None, password: str | None) -> str:
    if not username or not password:
        raise ValidationError("Username and password are required")
    identity = authenticate_user(store, hasher, username, password)
    logger.info(f"User '{identity.username}' logged in")
    return issuer.issue(identity.username)


def authorize(issuer: TokenIssuer, token: str | None) -> Identity:
    if not token:
        raise Unauthorized("Missing token")
    return issuer.verify(token)


def set_admin_password(store: JsonStore, hasher: PasswordHasher, password: str) -> None:
    """Out-of-band password change. The admin username is left untouched."""
    if not password:
        raise ValidationError("Password cannot be empty")
    with store.transaction() as doc:
        doc.admin.passwordHash = hasher.hash(password)
    logger.info(f"Password updated for admin '{doc.admin.username}'")
