from typing import Optional

from fastapi import APIRouter, Depends, Request, Security
from fastapi.security import APIKeyHeader

from auth.auth import PasswordHasher, TokenIssuer, get_password_hasher, get_token_issuer
from controller import user_controller
from db.store import JsonStore, get_store
from models.db import Identity
from models.schema import ERROR_RESPONSES, LoginData, Token
from utils.exceptions import Unauthorized

router = APIRouter(
    prefix="/api/auth",
    tags=['auth'],
    responses=ERROR_RESPONSES
)

authorization_header = APIKeyHeader(name="Authorization", auto_error=False)


def get_current_identity(
    request: Request,
    authorization: Optional[str] = Security(authorization_header),
) -> Identity:
    """Accepts ``Authorization: <scheme> <token>``; the scheme itself is not checked."""
    if not authorization:
        raise Unauthorized("Missing authorization header")
    parts = authorization.split(" ")
    if len(parts) < 2 or not parts[1]:
        raise Unauthorized("Invalid authorization header")
    return user_controller.authorize(get_token_issuer(request), parts[1])


@router.post('/login')
def login(
    login_data: LoginData,
    store: JsonStore = Depends(get_store),
    hasher: PasswordHasher = Depends(get_password_hasher),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> Token:
    token_str = user_controller.login(store, hasher, issuer, login_data.username, login_data.password)
    return Token(token=token_str)
