import datetime
from typing import Protocol

import bcrypt
import jwt
from fastapi import Request
from loguru import logger

from models.db import Identity
from utils.exceptions import Unauthorized


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...

    def verify(self, password: str, hashed: str) -> bool: ...


class TokenIssuer(Protocol):
    def issue(self, subject: str) -> str: ...

    def verify(self, token: str) -> Identity: ...


class BcryptPasswordHasher:

    def __init__(self, rounds: int = 12) -> None:
        self.rounds = rounds

    def hash(self, password: str) -> str:
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=self.rounds)).decode()

    def verify(self, password: str, hashed: str) -> bool:
        if not hashed:
            return False
        try:
            return bcrypt.checkpw(password.encode(), hashed.encode())
        except ValueError:
            # Not a bcrypt hash, or a password bcrypt refuses to handle
            return False


class JwtTokenIssuer:

    def __init__(self, secret: str, algorithm: str = "HS256",
                 lifetime: datetime.timedelta = datetime.timedelta(hours=24)) -> None:
        self.secret = secret
        self.algorithm = algorithm
        self.lifetime = lifetime

    def issue(self, subject: str) -> str:
        now = datetime.datetime.now(datetime.timezone.utc)
        payload = {'sub': subject,
                   'iat': now,
                   'exp': now + self.lifetime}
        return jwt.encode(payload, key=self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Identity:
        try:
            decoded = jwt.decode(token, self.secret, algorithms=[self.algorithm],
                                 options={"require": ["sub", "exp"]})
        except jwt.ExpiredSignatureError:
            logger.warning("Rejected expired token")
            raise Unauthorized("Token has expired")
        except jwt.InvalidTokenError as e:
            logger.warning(f"Rejected token: {e}")
            raise Unauthorized("Invalid token")
        username = decoded.get('sub')
        if not isinstance(username, str) or not username:
            raise Unauthorized("Invalid token")
        return Identity(username=username)


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.token_issuer
