"""
Auth gate and FastAPI dependencies shared by the routers.

The application keeps its configured collaborators on ``app.state``
(session factory, password hasher, token issuer); the dependencies here
build the request-scoped stores from them.
"""
from typing import Optional
import logging

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from .auth import PasswordHasher, TokenIssuer
from .credentials import CredentialStore
from .db import get_db
from .errors import InvalidToken, Unauthenticated, UserNotFound
from .models import User
from .resources import ResourceStore

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def extract_bearer_token(authorization: Optional[str]) -> str:
    """
    Pull the token out of an ``Authorization: Bearer <token>`` header.

    The prefix is case-sensitive. A missing header (or an empty token) means
    the caller is unauthenticated; any other shape is an invalid token.
    """
    if authorization is None:
        raise Unauthenticated()
    if not authorization.startswith(BEARER_PREFIX):
        if authorization.strip() == "":
            raise Unauthenticated()
        raise InvalidToken()
    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        raise Unauthenticated()
    return token


class AuthGate:
    """Resolves the ``Authorization`` header of a request to a stored user."""

    def __init__(self, token_issuer: TokenIssuer, credentials: CredentialStore):
        self.token_issuer = token_issuer
        self.credentials = credentials

    def authenticate(self, authorization: Optional[str]) -> User:
        token = extract_bearer_token(authorization)
        user_id = self.token_issuer.verify(token)
        user = self.credentials.find_by_id(user_id)
        if user is None:
            logger.info("Token for unknown user rejected: user_id=%s", user_id)
            raise UserNotFound()
        return user


def get_token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.token_issuer


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_credential_store(
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> CredentialStore:
    return CredentialStore(db, hasher)


def get_resource_store(db: Session = Depends(get_db)) -> ResourceStore:
    return ResourceStore(db)


def get_current_user(
    authorization: Optional[str] = Header(default=None, alias="Authorization"),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
    credentials: CredentialStore = Depends(get_credential_store),
) -> User:
    return AuthGate(token_issuer, credentials).authenticate(authorization)
