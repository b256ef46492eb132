"""
Account routes - registration and login.
"""
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError

from ..auth import TokenIssuer
from ..credentials import CredentialStore
from ..dependencies import get_credential_store, get_token_issuer
from ..errors import InternalError, TaskboardError
from ..schemas import ErrorResponse, Token, UserCredentials

router = APIRouter(tags=["accounts"])
logger = logging.getLogger(__name__)


@router.post(
    "/register",
    response_model=Token,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse, "description": "Email already exists"}},
)
def register(
    payload: UserCredentials,
    credentials: CredentialStore = Depends(get_credential_store),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
):
    try:
        user_id = credentials.register(payload.email, payload.password)
    except TaskboardError:
        raise
    except SQLAlchemyError as e:
        logger.exception("Registration failed")
        raise InternalError("Error registering user") from e

    return Token(token=token_issuer.issue(user_id))


@router.post(
    "/login",
    response_model=Token,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid credentials"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
def login(
    payload: UserCredentials,
    credentials: CredentialStore = Depends(get_credential_store),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
):
    try:
        user = credentials.check_credentials(payload.email, payload.password)
    except TaskboardError:
        raise
    except SQLAlchemyError as e:
        logger.exception("Login failed")
        raise InternalError("Error logging in") from e

    logger.info("Successful login: user_id=%s", user.id)
    return Token(token=token_issuer.issue(user.id))
