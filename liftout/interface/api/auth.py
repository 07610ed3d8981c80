"""Caller authentication for API routes.

The session token arrives in the ``auth_token`` cookie set by the sign-in
service, or as an ``Authorization: Bearer`` header.
"""

from uuid import UUID

import logfire
from pydantic import ValidationError as PydanticValidationError

from liftout.application.usecase.base import Principal
from liftout.domain.error import NotAuthenticatedError
from liftout.domain.service import JWTService
from liftout.domain.value import EmailAddress, UserId, UserType
from liftout.util.jwt import JWTError


def _read_token(auth_token: str | None, authorization: str | None) -> str | None:
    if auth_token:
        return auth_token
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()
    return None


def _to_principal(jwt_service: JWTService, token: str) -> Principal:
    payload = jwt_service.verify_token(token)
    try:
        user_id = UserId(UUID(payload.user_id))
    except ValueError:
        raise JWTError("Invalid token payload")

    email = None
    if payload.email:
        try:
            email = EmailAddress(root=payload.email)
        except PydanticValidationError:
            logfire.warn("Token carries an invalid email", user_id=payload.user_id)

    try:
        user_type = UserType(payload.user_type)
    except ValueError:
        user_type = UserType.INDIVIDUAL

    return Principal(user_id=user_id, email=email, user_type=user_type)


def optional_principal(
    jwt_service: JWTService, auth_token: str | None, authorization: str | None
) -> Principal | None:
    """Decode the caller if a valid token was sent.

    Missing, expired and malformed tokens all yield None.
    """
    token = _read_token(auth_token, authorization)
    if token is None:
        return None
    try:
        return _to_principal(jwt_service, token)
    except JWTError:
        return None


def require_principal(
    jwt_service: JWTService, auth_token: str | None, authorization: str | None
) -> Principal:
    """Decode the caller, failing when there is no valid token.

    Raises:
        NotAuthenticatedError: If the token is missing or invalid
    """
    token = _read_token(auth_token, authorization)
    if token is None:
        raise NotAuthenticatedError()
    try:
        return _to_principal(jwt_service, token)
    except JWTError as e:
        raise NotAuthenticatedError(str(e))
