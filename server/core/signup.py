# server/core/signup.py

import logging
from enum import Enum
from typing import Optional

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.exc import (
    DBAPIError,
    IntegrityError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
)
from sqlalchemy.orm import Session

from models.user import User, USERNAME_MAX_LENGTH


logger = logging.getLogger(__name__)


# -------------------------------
# Result Types
# -------------------------------

class SignupErrorKind(str, Enum):
    VALIDATION = "validation"
    CONFLICT = "conflict"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"


class SignupResult(BaseModel):
    """
    Outcome of a signup attempt, shared by the in-process call and the HTTP handler.
    """
    ok: bool
    user_id: Optional[int] = None
    error: Optional[SignupErrorKind] = None
    message: Optional[str] = None

    @classmethod
    def success(cls, user_id: int) -> "SignupResult":
        return cls(ok=True, user_id=user_id)

    @classmethod
    def failure(cls, error: SignupErrorKind, message: str) -> "SignupResult":
        return cls(ok=False, error=error, message=message)


# -------------------------------
# Signup Operation
# -------------------------------

def validate_credentials(username, password) -> Optional[str]:
    if not isinstance(username, str) or not isinstance(password, str):
        return "Username and password must be strings"
    if not username.strip():
        return "Username is required"
    if len(username) > USERNAME_MAX_LENGTH:
        return f"Username must be at most {USERNAME_MAX_LENGTH} characters"
    if not password:
        return "Password is required"
    return None


def classify_error(exc: SQLAlchemyError) -> SignupErrorKind:
    if isinstance(exc, IntegrityError):
        return SignupErrorKind.CONFLICT
    if isinstance(exc, (OperationalError, InterfaceError)):
        return SignupErrorKind.UNAVAILABLE
    if isinstance(exc, DBAPIError) and exc.connection_invalidated:
        return SignupErrorKind.UNAVAILABLE
    return SignupErrorKind.UNKNOWN


_FAILURE_MESSAGES = {
    SignupErrorKind.CONFLICT: "Username already exists",
    SignupErrorKind.UNAVAILABLE: "Database is unavailable",
    SignupErrorKind.UNKNOWN: "Failed to create user",
}


def signup(db: Session, username: str, password: str) -> SignupResult:
    """
    Inserts a new user row. The password is stored as given.
    Database failures are reported through the result, never raised.
    """
    problem = validate_credentials(username, password)
    if problem:
        logger.warning("Signup rejected: %s", problem)
        return SignupResult.failure(SignupErrorKind.VALIDATION, problem)

    user = User(username=username, password=password)
    try:
        db.add(user)
        db.commit()
        db.refresh(user)
    except SQLAlchemyError as exc:
        db.rollback()
        kind = classify_error(exc)
        if kind == SignupErrorKind.CONFLICT:
            logger.warning("Signup conflict for username %r", username)
        else:
            logger.exception("Signup failed for username %r", username)
        return SignupResult.failure(kind, _FAILURE_MESSAGES[kind])

    logger.info("Created user %s", user.id)
    return SignupResult.success(user.id)


# -------------------------------
# Lookups
# -------------------------------

def get_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.execute(select(User).where(User.username == username)).scalar_one_or_none()


def get_first_user(db: Session) -> Optional[User]:
    return db.execute(select(User).order_by(User.id).limit(1)).scalar_one_or_none()
