"""User accounts: password hashing, creation and credential checks.

Users live in the store's "users" collection as documents of the form
{"id", "username", "password_hash", "created_at"}. Everything leaving this
module is a UserResponse, so the hash never escapes.
"""

import logging

import bcrypt

from ..config import settings
from ..db import DocumentStore
from ..exceptions import ConflictError
from ..utils import isodatetime
from .schemas import UserCreate, UserResponse

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Hash a password with bcrypt using the configured work factor."""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_work_factor)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Check a password against a bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Malformed hash
        return False


def create_user(store: DocumentStore, data: UserCreate) -> UserResponse:
    """Create a user account.

    Raises:
        ConflictError: If the username is already taken
    """
    if store.users.find_one(username=data.username) is not None:
        raise ConflictError(
            "Username already exists",
            {"username": data.username}
        )

    # The unique index still guards the race between the check and the insert
    document = store.users.create({
        "username": data.username,
        "password_hash": hash_password(data.password),
        "created_at": isodatetime.now(),
    })
    logger.info(f"User created: {data.username}")
    return UserResponse.model_validate(document)


def get_user_by_id(store: DocumentStore, user_id: str) -> UserResponse | None:
    document = store.users.find_by_id(user_id)
    return UserResponse.model_validate(document) if document else None


def get_user_by_username(store: DocumentStore, username: str) -> UserResponse | None:
    document = store.users.find_one(username=username)
    return UserResponse.model_validate(document) if document else None


def verify_credentials(
    store: DocumentStore,
    username: str,
    password: str
) -> UserResponse | None:
    """Return the user if username and password match, else None."""
    document = store.users.find_one(username=username)
    if document is None:
        return None
    if not verify_password(password, document["password_hash"]):
        return None
    return UserResponse.model_validate(document)
