"""
User registration use case.
"""

from __future__ import annotations

import logging
from typing import Optional

from edu.core.config import get_settings
from edu.core.ids import new_user_id
from edu.domain.emails import is_valid_email
from edu.domain.models import User
from edu.repositories.json_storage import RecordStore

logger = logging.getLogger(__name__)

MIN_NAME_LENGTH = 3

INVALID_EMAIL_MESSAGE = "Invalid email"
NAME_LENGTH_MESSAGE = f"Firstname and lastname must be at least {MIN_NAME_LENGTH} characters long"


class RegistrationError(Exception):
    """Base class for registration-related exceptions."""


class ValidationError(RegistrationError):
    def __init__(self, fields: list[str], message: str):
        super().__init__(message)
        self.fields = fields
        self.message = message


def name_length(value: str | None) -> int:
    """Length in UTF-16 code units, so astral characters count as two."""
    return len((value or "").encode("utf-16-le", "surrogatepass")) // 2


def validate_user(firstname: str, lastname: str, email: str) -> None:
    """Raise ValidationError listing every failing field.

    The message reports the email first, matching the order the checks are
    presented to the user.
    """
    failed = []
    if name_length(firstname) < MIN_NAME_LENGTH:
        failed.append("firstname")
    if name_length(lastname) < MIN_NAME_LENGTH:
        failed.append("lastname")
    email_ok = is_valid_email(email)
    if not email_ok:
        failed.append("email")
    if not failed:
        return
    message = INVALID_EMAIL_MESSAGE if not email_ok else NAME_LENGTH_MESSAGE
    raise ValidationError(failed, message)


class UserService:
    """Appends validated users to the user store."""

    def __init__(self, store: Optional[RecordStore] = None) -> None:
        if store is None:
            settings = get_settings()
            store = RecordStore(settings.users_file, indent=settings.json_indent)
        self.store = store

    def register(self, firstname: str, lastname: str, email: str) -> User:
        validate_user(firstname, lastname, email)
        users = self.store.load_models(User)
        user = User(
            id=new_user_id(u.id for u in users),
            firstname=firstname,
            lastname=lastname,
            email=email,
        )
        users.append(user)
        self.store.save_models(users)
        logger.info("registered user id=%d", user.id)
        return user

    def list(self) -> list[User]:
        return self.store.load_models(User)
