"""
Business logic for users.

Users are stored in the ``users`` collection with their password
hashed.  Emails are unique; users are never updated or deleted.
"""

import logging

from ..core import store
from ..core.errors import DuplicateEmail, InvalidCredentials, UserNotFound
from ..core.security import hash_password, verify_password
from ..schemas.user import UserCreate, UserRead


logger = logging.getLogger(__name__)


class UserService:
    """Registration, authentication and lookup of users."""

    @classmethod
    async def create_user(cls, data: UserCreate) -> UserRead:
        """Register a new user.

        Raises ``DuplicateEmail`` if another user already has the same
        email.  The password is stored only as a salted hash.
        """
        with store.collection("users") as users:
            if any(u.get("email") == data.email for u in users):
                logger.info("Registration rejected, email %s already taken", data.email)
                raise DuplicateEmail()
            record = {
                "id": store.next_id(users),
                "name": data.name,
                "email": data.email,
                "password": hash_password(data.password),
            }
            users.append(record)
        logger.info("Registered user %s (id=%s)", data.email, record["id"])
        return UserRead.model_validate(record)

    @classmethod
    async def authenticate(cls, email: str, password: str) -> UserRead:
        """Return the user matching ``email`` and ``password``.

        Unknown emails and wrong passwords both raise
        ``InvalidCredentials`` so callers cannot tell them apart.
        """
        users = store.read("users")
        user = next((u for u in users if u.get("email") == email), None)
        if user is None or not verify_password(password, user.get("password", "")):
            logger.warning("Failed login for %s", email)
            raise InvalidCredentials()
        return UserRead.model_validate(user)

    @classmethod
    async def get_user_by_id(cls, user_id: int) -> UserRead:
        """Retrieve a user by ID or raise ``UserNotFound``."""
        users = store.read("users")
        for user in users:
            if user.get("id") == user_id:
                return UserRead.model_validate(user)
        raise UserNotFound()
