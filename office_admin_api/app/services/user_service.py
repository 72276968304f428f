"""
Business logic for user accounts.

``UserService`` keeps login credentials in the store.  Usernames are
unique; passwords are stored as PBKDF2 hashes.  ``seed_defaults`` gives
a fresh process a manager employee and an ``admin`` login so that the
dashboard can be used right away.
"""

import logging
from typing import Any, Dict, Optional

from office_admin_api.app.core.security import hash_password, verify_password
from office_admin_api.app.core.store import Store
from office_admin_api.app.schemas.user import UserCreate, UserRead


DEFAULT_EMPLOYEE = {
    "name": "John Doe",
    "email": "john@example.com",
    "role": "Manager",
    "active_status": True,
}
DEFAULT_USERNAME = "admin"
DEFAULT_PASSWORD = "password"


class UserService:
    """Service for user accounts and credential checks."""

    @classmethod
    async def create_user(cls, store: Store, data: UserCreate) -> UserRead:
        """Register a new user.

        Raises
        ------
        ValueError
            If the username is already taken.
        """
        logger = logging.getLogger(__name__)
        if store.users.find_one(username=data.username) is not None:
            raise ValueError("Username already exists")
        record = store.users.insert(
            {
                "username": data.username,
                "password": hash_password(data.password),
                "employee_id": data.employee_id,
            }
        )
        logger.info("Registered user %s", data.username)
        return UserRead.model_validate(record)

    @classmethod
    async def get_user(cls, store: Store, user_id: int) -> Optional[UserRead]:
        record = store.users.get(user_id)
        return UserRead.model_validate(record) if record else None

    @classmethod
    async def get_user_by_username(cls, store: Store, username: str) -> Optional[UserRead]:
        record = store.users.find_one(username=username)
        return UserRead.model_validate(record) if record else None

    @classmethod
    async def authenticate(cls, store: Store, username: str, password: str) -> Optional[Dict[str, Any]]:
        """Return the stored user record if the credentials match."""
        record = store.users.find_one(username=username)
        if record is None or not verify_password(password, record["password"]):
            logging.getLogger(__name__).info("Failed login for %s", username)
            return None
        return record

    @classmethod
    def seed_defaults(cls, store: Store) -> None:
        """Create the default manager and ``admin`` user in an empty store."""
        if len(store.users) or len(store.employees):
            return
        employee = store.employees.insert(dict(DEFAULT_EMPLOYEE))
        store.users.insert(
            {
                "username": DEFAULT_USERNAME,
                "password": hash_password(DEFAULT_PASSWORD),
                "employee_id": employee["id"],
            }
        )
        logging.getLogger(__name__).info("Seeded default employee and %s user", DEFAULT_USERNAME)
