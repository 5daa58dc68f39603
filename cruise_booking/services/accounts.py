# cruise_booking/services/accounts.py
import logging
from datetime import datetime, timezone
from typing import List, Optional

from cruise_booking import errors, security
from cruise_booking.schemas import User, UserCreate
from cruise_booking.store import EntityStore

logger = logging.getLogger(__name__)


class AccountService:
    def __init__(self, store: EntityStore):
        self.store = store

    def find_by_username(self, username: str) -> Optional[User]:
        wanted = username.lower()
        return next((user for user in self.store.users.list() if user.username.lower() == wanted), None)

    def find_by_email(self, email: str) -> Optional[User]:
        wanted = email.lower()
        return next((user for user in self.store.users.list() if user.email.lower() == wanted), None)

    def create_user(self, is_admin: bool = False, **fields) -> User:
        """Store a user whose password is already hashed."""
        return self.store.users.add({**fields, "is_admin": is_admin, "created_at": datetime.now(timezone.utc)})

    def register(self, data: UserCreate) -> User:
        if self.find_by_username(data.username):
            raise errors.ValidationError("Username already exists")
        if self.find_by_email(data.email):
            raise errors.ValidationError("Email already registered")

        fields = data.model_dump(exclude={"password", "confirm_password"})
        user = self.create_user(password=security.get_password_hash(data.password), **fields)
        logger.info("User %s registered", user.username)
        return user

    def authenticate(self, username: str, password: str) -> Optional[User]:
        user = self.find_by_username(username)
        if user is None or not security.verify_password(password, user.password):
            return None
        return user

    def get_user(self, user_id: int) -> Optional[User]:
        return self.store.users.get(user_id)

    def list_users(self) -> List[User]:
        return self.store.users.list()
