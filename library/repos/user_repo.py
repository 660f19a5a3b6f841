"""Repository helpers for user lookups."""

from typing import Optional

from library.models.user import User
from library.repos.base import ModelRepository


class UserRepo(ModelRepository):
    """Repository for basic user queries."""
    def __init__(self) -> None:
        """Initialise with the User model."""
        super().__init__(User)

    def get_by_username(self, username: str) -> Optional[User]:
        """Return a user by username, or None."""
        return self.first(username=username)
