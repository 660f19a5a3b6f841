"""Service helpers for library accounts and their roles."""

import logging

from library.models import User
from library.repos.user_repo import UserRepo

logger = logging.getLogger(__name__)


class UserService:
    """Encapsulate account lookups and role checks."""

    def __init__(self, repo=None):
        self.repo = repo or UserRepo()

    def load_user_by_username(self, username):
        """Return the user with this username, or None."""
        return self.repo.get_by_username(username)

    def create_user(self, username, password, role=User.ROLE_USER, **extra):
        """Create an account with the given role."""
        if role not in dict(User.ROLE_CHOICES):
            raise ValueError(f"Unknown role: {role}")
        user = User.objects.create_user(username=username, password=password, role=role, **extra)
        logger.info("Created user %s with %s", username, role)
        return user

    def has_role(self, user, role):
        """Return True when an authenticated user holds the role."""
        if not user or not getattr(user, "is_authenticated", False):
            return False
        if role == User.ROLE_ADMIN:
            return self.is_admin(user)
        return getattr(user, "role", None) in (role, User.ROLE_ADMIN) or getattr(user, "is_superuser", False)

    def is_admin(self, user):
        if not user or not getattr(user, "is_authenticated", False):
            return False
        return bool(getattr(user, "is_library_admin", False))
