"""Custom user model carrying the library role."""

from django.core.validators import RegexValidator
from django.contrib.auth.models import AbstractUser
from django.db import models
from libgravatar import Gravatar


class User(AbstractUser):
    """Library account; the role decides whether the user may change records."""

    ROLE_USER = "ROLE_USER"
    ROLE_ADMIN = "ROLE_ADMIN"
    ROLE_CHOICES = [
        (ROLE_USER, "User"),
        (ROLE_ADMIN, "Administrator"),
    ]

    username = models.CharField(
        max_length=30,
        unique=True,
        validators=[RegexValidator(
            regex=r'^\w{3,}$',
            message='Username must consist of at least three alphanumericals'
        )]
    )
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=ROLE_USER)

    class Meta:
        """Default ordering for users."""
        ordering = ['username']

    @property
    def is_library_admin(self):
        """True for ROLE_ADMIN accounts and superusers."""
        return self.is_superuser or self.role == self.ROLE_ADMIN

    def gravatar(self, size=120):
        """Return gravatar URL for the user's email."""
        gravatar_object = Gravatar(self.email or self.username)
        return gravatar_object.get_image(size=size, default='mm')

    def mini_gravatar(self):
        """Return smaller gravatar URL."""
        return self.gravatar(size=40)
