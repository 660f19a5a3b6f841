import logging
from functools import wraps

from django.contrib.auth.views import redirect_to_login
from django.core.exceptions import ImproperlyConfigured, PermissionDenied
from django.shortcuts import redirect

from library.models import User
from library.services import UserService

logger = logging.getLogger(__name__)
user_service = UserService()


def role_required(role):
    """
    Restrict a view to users holding ``role``.

    Anonymous users are redirected to the login page; authenticated users
    without the role get PermissionDenied, which Django answers with 403.
    """
    def decorator(view_function):
        @wraps(view_function)
        def modified_view_function(request, *args, **kwargs):
            if not request.user.is_authenticated:
                return redirect_to_login(request.get_full_path())
            if not user_service.has_role(request.user, role):
                logger.warning(
                    "User %s lacks %s for %s %s",
                    request.user.get_username(),
                    role,
                    request.method,
                    request.path,
                )
                raise PermissionDenied(f"{role} required.")
            return view_function(request, *args, **kwargs)
        return modified_view_function
    return decorator


admin_required = role_required(User.ROLE_ADMIN)


class LoginProhibitedMixin:
    """
    Mixin that prevents logged-in users from accessing certain class-based views.

    Attributes:
        redirect_when_logged_in_url (str): Optional. The URL to redirect to if
            the user is already logged in. Must be defined either as a class
            attribute or by overriding `get_redirect_when_logged_in_url()`.
    """

    redirect_when_logged_in_url = None

    def dispatch(self, *args, **kwargs):
        """Redirect authenticated users, otherwise dispatch normally."""
        if self.request.user.is_authenticated:
            return self.handle_already_logged_in(*args, **kwargs)
        return super().dispatch(*args, **kwargs)

    def handle_already_logged_in(self, *args, **kwargs):
        url = self.get_redirect_when_logged_in_url()
        return redirect(url)

    def get_redirect_when_logged_in_url(self):
        """
        Determine the redirect URL for authenticated users.

        Raises ImproperlyConfigured when neither the attribute nor an override
        supplies one.
        """
        if self.redirect_when_logged_in_url is None:
            raise ImproperlyConfigured(
                "LoginProhibitedMixin requires either a value for "
                "'redirect_when_logged_in_url', or an implementation for "
                "'get_redirect_when_logged_in_url()'."
            )
        return self.redirect_when_logged_in_url
