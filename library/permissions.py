from rest_framework.permissions import SAFE_METHODS, BasePermission

from library.services import UserService

user_service = UserService()


class IsLibraryAdminOrReadOnly(BasePermission):
    """
    Reads are open to any authenticated user; writes need ROLE_ADMIN.
    """

    message = "ROLE_ADMIN is required to change library records."

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False
        if request.method in SAFE_METHODS:
            return True
        return user_service.is_admin(user)
