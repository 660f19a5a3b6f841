from types import SimpleNamespace

from django.contrib.auth.models import AnonymousUser
from django.test import SimpleTestCase

from library.permissions import IsLibraryAdminOrReadOnly


class IsLibraryAdminOrReadOnlyTests(SimpleTestCase):
    def setUp(self):
        self.permission = IsLibraryAdminOrReadOnly()
        self.reader = SimpleNamespace(is_authenticated=True, is_library_admin=False)
        self.admin = SimpleNamespace(is_authenticated=True, is_library_admin=True)
        self.view = object()

    def _make_request(self, method: str, user) -> SimpleNamespace:
        return SimpleNamespace(method=method, user=user)

    def test_safe_methods_are_allowed_for_any_authenticated_user(self):
        for method in ("GET", "HEAD", "OPTIONS"):
            with self.subTest(method=method):
                request = self._make_request(method, self.reader)
                self.assertTrue(self.permission.has_permission(request, self.view))

    def test_unsafe_methods_need_admin(self):
        for method in ("POST", "PUT", "PATCH", "DELETE"):
            with self.subTest(method=method):
                self.assertFalse(
                    self.permission.has_permission(self._make_request(method, self.reader), self.view)
                )
                self.assertTrue(
                    self.permission.has_permission(self._make_request(method, self.admin), self.view)
                )

    def test_anonymous_is_denied(self):
        request = self._make_request("GET", AnonymousUser())
        self.assertFalse(self.permission.has_permission(request, self.view))
