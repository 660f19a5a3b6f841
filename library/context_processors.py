from __future__ import annotations
from typing import Dict
from django.http import HttpRequest
from library.services import UserService

user_service = UserService()


def library_role(request: HttpRequest) -> Dict[str, object]:
  """Expose whether the current user may change library records."""
  user = getattr(request, "user", None)
  if not user or not user.is_authenticated:
    return {"is_library_admin": False}
  return {"is_library_admin": user_service.is_admin(user)}
