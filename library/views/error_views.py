import logging

from django.shortcuts import render

logger = logging.getLogger(__name__)


def permission_denied(request, exception=None):
    """Log the refused request and render the 403 page."""
    logger.warning(
        "Permission denied: user=%s method=%s path=%s reason=%s",
        getattr(request, "user", None),
        request.method,
        request.path,
        exception,
    )
    return render(request, "403.html", {"reason": str(exception or "")}, status=403)
