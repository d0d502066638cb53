"""Role-based access for async class-based views.

Roles are Django auth groups.  The required role defaults to the
``ADMIN_ROLE`` setting.
"""

from __future__ import annotations

import structlog
from django.conf import settings
from django.contrib.auth.views import redirect_to_login
from django.core.exceptions import PermissionDenied
from django.http import HttpRequest

logger = structlog.get_logger(__name__)


async def user_has_role(user, role: str) -> bool:
    """Return ``True`` when ``user`` is authenticated and belongs to ``role``."""
    if not user.is_authenticated:
        return False
    if user.is_superuser:
        return True
    return await user.groups.filter(name=role).aexists()


class RoleRequiredMixin:
    """Gate every handler of an async view behind a role.

    * Anonymous users are redirected to the login page.
    * Authenticated users lacking the role get 403.
    """

    required_role: str | None = None

    def get_required_role(self) -> str:
        return self.required_role or settings.ADMIN_ROLE

    async def dispatch(self, request: HttpRequest, *args, **kwargs):
        user = await request.auser()
        role = self.get_required_role()
        if not user.is_authenticated:
            return redirect_to_login(request.get_full_path())
        if not await user_has_role(user, role):
            logger.warning("access.role_denied", user_id=user.pk, role=role)
            raise PermissionDenied(f"Role '{role}' required.")
        return await super().dispatch(request, *args, **kwargs)
