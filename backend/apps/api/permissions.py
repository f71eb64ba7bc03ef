from rest_framework.permissions import BasePermission

ADMIN_ROLE = "ADMIN"


def is_admin(user) -> bool:
    return bool(
        user
        and getattr(user, "is_authenticated", False)
        and (getattr(user, "role", None) == ADMIN_ROLE or getattr(user, "is_superuser", False))
    )


class IsAdminRole(BasePermission):
    """Admin dashboards and reports are restricted to ADMIN accounts."""

    message = "Admin privileges required"

    def has_permission(self, request, view):
        return is_admin(request.user)


class IsCartOwnerOrAdmin(BasePermission):
    """Cart routes carry the owner id in the path; only that user or an admin may use them."""

    message = "You do not have permission to access this cart"

    def has_permission(self, request, view):
        user = request.user
        if not user or not getattr(user, "is_authenticated", False):
            return False
        if is_admin(user):
            return True
        target = view.kwargs.get("user_id") if hasattr(view, "kwargs") else None
        return target is not None and int(target) == getattr(user, "id", None)
