from rest_framework.permissions import BasePermission, SAFE_METHODS


class IsActiveUser(BasePermission):
    def has_permission(self, request, view):
        return (
            request.user.is_authenticated and
            getattr(request.user, 'status', None) == 'active'
        )


class IsAdmin(BasePermission):
    message = 'Admin access required'

    def has_permission(self, request, view):
        return (
            request.user.is_authenticated and
            getattr(request.user, 'role', None) == 'admin'
        )


class IsAdminOrReadOnly(BasePermission):
    """Sales users may read; only admins may write."""
    message = 'Admin access required'

    def has_permission(self, request, view):
        if not request.user.is_authenticated:
            return False
        if request.method in SAFE_METHODS:
            return True
        return getattr(request.user, 'role', None) == 'admin'
