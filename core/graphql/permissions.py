from core.exceptions import ForbiddenError


def current_user(info):
    """Authenticated, active user of a GraphQL request."""
    user = info.context.request.user
    if not user.is_authenticated or getattr(user, 'status', None) != 'active':
        raise ForbiddenError('Authentication required')
    return user


def require_admin(info):
    user = current_user(info)
    if not user.is_admin:
        raise ForbiddenError('Admin access required')
    return user
