"""User directory: sales people, their commission rates and account status."""
import logging
from decimal import Decimal, InvalidOperation

from django.db import transaction

from core.exceptions import ConflictError, NotFoundError, ValidationError
from .models import User

logger = logging.getLogger(__name__)

MIN_RATE = Decimal('0')
MAX_RATE = Decimal('100')


def get_user(user_id):
    """Fresh read of a user; commission snapshots must come from here."""
    try:
        return User.objects.get(pk=user_id)
    except (User.DoesNotExist, ValueError, TypeError):
        raise NotFoundError('User not found')


def list_users():
    return User.objects.order_by('-date_joined')


def _clean_rate(rate):
    try:
        rate = Decimal(str(rate))
    except (InvalidOperation, ValueError):
        raise ValidationError('Commission rate must be a number')
    if not rate.is_finite():
        raise ValidationError('Commission rate must be a finite number')
    if rate < MIN_RATE or rate > MAX_RATE:
        raise ValidationError('Commission rate must be between 0 and 100')
    return rate


def create_user(name, username, password, role, commission_rate=None, email=''):
    if role == User.ROLE_SALES:
        if commission_rate is None:
            raise ValidationError('Commission rate is required for sales role')
        commission_rate = _clean_rate(commission_rate)
    else:
        commission_rate = Decimal('0')

    if User.objects.filter(username=username).exists():
        raise ConflictError('Username already exists')

    with transaction.atomic():
        user = User.objects.create_user(
            username=username,
            email=email or '',
            password=password,
            name=name,
            role=role,
            commission_rate=commission_rate,
            status=User.STATUS_ACTIVE,
        )

    logger.info(f"Created {role} user {username}")
    return user


def update_user(user, **changes):
    """Apply ``changes`` to ``user``.

    A new ``commission_rate`` only affects orders created from now on;
    existing orders keep their snapshot.
    """
    if changes.get('commission_rate') is not None:
        old_rate = user.commission_rate
        user.commission_rate = _clean_rate(changes['commission_rate'])
        if user.commission_rate != old_rate:
            logger.info(f"Commission rate of {user.username} changed {old_rate} -> {user.commission_rate}")

    for field in ('name', 'role', 'status', 'email'):
        if field in changes:
            setattr(user, field, changes[field])

    if changes.get('password'):
        user.set_password(changes['password'])

    user.save()
    return user


def delete_user(user):
    if user.campaigns.exists():
        raise ConflictError('User still has assigned campaigns; deactivate the account instead')
    username = user.username
    user.delete()
    logger.info(f"Deleted user {username}")
