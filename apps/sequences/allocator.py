"""Atomic allocation of sequence numbers backed by the ``Counter`` table.

Every increment is a single ``UPDATE ... SET seq = seq + 1`` on one row, so
the database row lock serializes callers sharing a key across threads and
processes, while different keys never contend. The new value is read back
inside the same transaction, before the lock is released.

When ``allocate_next`` runs inside a caller's ``transaction.atomic()`` block
the increment commits or rolls back together with whatever uses the number.
"""
import logging

from django.conf import settings
from django.db import DatabaseError, transaction
from django.db.models import F
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from core.exceptions import PersistenceError
from .models import Counter

logger = logging.getLogger(__name__)


def _read_seq(key):
    return Counter.objects.filter(key=key).values_list('seq', flat=True).get()


def _increment(key):
    updated = Counter.objects.filter(key=key).update(seq=F('seq') + 1)
    if not updated:
        # First allocation for this key. A concurrent first allocation makes
        # this raise IntegrityError, and the retry takes the UPDATE path.
        Counter.objects.create(key=key, seq=1)
    return _read_seq(key)


def allocate_next(key):
    """Return the next value of sequence ``key`` (1 for a new key).

    Raises ``PersistenceError`` once ``REFERENCE_ID_MAX_ATTEMPTS`` attempts have
    failed; the counter is left at its pre-call value.
    """
    retrying = Retrying(
        stop=stop_after_attempt(settings.REFERENCE_ID_MAX_ATTEMPTS),
        wait=wait_exponential(multiplier=settings.REFERENCE_ID_RETRY_WAIT, max=1),
        retry=retry_if_exception_type(DatabaseError),
        reraise=True,
    )
    try:
        for attempt in retrying:
            with attempt:
                with transaction.atomic():
                    value = _increment(key)
    except DatabaseError as e:
        logger.error(f"Sequence allocation failed for {key}: {e}")
        raise PersistenceError(f"Could not allocate the next number for '{key}'") from e

    logger.debug(f"Allocated {value} for {key}")
    return value


def current_value(key):
    """Last allocated value for ``key``, 0 if nothing was allocated yet."""
    return Counter.objects.filter(key=key).values_list('seq', flat=True).first() or 0
