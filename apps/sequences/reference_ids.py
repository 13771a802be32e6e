"""Human readable reference IDs such as ``FB-007`` and ``FB-007-03``."""
import logging
from dataclasses import dataclass

from core.exceptions import ValidationError
from .allocator import allocate_next

logger = logging.getLogger(__name__)

CAMPAIGN = 'campaign'
ORDER = 'order'

PLATFORM_PREFIXES = {
    'facebook': 'FB',
    'instagram': 'IG',
}


@dataclass(frozen=True)
class ReferenceScheme:
    entity: str
    width: int
    key_template: str

    def counter_key(self, scope):
        return self.key_template.format(scope=scope)


REFERENCE_SCHEMES = {
    CAMPAIGN: ReferenceScheme(CAMPAIGN, width=3, key_template='campaign_{scope}'),
    ORDER: ReferenceScheme(ORDER, width=2, key_template='order_{scope}'),
}


def scheme_for(entity):
    try:
        return REFERENCE_SCHEMES[entity]
    except KeyError:
        raise ValidationError(f"Unknown reference ID entity '{entity}'")


def prefix_for_platform(platform):
    try:
        return PLATFORM_PREFIXES[platform]
    except (KeyError, TypeError):
        raise ValidationError(
            f"Platform must be one of: {', '.join(PLATFORM_PREFIXES)}",
            details={'platform': [f"'{platform}' is not a supported platform"]},
        )


def format_reference_id(prefix: str, number: int, width: int) -> str:
    """Format ``prefix`` and ``number`` as ``<prefix>-<zero padded number>``.

    A number with more digits than ``width`` is written out in full
    (``FB-1000``) rather than rejected.
    """
    if not prefix or not isinstance(prefix, str):
        raise ValidationError("Reference ID prefix is required")
    if isinstance(number, bool) or not isinstance(number, int) or number < 0:
        raise ValidationError(f"Reference ID number must be a non-negative integer, got {number!r}")
    if isinstance(width, bool) or not isinstance(width, int) or width < 1:
        raise ValidationError(f"Reference ID width must be a positive integer, got {width!r}")

    digits = str(number)
    if len(digits) > width:
        logger.warning(f"Reference ID for {prefix} overflows {width} digits: {number}")
    return f"{prefix}-{digits.zfill(width)}"


def next_reference_id(entity, scope, prefix):
    scheme = scheme_for(entity)
    number = allocate_next(scheme.counter_key(scope))
    return format_reference_id(prefix, number, scheme.width)


def next_campaign_reference_id(platform):
    prefix = prefix_for_platform(platform)
    return next_reference_id(CAMPAIGN, platform, prefix)


def next_order_reference_id(campaign_reference_id):
    return next_reference_id(ORDER, campaign_reference_id, campaign_reference_id)
