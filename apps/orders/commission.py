"""Line items, order totals and commission amounts.

The commission of an order is always computed from the rate captured when
the order was created (``Order.snapshot_rate``), never from the sales
person's current rate.
"""
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from core.exceptions import ValidationError

CENT = Decimal('0.01')
HUNDRED = Decimal('100')


def to_money(value):
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def _base_price(value, index):
    if value is None or isinstance(value, bool):
        raise ValidationError(f"Product at index {index}: base_price is required")
    try:
        price = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"Product at index {index}: base_price must be a number")
    if not price.is_finite() or price < 0:
        raise ValidationError(f"Product at index {index}: base_price must be a non-negative number")
    if price.as_tuple().exponent < -2:
        raise ValidationError(f"Product at index {index}: base_price can have at most 2 decimals")
    return price.quantize(CENT)


def clean_line_items(items):
    """Validate submitted line items and drop empty form rows.

    Rows without a name or with a quantity of zero or less are skipped. Raises
    ``ValidationError`` when nothing is left or a kept row is malformed.
    """
    if not isinstance(items, (list, tuple)):
        raise ValidationError('Products must be a list')

    cleaned = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise ValidationError(f"Product at index {index} is invalid")

        name = item.get('name') or ''
        if not isinstance(name, str):
            raise ValidationError(f"Product at index {index}: name must be text")
        name = name.strip()

        qty = item.get('qty')
        if not name or qty is None:
            continue
        if isinstance(qty, bool) or not isinstance(qty, int):
            raise ValidationError(f"Product at index {index}: qty must be an integer")
        if qty <= 0:
            continue

        cleaned.append({
            'name': name,
            'qty': qty,
            'base_price': _base_price(item.get('base_price'), index),
        })

    if not cleaned:
        raise ValidationError('At least one product with a name and a positive quantity is required')
    return cleaned


def calculate_order_total(items):
    """SUM(qty x base_price) over ``items``."""
    total = sum((Decimal(str(item['base_price'])) * item['qty'] for item in items), Decimal('0'))
    return to_money(total)


def calculate_commission(order_total, snapshot_rate):
    """order_total x snapshot_rate / 100, rounded to cents."""
    return to_money(Decimal(order_total) * Decimal(snapshot_rate) / HUNDRED)


def serialize_line_items(items):
    """JSON-ready copy of cleaned items, prices as fixed two-decimal strings."""
    return [dict(item, base_price=str(to_money(item['base_price']))) for item in items]
