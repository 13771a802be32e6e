import logging
from datetime import datetime

from django.db import DatabaseError, transaction
from django.utils import timezone

from apps.authentication import services as directory
from apps.campaigns.models import Campaign
from apps.campaigns.services import ensure_can_access
from apps.sequences.reference_ids import next_order_reference_id
from core.exceptions import ForbiddenError, NotFoundError, PersistenceError, ValidationError
from .commission import (
    calculate_commission,
    calculate_order_total,
    clean_line_items,
    serialize_line_items,
)
from .models import Order

logger = logging.getLogger(__name__)

ORDER_STATUSES = {value for value, _ in Order.STATUS_CHOICES}


def _check_order_date(order_date):
    if order_date is None:
        return timezone.localdate()
    if isinstance(order_date, datetime):
        order_date = order_date.date()
    if order_date > timezone.localdate():
        raise ValidationError('Order date cannot be in the future')
    return order_date


def create_order(campaign_id, products, order_date=None, user=None):
    """Record an order and snapshot the sales person's commission rate.

    Line items are validated before anything touches the campaign's order
    counter, so rejected submissions never consume a reference number.
    """
    items = clean_line_items(products)
    order_date = _check_order_date(order_date)

    try:
        campaign = Campaign.objects.get(pk=campaign_id)
    except (Campaign.DoesNotExist, ValueError, TypeError):
        raise NotFoundError('Campaign not found')

    if user is not None and not user.is_admin and campaign.sales_person_id != user.pk:
        raise ForbiddenError('Cannot create orders for campaigns assigned to other sales persons')

    sales_person = directory.get_user(campaign.sales_person_id)
    snapshot_rate = sales_person.commission_rate
    order_total = calculate_order_total(items)
    commission_amount = calculate_commission(order_total, snapshot_rate)

    try:
        with transaction.atomic():
            reference_id = next_order_reference_id(campaign.reference_id)
            order = Order.objects.create(
                reference_id=reference_id,
                campaign=campaign,
                products=serialize_line_items(items),
                order_total=order_total,
                snapshot_rate=snapshot_rate,
                commission_amount=commission_amount,
                status='active',
                order_date=order_date,
            )
    except DatabaseError as e:
        logger.error(f"Failed to persist order for campaign {campaign.reference_id}: {e}")
        raise PersistenceError('Could not save the order, please retry') from e

    logger.info(
        f"Order {order.reference_id} created: total {order_total}, "
        f"commission {commission_amount} at {snapshot_rate}%"
    )
    return order


def list_orders(user, campaign_id=None, start_date=None, end_date=None):
    orders = Order.objects.select_related('campaign', 'campaign__sales_person')
    if not user.is_admin:
        orders = orders.filter(campaign__sales_person=user)
    if campaign_id:
        orders = orders.filter(campaign_id=campaign_id)
    if start_date:
        orders = orders.filter(order_date__gte=start_date)
    if end_date:
        orders = orders.filter(order_date__lte=end_date)
    return orders


def get_order(order_id, user=None):
    try:
        order = Order.objects.select_related('campaign', 'campaign__sales_person').get(pk=order_id)
    except (Order.DoesNotExist, ValueError, TypeError):
        raise NotFoundError('Order not found')
    try:
        ensure_can_access(order.campaign, user)
    except ForbiddenError:
        raise ForbiddenError('Access denied to this order')
    return order


def update_order(order, products=None, status=None, order_date=None):
    """Edit an order.

    New line items recompute ``order_total`` and ``commission_amount`` from the
    stored ``snapshot_rate``; the sales person's current rate is not consulted.
    """
    if status is not None and status not in ORDER_STATUSES:
        raise ValidationError('Status must be active or cancelled')

    update_fields = ['updated_at']
    if products is not None:
        items = clean_line_items(products)
        order.products = serialize_line_items(items)
        order.order_total = calculate_order_total(items)
        order.commission_amount = calculate_commission(order.order_total, order.snapshot_rate)
        update_fields += ['products', 'order_total', 'commission_amount']

    if status is not None:
        order.status = status
        update_fields.append('status')

    if order_date is not None:
        order.order_date = _check_order_date(order_date)
        update_fields.append('order_date')

    try:
        order.save(update_fields=update_fields)
    except DatabaseError as e:
        logger.error(f"Failed to update order {order.reference_id}: {e}")
        raise PersistenceError('Could not save the order, please retry') from e

    logger.info(f"Order {order.reference_id} updated: {', '.join(update_fields[1:]) or 'no changes'}")
    return order


def delete_order(order):
    reference_id = order.reference_id
    try:
        order.delete()
    except DatabaseError as e:
        logger.error(f"Failed to delete order {reference_id}: {e}")
        raise PersistenceError('Could not delete the order, please retry') from e
    logger.info(f"Order {reference_id} deleted")

