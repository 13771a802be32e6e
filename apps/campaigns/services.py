import logging
from decimal import Decimal

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError, transaction
from django.db.models import Count, Q, Sum
from django.utils import timezone

from apps.authentication import services as directory
from apps.authentication.models import User
from apps.sequences.reference_ids import next_campaign_reference_id, prefix_for_platform
from core.exceptions import (
    ForbiddenError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from .models import Campaign

logger = logging.getLogger(__name__)

CAMPAIGN_TYPES = {value for value, _ in Campaign.TYPE_CHOICES}
CAMPAIGN_STATUSES = {value for value, _ in Campaign.STATUS_CHOICES}


def ensure_can_access(campaign, user):
    """Admins see every campaign; sales users only the ones assigned to them."""
    if user is None or user.is_admin:
        return
    if campaign.sales_person_id != user.pk:
        raise ForbiddenError('Access denied to this campaign')


def _active_sales_person(sales_person_id):
    try:
        sales_person = directory.get_user(sales_person_id)
    except NotFoundError:
        raise ValidationError('Sales person not found')

    if sales_person.role != User.ROLE_SALES:
        raise ValidationError('Campaign must be assigned to a user with sales role')
    if sales_person.status != User.STATUS_ACTIVE:
        raise ValidationError('Campaign cannot be assigned to an inactive sales person')
    return sales_person


def create_campaign(title, platform, campaign_type, url, sales_person_id, start_date=None, end_date=None):
    """Create a campaign with the next reference ID for its platform.

    The reference ID is allocated in the same transaction that inserts the
    row, so no campaign is ever visible without one and a failed insert does
    not consume a number.
    """
    prefix_for_platform(platform)
    if campaign_type not in CAMPAIGN_TYPES:
        raise ValidationError(f"Type must be one of: {', '.join(sorted(CAMPAIGN_TYPES))}")
    if start_date and end_date and start_date > end_date:
        raise ValidationError('start_date must not be after end_date')

    sales_person = _active_sales_person(sales_person_id)

    try:
        with transaction.atomic():
            reference_id = next_campaign_reference_id(platform)
            campaign = Campaign.objects.create(
                reference_id=reference_id,
                title=title,
                platform=platform,
                campaign_type=campaign_type,
                url=url,
                sales_person=sales_person,
                status='active',
                start_date=start_date,
                end_date=end_date,
            )
    except DatabaseError as e:
        logger.error(f"Failed to persist {platform} campaign '{title}': {e}")
        raise PersistenceError('Could not save the campaign, please retry') from e

    logger.info(f"Campaign {campaign.reference_id} created for {sales_person.username}")
    return campaign


def list_campaigns(user):
    campaigns = Campaign.objects.select_related('sales_person').annotate(
        order_count=Count('orders', filter=Q(orders__status='active'))
    )
    if not user.is_admin:
        campaigns = campaigns.filter(sales_person=user)
    return campaigns


def get_campaign(campaign_id, user=None):
    try:
        campaign = Campaign.objects.select_related('sales_person').get(pk=campaign_id)
    except (Campaign.DoesNotExist, ValueError, TypeError):
        raise NotFoundError('Campaign not found')
    ensure_can_access(campaign, user)
    return campaign


def campaign_stats(campaign):
    """Totals over the campaign's active orders."""
    totals = campaign.orders.filter(status='active').aggregate(
        order_count=Count('id'),
        total_revenue=Sum('order_total'),
        total_commission=Sum('commission_amount'),
    )
    return {
        'order_count': totals['order_count'],
        'total_revenue': totals['total_revenue'] or Decimal('0.00'),
        'total_commission': totals['total_commission'] or Decimal('0.00'),
    }


def update_campaign(campaign, **changes):
    if 'sales_person_id' in changes or 'sales_person' in changes:
        raise ValidationError('Sales person cannot be changed after campaign creation')
    if 'reference_id' in changes:
        raise ValidationError('reference_id cannot be changed')

    if 'platform' in changes:
        # The reference ID keeps the prefix it was created with
        prefix_for_platform(changes['platform'])
    if 'campaign_type' in changes and changes['campaign_type'] not in CAMPAIGN_TYPES:
        raise ValidationError(f"Type must be one of: {', '.join(sorted(CAMPAIGN_TYPES))}")

    new_status = changes.get('status')
    if new_status is not None and new_status not in CAMPAIGN_STATUSES:
        raise ValidationError(f"Status must be one of: {', '.join(sorted(CAMPAIGN_STATUSES))}")

    if new_status == 'completed' and not campaign.end_date and 'end_date' not in changes:
        changes['end_date'] = timezone.localdate()
    if new_status == 'active' and campaign.status == 'completed':
        changes['end_date'] = None

    for field in ('title', 'platform', 'campaign_type', 'url', 'status', 'start_date', 'end_date'):
        if field in changes:
            setattr(campaign, field, changes[field])

    try:
        campaign.save()
    except DjangoValidationError as e:
        raise ValidationError('; '.join(e.messages))
    except DatabaseError as e:
        logger.error(f"Failed to update campaign {campaign.reference_id}: {e}")
        raise PersistenceError('Could not save the campaign, please retry') from e

    logger.info(f"Campaign {campaign.reference_id} updated: {', '.join(sorted(changes))}")
    return campaign


def delete_campaign(campaign):
    reference_id = campaign.reference_id
    order_count = campaign.orders.count()
    try:
        with transaction.atomic():
            campaign.delete()
    except DatabaseError as e:
        logger.error(f"Failed to delete campaign {reference_id}: {e}")
        raise PersistenceError('Could not delete the campaign, please retry') from e
    logger.info(f"Campaign {reference_id} deleted with {order_count} orders")
