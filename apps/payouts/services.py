"""Monthly commission payouts, summed from the commission stored on each order."""
import calendar
from datetime import date
from decimal import Decimal

from django.db.models import Count, Sum

from apps.authentication.models import User
from apps.orders.models import Order
from core.exceptions import ValidationError

ZERO = Decimal('0.00')


def month_bounds(year, month):
    """First and last day of ``year``/``month``."""
    try:
        year, month = int(year), int(month)
    except (TypeError, ValueError):
        raise ValidationError('Year and month must be integers')
    if not 1 <= month <= 12:
        raise ValidationError('Month must be between 1 and 12')
    if not 2000 <= year <= 9999:
        raise ValidationError('Year must be between 2000 and 9999')
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def _campaign_breakdown(orders):
    rows = (
        orders.values('campaign_id', 'campaign__reference_id', 'campaign__title', 'campaign__sales_person_id')
        .annotate(
            order_count=Count('id'),
            total_sales=Sum('order_total'),
            total_commission=Sum('commission_amount'),
        )
        .order_by('campaign__reference_id')
    )
    return [{
        'campaign_id': row['campaign_id'],
        'reference_id': row['campaign__reference_id'],
        'title': row['campaign__title'],
        'sales_person_id': row['campaign__sales_person_id'],
        'order_count': row['order_count'],
        'total_sales': row['total_sales'] or ZERO,
        'total_commission': row['total_commission'] or ZERO,
    } for row in rows]


def _month_orders(year, month):
    start, end = month_bounds(year, month)
    return Order.objects.filter(status='active', order_date__gte=start, order_date__lte=end)


def get_my_payout(user, year, month):
    campaigns = _campaign_breakdown(_month_orders(year, month).filter(campaign__sales_person=user))
    for row in campaigns:
        row.pop('sales_person_id')
    return {
        'year': int(year),
        'month': int(month),
        'total_commission': sum((c['total_commission'] for c in campaigns), ZERO),
        'campaigns': campaigns,
    }


def get_team_payout(year, month):
    """Every sales person's payout for the month, including those with no orders."""
    by_person = {}
    for row in _campaign_breakdown(_month_orders(year, month)):
        by_person.setdefault(row.pop('sales_person_id'), []).append(row)

    sales_persons = []
    for person in User.objects.filter(role=User.ROLE_SALES).order_by('name', 'username'):
        campaigns = by_person.get(person.pk, [])
        sales_persons.append({
            'user_id': person.pk,
            'name': person.name or person.username,
            'current_rate': person.commission_rate,
            'total_commission': sum((c['total_commission'] for c in campaigns), ZERO),
            'campaigns': campaigns,
        })

    return {
        'year': int(year),
        'month': int(month),
        'grand_total_commission': sum((sp['total_commission'] for sp in sales_persons), ZERO),
        'sales_persons': sales_persons,
    }
