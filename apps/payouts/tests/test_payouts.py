from datetime import date
from decimal import Decimal

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.authentication.models import User
from apps.authentication.services import update_user
from apps.campaigns.services import create_campaign
from apps.orders.services import create_order, update_order
from apps.payouts import services
from core.exceptions import ValidationError


def make_campaign(sales_person, platform='facebook'):
    return create_campaign(
        title=f'{sales_person.username} {platform}', platform=platform, campaign_type='live',
        url=f'https://{platform}.com/live/1', sales_person_id=sales_person.pk,
    )


def items(total):
    return [{'name': 'Bundle', 'qty': 1, 'base_price': total}]


class PayoutServiceTest(TestCase):
    def setUp(self):
        self.sarah = User.objects.create_user(
            username='sarah.j', password='salespass', name='Sarah Johnson',
            role=User.ROLE_SALES, commission_rate=Decimal('10'),
        )
        self.mike = User.objects.create_user(
            username='mike.c', password='salespass', name='Mike Chen',
            role=User.ROLE_SALES, commission_rate=Decimal('5'),
        )
        self.campaign = make_campaign(self.sarah)

    def test_my_payout_sums_month_orders(self):
        create_order(self.campaign.pk, items('100.00'), order_date=date(2024, 5, 3))
        create_order(self.campaign.pk, items('250.00'), order_date=date(2024, 5, 31))
        create_order(self.campaign.pk, items('999.00'), order_date=date(2024, 6, 1))

        payout = services.get_my_payout(self.sarah, 2024, 5)

        self.assertEqual(payout['total_commission'], Decimal('35.00'))
        self.assertEqual(len(payout['campaigns']), 1)
        self.assertEqual(payout['campaigns'][0]['order_count'], 2)
        self.assertEqual(payout['campaigns'][0]['total_sales'], Decimal('350.00'))

    def test_cancelled_orders_are_excluded(self):
        order = create_order(self.campaign.pk, items('100.00'), order_date=date(2024, 5, 3))
        update_order(order, status='cancelled')

        payout = services.get_my_payout(self.sarah, 2024, 5)
        self.assertEqual(payout['total_commission'], Decimal('0.00'))
        self.assertEqual(payout['campaigns'], [])

    def test_payout_uses_snapshot_not_current_rate(self):
        create_order(self.campaign.pk, items('100.00'), order_date=date(2024, 5, 3))
        update_user(self.sarah, commission_rate=Decimal('30'))
        create_order(self.campaign.pk, items('100.00'), order_date=date(2024, 5, 4))

        payout = services.get_my_payout(self.sarah, 2024, 5)
        self.assertEqual(payout['total_commission'], Decimal('40.00'))

    def test_team_payout_lists_every_sales_person(self):
        create_order(self.campaign.pk, items('100.00'), order_date=date(2024, 5, 3))
        mike_campaign = make_campaign(self.mike, 'instagram')
        create_order(mike_campaign.pk, items('200.00'), order_date=date(2024, 5, 9))
        User.objects.create_user(
            username='emily.w', password='salespass', name='Emily Wong',
            role=User.ROLE_SALES, commission_rate=Decimal('15'),
        )

        payout = services.get_team_payout(2024, 5)

        by_name = {sp['name']: sp for sp in payout['sales_persons']}
        self.assertEqual(set(by_name), {'Sarah Johnson', 'Mike Chen', 'Emily Wong'})
        self.assertEqual(by_name['Sarah Johnson']['total_commission'], Decimal('10.00'))
        self.assertEqual(by_name['Mike Chen']['total_commission'], Decimal('10.00'))
        self.assertEqual(by_name['Emily Wong']['total_commission'], Decimal('0.00'))
        self.assertEqual(payout['grand_total_commission'], Decimal('20.00'))

    def test_invalid_month(self):
        with self.assertRaises(ValidationError):
            services.get_my_payout(self.sarah, 2024, 13)

    def test_month_bounds(self):
        self.assertEqual(services.month_bounds(2024, 2), (date(2024, 2, 1), date(2024, 2, 29)))


class PayoutAPITest(APITestCase):
    def setUp(self):
        self.admin = User.objects.create_user(
            username='admin', password='adminpass', name='Admin', role=User.ROLE_ADMIN
        )
        self.sarah = User.objects.create_user(
            username='sarah.j', password='salespass', name='Sarah Johnson',
            role=User.ROLE_SALES, commission_rate=Decimal('10'),
        )
        campaign = make_campaign(self.sarah)
        create_order(campaign.pk, items('120.00'), order_date=date(2024, 5, 3))

    def test_my_payout(self):
        self.client.force_authenticate(self.sarah)
        response = self.client.get(reverse('my_payout'), {'year': 2024, 'month': 5})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['total_commission'], '12.00')
        self.assertEqual(response.data['campaigns'][0]['reference_id'], 'FB-001')

    def test_invalid_month_is_rejected(self):
        self.client.force_authenticate(self.sarah)
        response = self.client.get(reverse('my_payout'), {'year': 2024, 'month': 0})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('month', response.data['error']['details'])

    def test_team_payout_requires_admin(self):
        self.client.force_authenticate(self.sarah)
        response = self.client.get(reverse('team_payout'), {'year': 2024, 'month': 5})
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_team_payout(self):
        self.client.force_authenticate(self.admin)
        response = self.client.get(reverse('team_payout'), {'year': 2024, 'month': 5})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['grand_total_commission'], '12.00')
        self.assertEqual(response.data['sales_persons'][0]['name'], 'Sarah Johnson')
