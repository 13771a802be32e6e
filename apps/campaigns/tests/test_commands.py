from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase

from apps.authentication.models import User
from apps.campaigns.models import Campaign
from apps.orders.models import Order
from apps.sequences.allocator import current_value


class LoadDemoDataTest(TestCase):
    def test_seeds_through_reference_id_allocator(self):
        call_command('load_demo_data', campaigns=4, orders_per_campaign=3, seed=7, stdout=StringIO())

        self.assertEqual(Campaign.objects.count(), 4)
        self.assertEqual(Order.objects.count(), 12)
        for platform, prefix in (('facebook', 'FB'), ('instagram', 'IG')):
            count = Campaign.objects.filter(platform=platform).count()
            self.assertEqual(current_value(f'campaign_{platform}'), count)
        for campaign in Campaign.objects.all():
            references = sorted(campaign.orders.values_list('reference_id', flat=True))
            self.assertEqual(references, [f'{campaign.reference_id}-0{n}' for n in (1, 2, 3)])

    def test_reset_restarts_numbering(self):
        call_command('load_demo_data', campaigns=2, orders_per_campaign=1, seed=1, stdout=StringIO())
        call_command('load_demo_data', campaigns=1, orders_per_campaign=1, seed=1, reset=True, stdout=StringIO())

        self.assertEqual(Campaign.objects.count(), 1)
        self.assertIn(Campaign.objects.get().reference_id, ('FB-001', 'IG-001'))


class CreateSalesUserTest(TestCase):
    def test_creates_sales_user(self):
        out = StringIO()
        call_command(
            'create_sales_user', username='anna.s', password='secret1', name='Anna Smith',
            commission_rate='11', stdout=out,
        )
        user = User.objects.get(username='anna.s')
        self.assertTrue(user.is_sales)
        self.assertIn('anna.s', out.getvalue())

    def test_missing_rate_fails(self):
        with self.assertRaises(CommandError):
            call_command('create_sales_user', username='anna.s', password='secret1', name='Anna Smith')

    def test_non_finite_rate_fails_cleanly(self):
        with self.assertRaises(CommandError):
            call_command(
                'create_sales_user', username='anna.s', password='secret1', name='Anna Smith',
                commission_rate='NaN',
            )
        self.assertFalse(User.objects.filter(username='anna.s').exists())
