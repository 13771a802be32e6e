import random
from datetime import timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from apps.authentication import services as users
from apps.authentication.models import User
from apps.campaigns import services as campaigns
from apps.campaigns.models import Campaign
from apps.orders import services as orders
from apps.orders.models import Order
from apps.sequences.models import Counter

SALES_PEOPLE = [
    ('Sarah Johnson', 'sarah.j', Decimal('12')),
    ('Mike Chen', 'mike.c', Decimal('10')),
    ('Emily Wong', 'emily.w', Decimal('15')),
    ('David Lee', 'david.l', Decimal('8')),
    ('Anna Smith', 'anna.s', Decimal('11')),
]

PRODUCTS = [
    ('Serum 30ml', Decimal('29.90')),
    ('Night Cream', Decimal('45.00')),
    ('Cleansing Foam', Decimal('18.50')),
    ('Sunscreen SPF50', Decimal('24.00')),
    ('Gift Set', Decimal('120.00')),
]


class Command(BaseCommand):
    help = 'Seed demo users, campaigns and orders through the regular services'

    def add_arguments(self, parser):
        parser.add_argument('--campaigns', type=int, default=10)
        parser.add_argument('--orders-per-campaign', type=int, default=5, dest='orders_per_campaign')
        parser.add_argument('--password', type=str, default='password123')
        parser.add_argument('--seed', type=int, default=None)
        parser.add_argument('--reset', action='store_true',
                            help='Delete orders, campaigns, demo users and counters first')

    def handle(self, *args, **options):
        rng = random.Random(options['seed'])

        if options['reset']:
            self._reset()

        admin = self._get_or_create_user('Admin User', 'admin', User.ROLE_ADMIN, None, options['password'])
        sales_people = [
            self._get_or_create_user(name, username, User.ROLE_SALES, rate, options['password'])
            for name, username, rate in SALES_PEOPLE
        ]

        today = timezone.localdate()
        created_orders = 0
        for i in range(options['campaigns']):
            sales_person = sales_people[i % len(sales_people)]
            platform = rng.choice(['facebook', 'instagram'])
            campaign = campaigns.create_campaign(
                title=f'{sales_person.name} {platform.title()} drop #{i + 1}',
                platform=platform,
                campaign_type=rng.choice(['post', 'live', 'event']),
                url=f'https://{platform}.com/demo/{i + 1}',
                sales_person_id=sales_person.pk,
                start_date=today - timedelta(days=rng.randint(30, 400)),
            )
            self.stdout.write(f'Created campaign {campaign.reference_id}')

            for _ in range(options['orders_per_campaign']):
                products = [
                    {'name': name, 'qty': rng.randint(1, 5), 'base_price': price}
                    for name, price in rng.sample(PRODUCTS, rng.randint(1, 3))
                ]
                order_date = max(campaign.start_date, today - timedelta(days=rng.randint(0, 365)))
                orders.create_order(campaign.pk, products, order_date=order_date, user=admin)
                created_orders += 1

        self.stdout.write(
            self.style.SUCCESS(
                f'Seeded {options["campaigns"]} campaigns and {created_orders} orders '
                f'for {len(sales_people)} sales people'
            )
        )

    def _get_or_create_user(self, name, username, role, rate, password):
        existing = User.objects.filter(username=username).first()
        if existing:
            return existing
        user = users.create_user(name=name, username=username, password=password, role=role, commission_rate=rate)
        self.stdout.write(f'Created {role} user {username}')
        return user

    @transaction.atomic
    def _reset(self):
        Order.objects.all().delete()
        Campaign.objects.all().delete()
        demo_usernames = ['admin'] + [username for _, username, _ in SALES_PEOPLE]
        User.objects.filter(username__in=demo_usernames).delete()
        Counter.objects.all().delete()
        self.stdout.write(self.style.WARNING('Cleared orders, campaigns, demo users and counters'))
