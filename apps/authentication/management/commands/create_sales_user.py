from django.core.management.base import BaseCommand, CommandError

from apps.authentication import services
from apps.authentication.models import User
from core.exceptions import CommissionTrackerError


class Command(BaseCommand):
    help = 'Create an admin or sales user'

    def add_arguments(self, parser):
        parser.add_argument('--username', type=str, required=True)
        parser.add_argument('--password', type=str, required=True)
        parser.add_argument('--name', type=str, required=True)
        parser.add_argument('--email', type=str, default='')
        parser.add_argument('--role', type=str, default=User.ROLE_SALES,
                            choices=[User.ROLE_ADMIN, User.ROLE_SALES])
        parser.add_argument('--commission-rate', type=str, dest='commission_rate', default=None)

    def handle(self, *args, **options):
        try:
            user = services.create_user(
                name=options['name'],
                username=options['username'],
                password=options['password'],
                role=options['role'],
                commission_rate=options['commission_rate'],
                email=options['email'],
            )
        except CommissionTrackerError as e:
            raise CommandError(e.message)

        if user.is_sales:
            self.stdout.write(
                self.style.SUCCESS(
                    f'Successfully created sales user {user.username} at {user.commission_rate}%'
                )
            )
        else:
            self.stdout.write(self.style.SUCCESS(f'Successfully created admin user {user.username}'))
