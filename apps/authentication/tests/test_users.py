from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from django.test import TestCase
from rest_framework.test import APITestCase

from apps.authentication import services
from apps.authentication.models import User
from apps.campaigns.services import create_campaign
from core.exceptions import ConflictError, ValidationError


class UserServiceTest(TestCase):
    def test_create_sales_user(self):
        user = services.create_user('Sarah Johnson', 'sarah.j', 'secret1', User.ROLE_SALES, '12.5')
        self.assertEqual(user.commission_rate, Decimal('12.5'))
        self.assertTrue(user.check_password('secret1'))
        self.assertEqual(user.status, User.STATUS_ACTIVE)

    def test_sales_user_needs_rate(self):
        with self.assertRaises(ValidationError):
            services.create_user('Sarah Johnson', 'sarah.j', 'secret1', User.ROLE_SALES)

    def test_rate_bounds(self):
        for rate in ('-1', '100.01', 'ten'):
            with self.assertRaises(ValidationError, msg=rate):
                services.create_user('Sarah Johnson', f'user{rate}', 'secret1', User.ROLE_SALES, rate)

    def test_non_finite_rate_is_rejected(self):
        for rate in ('NaN', 'sNaN', 'Infinity', '-Infinity'):
            with self.assertRaises(ValidationError, msg=rate):
                services.create_user('Sarah Johnson', 'sarah.j', 'secret1', User.ROLE_SALES, rate)
        self.assertFalse(User.objects.filter(username='sarah.j').exists())

    def test_update_rejects_non_finite_rate(self):
        user = services.create_user('Sarah Johnson', 'sarah.j', 'secret1', User.ROLE_SALES, '10')
        with self.assertRaises(ValidationError):
            services.update_user(user, commission_rate='NaN')
        user.refresh_from_db()
        self.assertEqual(user.commission_rate, Decimal('10'))

    def test_update_can_clear_email(self):
        user = services.create_user(
            'Sarah Johnson', 'sarah.j', 'secret1', User.ROLE_SALES, '10', email='sarah@example.com'
        )
        services.update_user(user, email='')
        user.refresh_from_db()
        self.assertEqual(user.email, '')

    def test_update_leaves_missing_fields_alone(self):
        user = services.create_user(
            'Sarah Johnson', 'sarah.j', 'secret1', User.ROLE_SALES, '10', email='sarah@example.com'
        )
        services.update_user(user, name='Sarah J.')
        user.refresh_from_db()
        self.assertEqual(user.name, 'Sarah J.')
        self.assertEqual(user.email, 'sarah@example.com')

    def test_admin_rate_is_zero(self):
        user = services.create_user('Boss', 'boss', 'secret1', User.ROLE_ADMIN, '30')
        self.assertEqual(user.commission_rate, Decimal('0'))

    def test_duplicate_username(self):
        services.create_user('Sarah Johnson', 'sarah.j', 'secret1', User.ROLE_SALES, '10')
        with self.assertRaises(ConflictError):
            services.create_user('Sarah Jones', 'sarah.j', 'secret2', User.ROLE_SALES, '10')

    def test_deactivated_user_cannot_authenticate(self):
        user = services.create_user('Sarah Johnson', 'sarah.j', 'secret1', User.ROLE_SALES, '10')
        services.update_user(user, status=User.STATUS_INACTIVE)
        user.refresh_from_db()
        self.assertFalse(user.is_active)

    def test_user_with_campaigns_cannot_be_deleted(self):
        user = services.create_user('Sarah Johnson', 'sarah.j', 'secret1', User.ROLE_SALES, '10')
        create_campaign(
            title='Spring launch', platform='facebook', campaign_type='post',
            url='https://facebook.com/posts/1', sales_person_id=user.pk,
        )
        with self.assertRaises(ConflictError):
            services.delete_user(user)


class AuthAPITest(APITestCase):
    def setUp(self):
        self.admin = User.objects.create_user(
            username='admin', password='adminpass', name='Admin', role=User.ROLE_ADMIN
        )
        self.sales = User.objects.create_user(
            username='sarah.j', password='salespass', name='Sarah Johnson',
            role=User.ROLE_SALES, commission_rate=Decimal('10'),
        )

    def test_login_returns_tokens(self):
        response = self.client.post(
            reverse('login'), {'username': 'sarah.j', 'password': 'salespass'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('access', response.data)
        self.assertIn('refresh', response.data)
        self.assertEqual(response.data['user']['role'], 'sales')

    def test_login_with_wrong_password(self):
        response = self.client.post(
            reverse('login'), {'username': 'sarah.j', 'password': 'nope'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error']['code'], 'VALIDATION_ERROR')

    def test_inactive_user_cannot_login(self):
        self.sales.status = User.STATUS_INACTIVE
        self.sales.save()
        response = self.client.post(
            reverse('login'), {'username': 'sarah.j', 'password': 'salespass'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_me_with_bearer_token(self):
        login = self.client.post(
            reverse('login'), {'username': 'sarah.j', 'password': 'salespass'}, format='json'
        )
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.data['access']}")
        response = self.client.get(reverse('me'))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['username'], 'sarah.j')

    def test_admin_creates_user(self):
        self.client.force_authenticate(self.admin)
        response = self.client.post(reverse('user-list'), {
            'name': 'Mike Chen',
            'username': 'mike.c',
            'password': 'secret1',
            'role': 'sales',
            'commission_rate': '8.50',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['commission_rate'], '8.50')
        self.assertNotIn('password', response.data)

    def test_duplicate_username_is_conflict(self):
        self.client.force_authenticate(self.admin)
        response = self.client.post(reverse('user-list'), {
            'name': 'Sarah Again',
            'username': 'sarah.j',
            'password': 'secret1',
            'role': 'sales',
            'commission_rate': '10',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data['error']['code'], 'CONFLICT')

    def test_sales_user_cannot_manage_users(self):
        self.client.force_authenticate(self.sales)
        response = self.client.get(reverse('user-list'))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_admin_updates_rate(self):
        self.client.force_authenticate(self.admin)
        response = self.client.patch(
            reverse('user-detail', args=[self.sales.pk]), {'commission_rate': '15'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.sales.refresh_from_db()
        self.assertEqual(self.sales.commission_rate, Decimal('15'))
