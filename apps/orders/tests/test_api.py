from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.authentication.models import User
from apps.campaigns.services import create_campaign
from apps.orders.services import create_order


class OrderAPITest(APITestCase):
    def setUp(self):
        self.sales = User.objects.create_user(
            username='sarah.j', password='salespass', name='Sarah Johnson',
            role=User.ROLE_SALES, commission_rate=Decimal('12.5'),
        )
        self.other_sales = User.objects.create_user(
            username='mike.c', password='salespass', name='Mike Chen',
            role=User.ROLE_SALES, commission_rate=Decimal('8'),
        )
        self.campaign = create_campaign(
            title='Spring launch', platform='instagram', campaign_type='live',
            url='https://instagram.com/live/1', sales_person_id=self.sales.pk,
        )
        self.payload = {
            'campaign_id': self.campaign.pk,
            'products': [
                {'name': 'Serum', 'qty': 2, 'base_price': '40.00'},
                {'name': '', 'qty': 0, 'base_price': '0'},
            ],
        }

    def test_create_order(self):
        self.client.force_authenticate(self.sales)
        response = self.client.post(reverse('order-list'), self.payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['reference_id'], 'IG-001-01')
        self.assertEqual(response.data['order_total'], '80.00')
        self.assertEqual(response.data['snapshot_rate'], '12.50')
        self.assertEqual(response.data['commission_amount'], '10.00')
        self.assertEqual(len(response.data['products']), 1)
        self.assertEqual(response.data['campaign']['reference_id'], 'IG-001')

    def test_create_without_valid_items(self):
        self.client.force_authenticate(self.sales)
        payload = {**self.payload, 'products': [{'name': '', 'qty': 1, 'base_price': '5'}]}
        response = self.client.post(reverse('order-list'), payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error']['code'], 'VALIDATION_ERROR')

    def test_create_on_other_sales_persons_campaign(self):
        self.client.force_authenticate(self.other_sales)
        response = self.client.post(reverse('order-list'), self.payload, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_create_for_missing_campaign(self):
        self.client.force_authenticate(self.sales)
        response = self.client.post(reverse('order-list'), {**self.payload, 'campaign_id': 999}, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['error']['code'], 'NOT_FOUND')

    def test_list_filters_by_campaign(self):
        create_order(self.campaign.pk, [{'name': 'Serum', 'qty': 1, 'base_price': '10'}])
        other = create_campaign(
            title='Second', platform='instagram', campaign_type='post',
            url='https://instagram.com/p/2', sales_person_id=self.sales.pk,
        )
        create_order(other.pk, [{'name': 'Serum', 'qty': 1, 'base_price': '10'}])

        self.client.force_authenticate(self.sales)
        response = self.client.get(reverse('order-list'), {'campaign': other.pk})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([o['reference_id'] for o in response.data], ['IG-002-01'])

    def test_update_rejects_campaign_change(self):
        order = create_order(self.campaign.pk, [{'name': 'Serum', 'qty': 1, 'base_price': '10'}])
        self.client.force_authenticate(self.sales)
        response = self.client.patch(
            reverse('order-detail', args=[order.pk]), {'campaign_id': 42}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('campaign_id', response.data['error']['details'])

    def test_update_products_keeps_snapshot(self):
        order = create_order(self.campaign.pk, [{'name': 'Serum', 'qty': 1, 'base_price': '10'}])
        self.sales.commission_rate = Decimal('50')
        self.sales.save()

        self.client.force_authenticate(self.sales)
        response = self.client.patch(
            reverse('order-detail', args=[order.pk]),
            {'products': [{'name': 'Serum', 'qty': 10, 'base_price': '10'}]},
            format='json',
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['order_total'], '100.00')
        self.assertEqual(response.data['commission_amount'], '12.50')

    def test_delete_order(self):
        order = create_order(self.campaign.pk, [{'name': 'Serum', 'qty': 1, 'base_price': '10'}])
        self.client.force_authenticate(self.sales)
        response = self.client.delete(reverse('order-detail', args=[order.pk]))
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
