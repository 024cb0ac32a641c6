"""
API tests for the bonus points calculation endpoint
"""
from decimal import Decimal
from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient
from rest_framework import status

from tests.factories import (
    UserFactory, ProductFactory, AdvertisedProductFactory, PremiumCustomerFactory
)


class BonusPointsAPITest(TestCase):
    """Test POST /api/bonus/calculate/"""

    def setUp(self):
        self.client = APIClient()
        self.client.force_authenticate(user=UserFactory())
        self.url = reverse('bonus:calculate')

        self.favorite = ProductFactory(price=Decimal('100.00'))
        self.expensive = AdvertisedProductFactory(price=Decimal('15000.00'))
        self.customer = PremiumCustomerFactory(login='erin', favorite_product=self.favorite)

    def post(self, payload):
        return self.client.post(self.url, payload, format='json')

    def test_calculate_returns_decimal_string(self):
        response = self.post({
            'customer_login': 'erin',
            'product_quantities': {str(self.favorite.id): 1, str(self.expensive.id): 2},
        })

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['code'], 200)
        self.assertEqual(response.data['data']['customer_login'], 'erin')
        # 80.00 + 36000.00, serialized without going through float
        self.assertEqual(response.data['data']['bonus_points'], '36080.00')
        self.assertEqual(response.json()['data']['bonus_points'], '36080.00')

    def test_empty_purchase(self):
        response = self.post({'customer_login': 'erin', 'product_quantities': {}})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['bonus_points'], '0')

    def test_unknown_customer_is_404(self):
        response = self.post({
            'customer_login': 'frank',
            'product_quantities': {str(self.favorite.id): 1},
        })

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['code'], 404)
        self.assertEqual(response.data['msg'], 'Customer with identifier frank does not exist')

    def test_unknown_product_is_404(self):
        missing_id = self.expensive.id + 1000
        response = self.post({
            'customer_login': 'erin',
            'product_quantities': {str(missing_id): 1},
        })

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['msg'], f'Product with identifier {missing_id} does not exist')

    def test_zero_quantity_is_400(self):
        response = self.post({
            'customer_login': 'erin',
            'product_quantities': {str(self.favorite.id): 0},
        })

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['msg'], 'Validation error')
        self.assertIn('product_quantities', response.data['errors'])

    def test_fractional_quantity_is_400(self):
        response = self.post({
            'customer_login': 'erin',
            'product_quantities': {str(self.favorite.id): 1.5},
        })

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_non_numeric_product_id_is_400(self):
        response = self.post({
            'customer_login': 'erin',
            'product_quantities': {'abc': 1},
        })

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('product_quantities', response.data['errors'])

    def test_missing_fields_is_400(self):
        response = self.post({})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('customer_login', response.data['errors'])
        self.assertIn('product_quantities', response.data['errors'])

    def test_requires_authentication(self):
        client = APIClient()

        response = client.post(self.url, {'customer_login': 'erin', 'product_quantities': {}}, format='json')

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data['msg'], 'Authentication required')

    def test_product_id_beyond_key_range_is_404(self):
        oversized_id = 99999999999999999999999
        response = self.post({
            'customer_login': 'erin',
            'product_quantities': {str(oversized_id): 1},
        })

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['msg'], f'Product with identifier {oversized_id} does not exist')

    def test_malformed_product_ids_are_400(self):
        for key in ('1_0', ' 7 ', '+7', '٧', '-1'):
            response = self.post({
                'customer_login': 'erin',
                'product_quantities': {key: 1},
            })

            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, key)
            self.assertIn('product_quantities', response.data['errors'])
