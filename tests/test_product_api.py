"""
API tests for product lookup, creation and update
"""
from decimal import Decimal
from django.test import TestCase
from django.urls import reverse
from hypothesis import given, strategies as st, settings
from hypothesis.extra.django import TestCase as HypothesisTestCase
from rest_framework.test import APIClient
from rest_framework import status

from apps.products.models import Product
from apps.products.serializers import ProductCreateUpdateSerializer
from tests.factories import UserFactory, ProductFactory


class ProductAPITest(TestCase):
    """Test /api/products/ endpoints"""

    def setUp(self):
        self.client = APIClient()
        self.client.force_authenticate(user=UserFactory())

    def test_get_product(self):
        product = ProductFactory(name='Kettle', price=Decimal('49.90'), is_advertised=True)

        response = self.client.get(reverse('product-detail', args=[product.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.data['data']
        self.assertEqual(data['id'], product.id)
        self.assertEqual(data['name'], 'Kettle')
        self.assertEqual(data['price'], '49.90')
        self.assertIsNone(data['discount'])
        self.assertTrue(data['isAdvertised'])

    def test_get_missing_product_is_404(self):
        response = self.client.get(reverse('product-detail', args=[424242]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['msg'], 'Product with identifier 424242 does not exist')

    def test_create_product_ignores_client_id(self):
        response = self.client.post(reverse('product-create'), {
            'id': 777,
            'name': 'Laptop',
            'price': '12000.00',
            'isAdvertised': True,
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        product = Product.objects.get(name='Laptop')
        self.assertEqual(response.data['data']['id'], product.id)
        self.assertEqual(product.price, Decimal('12000.00'))
        self.assertIsNone(product.discount)
        self.assertTrue(product.is_advertised)

    def test_update_product_overwrites_fields(self):
        product = ProductFactory(name='Old', price=Decimal('10.00'), discount=Decimal('1.00'), is_advertised=True)

        response = self.client.put(reverse('product-detail', args=[product.id]), {
            'name': 'New',
            'price': '20.50',
            'discount': None,
            'isAdvertised': False,
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        product.refresh_from_db()
        self.assertEqual(product.name, 'New')
        self.assertEqual(product.price, Decimal('20.50'))
        self.assertIsNone(product.discount)
        self.assertFalse(product.is_advertised)

    def test_update_without_discount_clears_it(self):
        product = ProductFactory(price=Decimal('10.00'), discount=Decimal('1.00'))

        response = self.client.put(reverse('product-detail', args=[product.id]), {
            'name': product.name,
            'price': '10.00',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        product.refresh_from_db()
        self.assertIsNone(product.discount)

    def test_update_missing_product_is_404(self):
        response = self.client.put(reverse('product-detail', args=[424242]), {
            'name': 'Ghost',
            'price': '1.00',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_product_id_beyond_key_range_is_404(self):
        oversized_id = 10 ** 25
        url = reverse('product-detail', args=[oversized_id])

        get_response = self.client.get(url)
        put_response = self.client.put(url, {'name': 'Ghost', 'price': '1.00'}, format='json')

        self.assertEqual(get_response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(get_response.data['msg'], f'Product with identifier {oversized_id} does not exist')
        self.assertEqual(put_response.status_code, status.HTTP_404_NOT_FOUND)

    def test_negative_price_is_rejected(self):
        response = self.client.post(reverse('product-create'), {
            'name': 'Broken',
            'price': '-1.00',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('price', response.data['errors'])

    def test_discount_above_price_is_rejected(self):
        response = self.client.post(reverse('product-create'), {
            'name': 'Broken',
            'price': '10.00',
            'discount': '10.01',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('discount', response.data['errors'])


class ProductSerializerPropertyTests(HypothesisTestCase):
    """Property tests for product validation"""

    @given(
        price=st.decimals(min_value=Decimal('0.00'), max_value=Decimal('9999999999.99'), places=2),
        discount=st.one_of(
            st.none(),
            st.decimals(min_value=Decimal('0.00'), max_value=Decimal('9999999999.99'), places=2),
        ),
        is_advertised=st.booleans(),
    )
    @settings(max_examples=50, deadline=None)
    def test_valid_discount_iff_within_price(self, price, discount, is_advertised):
        serializer = ProductCreateUpdateSerializer(data={
            'name': 'Generated',
            'price': str(price),
            'discount': None if discount is None else str(discount),
            'isAdvertised': is_advertised,
        })

        expected_valid = discount is None or discount <= price
        self.assertEqual(serializer.is_valid(), expected_valid, serializer.errors)
