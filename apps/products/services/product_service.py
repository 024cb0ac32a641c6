"""
Product service for product lookup, creation and update operations.
"""
import logging
from django.db import transaction

from apps.common.exceptions import DataNotFound
from ..models import Product

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ('price', 'discount', 'name', 'is_advertised')

# BigAutoField primary key range
MIN_PRODUCT_ID = 1
MAX_PRODUCT_ID = 2 ** 63 - 1


def is_storable_id(product_id):
    return MIN_PRODUCT_ID <= product_id <= MAX_PRODUCT_ID


class ProductService:
    """Service for product lookup, creation and update operations"""

    @staticmethod
    def get_product(product_id):
        """
        Get a single product by primary key.

        Raises:
            DataNotFound: If no product has this id
        """
        try:
            if not is_storable_id(product_id):
                raise Product.DoesNotExist
            return Product.objects.get(id=product_id)
        except Product.DoesNotExist:
            logger.warning(f"Product {product_id} not found")
            raise DataNotFound('Product', product_id)

    @staticmethod
    def get_products(product_ids):
        """
        Resolve a collection of product ids in a single query.

        Ids outside the primary key range cannot exist and are reported as
        missing without reaching the database.

        Args:
            product_ids: Iterable of product primary keys

        Returns:
            dict: Product instances keyed by id

        Raises:
            DataNotFound: For the lowest id that does not resolve
        """
        ids = set(product_ids)
        products = Product.objects.in_bulk([pk for pk in ids if is_storable_id(pk)])

        missing = sorted(ids - products.keys())
        if missing:
            logger.warning(f"Products not found: {missing}")
            raise DataNotFound('Product', missing[0])

        return products

    @staticmethod
    def create_product(validated_data):
        """
        Create a new product.

        Any client supplied id is ignored, the database assigns a fresh one.

        Args:
            validated_data: Validated data from serializer

        Returns:
            Product: Created product instance
        """
        data = {field: validated_data[field] for field in UPDATABLE_FIELDS if field in validated_data}
        product = Product.objects.create(**data)
        logger.info(f"Created product {product.id}")
        return product

    @staticmethod
    @transaction.atomic
    def update_product(product_id, validated_data):
        """
        Overwrite price, discount, name and advertised flag of a product.

        A discount missing from validated_data is cleared, matching a full
        replacement of the product's commercial attributes.

        Args:
            product_id: Primary key of the product to update
            validated_data: Validated data from serializer

        Returns:
            Product: Updated product instance

        Raises:
            DataNotFound: If no product has this id
        """
        try:
            if not is_storable_id(product_id):
                raise Product.DoesNotExist
            product = Product.objects.select_for_update().get(id=product_id)
        except Product.DoesNotExist:
            logger.warning(f"Product {product_id} not found for update")
            raise DataNotFound('Product', product_id)

        product.price = validated_data['price']
        product.discount = validated_data.get('discount')
        product.name = validated_data['name']
        product.is_advertised = validated_data.get('is_advertised', False)
        product.save(update_fields=[*UPDATABLE_FIELDS, 'update_time'])

        logger.info(f"Updated product {product.id}")
        return product
