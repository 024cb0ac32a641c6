"""
Bonus points service resolving identifiers for the calculator.
"""
import logging

from apps.common.exceptions import InvalidInput
from apps.customers.services import CustomerService
from apps.products.services import ProductService
from .bonus_calculator import BonusCalculator, PurchaseLine

logger = logging.getLogger(__name__)


class BonusPointsService:
    """Service for calculating bonus points of a purchase request"""

    @staticmethod
    def calculate_bonus_points(customer_login, product_quantities):
        """
        Calculate the bonus points a customer earns for a purchase.

        Args:
            customer_login: Login of the purchasing customer
            product_quantities: Mapping of product id to purchased quantity

        Returns:
            Decimal: Total bonus points

        Raises:
            InvalidInput: If a product id or quantity is malformed
            DataNotFound: If the customer or any product does not exist
        """
        BonusPointsService.validate_product_quantities(product_quantities)

        customer = CustomerService.get_customer_by_login(customer_login)
        products = ProductService.get_products(product_quantities.keys())

        lines = [
            PurchaseLine(products[product_id], quantity)
            for product_id, quantity in product_quantities.items()
        ]
        total = BonusCalculator.calculate_bonus_points(customer, lines)

        logger.info(
            f"Calculated {total} bonus points for customer {customer_login!r} "
            f"over {len(lines)} products"
        )
        return total

    @staticmethod
    def validate_product_quantities(product_quantities):
        """Reject non-integer product ids and non-positive quantities"""
        errors = []
        for product_id, quantity in product_quantities.items():
            if isinstance(product_id, bool) or not isinstance(product_id, int):
                errors.append(f"Product id {product_id!r} must be an integer.")
            if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
                errors.append(f"Quantity for product {product_id} must be a positive integer.")

        if errors:
            raise InvalidInput({'product_quantities': errors})
