"""
Customer lookup service.
"""
import logging

from apps.common.exceptions import DataNotFound
from ..models import Customer

logger = logging.getLogger(__name__)


class CustomerService:
    """Service for customer lookups"""

    @staticmethod
    def get_customer_by_login(login):
        """
        Get a customer by login, together with the favorite product.

        Logins are case-sensitive. The comparison is repeated in Python
        because MySQL's default collation matches case-insensitively.

        Raises:
            DataNotFound: If no customer has exactly this login
        """
        try:
            customer = Customer.objects.select_related('favorite_product').get(login=login)
        except Customer.DoesNotExist:
            customer = None

        if customer is None or customer.login != login:
            logger.warning(f"Customer {login!r} not found")
            raise DataNotFound('Customer', login)

        return customer
