"""
Multiplier selection for bonus points calculations.
"""
from decimal import Decimal


class MultiplierSelector:
    """Collect the bonus multipliers a customer earns on a product"""

    FAVORITE_PREMIUM_MULTIPLIER = Decimal('8')
    FAVORITE_MULTIPLIER = Decimal('5')
    PREMIUM_MULTIPLIER = Decimal('2')
    ADVERTISED_MULTIPLIER = Decimal('3')
    HIGH_PRICE_MULTIPLIER = Decimal('4')

    HIGH_PRICE_THRESHOLD = Decimal('10000')

    @classmethod
    def select_multipliers(cls, customer, product):
        """
        Return every multiplier whose rule fires for this customer and product.

        The rules are independent and each one contributes its own value,
        duplicates included:

        - favorite product: 8 for premium customers, 5 otherwise; any other
          product earns premium customers 2
        - advertised product: 3
        - price strictly above HIGH_PRICE_THRESHOLD: 4

        A customer without a favorite product never matches the favorite rule.
        """
        multipliers = []

        if cls.is_favorite(customer, product):
            if customer.is_premium:
                multipliers.append(cls.FAVORITE_PREMIUM_MULTIPLIER)
            else:
                multipliers.append(cls.FAVORITE_MULTIPLIER)
        elif customer.is_premium:
            multipliers.append(cls.PREMIUM_MULTIPLIER)

        if product.is_advertised:
            multipliers.append(cls.ADVERTISED_MULTIPLIER)

        if product.price > cls.HIGH_PRICE_THRESHOLD:
            multipliers.append(cls.HIGH_PRICE_MULTIPLIER)

        return multipliers

    @staticmethod
    def is_favorite(customer, product):
        favorite = customer.favorite_product
        return favorite is not None and favorite == product
