"""
Bonus points calculator.

All arithmetic runs on decimal.Decimal inside a local context whose precision
is derived from the operands, so no intermediate value is ever rounded. The
only rounding step is the explicit ROUND_HALF_UP quantize after dividing a
line amount by BONUS_DIVISOR.
"""
from decimal import Context, Decimal, ROUND_HALF_UP, getcontext, localcontext
from functools import reduce
from operator import mul
from typing import NamedTuple

from .multiplier_selector import MultiplierSelector


class PurchaseLine(NamedTuple):
    """One purchased product and its quantity"""
    product: object
    quantity: int


class BonusCalculator:
    """Calculate bonus points for resolved customers and products"""

    MAX_COMBINED_MULTIPLIERS = 2
    BONUS_DIVISOR = Decimal('10')

    @classmethod
    def combine_multipliers(cls, multipliers, limit=None):
        """
        Multiply the largest `limit` multipliers together.

        An empty selection yields Decimal('1').
        """
        if limit is None:
            limit = cls.MAX_COMBINED_MULTIPLIERS

        top = sorted(multipliers, reverse=True)[:limit]
        with localcontext(_exact_context(*top)):
            return reduce(mul, top, Decimal('1'))

    @classmethod
    def calculate_line_bonus(cls, customer, product, quantity):
        """
        Bonus for a single line: price * quantity * combined multiplier / 10.

        The quotient is rounded half up to the exponent of the dividend,
        which is the exponent of the price since quantity and multipliers are
        integers. Discounted products earn nothing.
        """
        if product.is_discounted:
            return Decimal('0')

        combined = cls.combine_multipliers(MultiplierSelector.select_multipliers(customer, product))
        quantity = Decimal(quantity)

        with localcontext(_exact_context(product.price, quantity, combined, cls.BONUS_DIVISOR)):
            dividend = product.price * quantity * combined
            scale = Decimal(1).scaleb(dividend.as_tuple().exponent)
            return (dividend / cls.BONUS_DIVISOR).quantize(scale, rounding=ROUND_HALF_UP)

    @classmethod
    def calculate_bonus_points(cls, customer, lines):
        """
        Sum the line bonuses of a purchase.

        Args:
            customer: Customer the points are calculated for
            lines: Iterable of (product, quantity) pairs

        Returns:
            Decimal: Total bonus points, Decimal('0') for no lines
        """
        total = Decimal('0')
        for product, quantity in lines:
            line_bonus = cls.calculate_line_bonus(customer, product, quantity)
            with localcontext(_exact_context(total, line_bonus)):
                total = total + line_bonus
        return total


def _exact_context(*values):
    """Context wide enough that adding or multiplying `values` is exact"""
    width = 0
    for value in values:
        sign, digits, exponent = value.as_tuple()
        width += len(digits) + abs(exponent)
    return Context(prec=max(getcontext().prec, width + 2), rounding=ROUND_HALF_UP)
