"""
Price, discount and quantity validators.
"""
from rest_framework import serializers


def validate_price_range(value, min_value=0):
    """
    Validate price meets the minimum requirement.

    Args:
        value: Price decimal
        min_value: Minimum allowed price (default: 0)

    Raises:
        serializers.ValidationError: If price is below the minimum

    Returns:
        decimal.Decimal: Validated price
    """
    if value < min_value:
        raise serializers.ValidationError(f"Price must be at least {min_value}.")

    return value


def validate_quantity(value, min_value=1):
    """
    Validate quantity is a whole number meeting the minimum requirement.

    Args:
        value: Quantity integer
        min_value: Minimum allowed quantity (default: 1)

    Raises:
        serializers.ValidationError: If quantity is invalid

    Returns:
        int: Validated quantity
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise serializers.ValidationError("Quantity must be an integer.")

    if value < min_value:
        raise serializers.ValidationError(f"Quantity must be at least {min_value}.")

    return value


def validate_discount(discount, price):
    """
    Validate a discount amount against the product price.

    This is an object-level validator that should be used in validate() method.

    Args:
        discount: Discount decimal, None when the product is not discounted
        price: Product price decimal

    Raises:
        serializers.ValidationError: If discount is negative or exceeds price

    Returns:
        decimal.Decimal: Validated discount
    """
    if discount is None:
        return discount

    if discount < 0:
        raise serializers.ValidationError({
            'discount': 'Discount must not be negative.'
        })

    if price is not None and discount > price:
        raise serializers.ValidationError({
            'discount': 'Discount must not exceed the product price.'
        })

    return discount
