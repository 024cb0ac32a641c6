"""
Common validators module.
"""
from .price_validators import (
    validate_price_range, validate_quantity, validate_discount
)

__all__ = [
    'validate_price_range',
    'validate_quantity',
    'validate_discount',
]
