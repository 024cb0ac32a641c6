"""
Product models module.
"""
from .product import Product

__all__ = [
    'Product',
]
