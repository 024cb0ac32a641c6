"""
Product serializers module.
"""
from .product_serializers import ProductSerializer, ProductCreateUpdateSerializer

__all__ = [
    'ProductSerializer',
    'ProductCreateUpdateSerializer',
]
