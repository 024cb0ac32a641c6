"""
Product views module.
"""
from .product_views import ProductCreateView, ProductDetailView

__all__ = [
    'ProductCreateView',
    'ProductDetailView',
]
