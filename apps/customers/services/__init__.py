"""
Customer services module.
"""
from .customer_service import CustomerService

__all__ = [
    'CustomerService',
]
