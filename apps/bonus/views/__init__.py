"""
Bonus views module.
"""
from .bonus_views import calculate_bonus_points

__all__ = [
    'calculate_bonus_points',
]
