"""
Bonus serializers module.
"""
from .bonus_serializers import BonusPointsRequestSerializer, BonusPointsResultSerializer

__all__ = [
    'BonusPointsRequestSerializer',
    'BonusPointsResultSerializer',
]
