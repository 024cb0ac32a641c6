"""
Bonus services module.
"""
from .multiplier_selector import MultiplierSelector
from .bonus_calculator import BonusCalculator, PurchaseLine
from .bonus_service import BonusPointsService

__all__ = [
    'MultiplierSelector',
    'BonusCalculator',
    'PurchaseLine',
    'BonusPointsService',
]
