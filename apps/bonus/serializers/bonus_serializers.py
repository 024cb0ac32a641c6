"""
Bonus points request and response serializers.
"""
import re

from rest_framework import serializers

from apps.common.validators import validate_quantity

PRODUCT_ID_PATTERN = re.compile(r'[0-9]+')


class BonusPointsRequestSerializer(serializers.Serializer):
    """
    Serializer for bonus points calculation requests.
    Used for: POST /api/bonus/calculate/
    """
    customer_login = serializers.CharField(max_length=150, trim_whitespace=False)
    product_quantities = serializers.DictField(
        child=serializers.IntegerField(validators=[validate_quantity]),
        allow_empty=True,
        help_text="Mapping of product id to purchased quantity"
    )

    def validate_product_quantities(self, value):
        """JSON object keys arrive as strings, convert them to product ids"""
        product_quantities = {}
        for key, quantity in value.items():
            if not PRODUCT_ID_PATTERN.fullmatch(key):
                raise serializers.ValidationError(f"Product id {key!r} must be an integer.")
            product_id = int(key)
            if product_id in product_quantities:
                raise serializers.ValidationError(f"Product id {product_id} is listed more than once.")
            product_quantities[product_id] = quantity
        return product_quantities


class BonusPointsResultSerializer(serializers.Serializer):
    """Serializer for bonus points calculation results"""
    customer_login = serializers.CharField()
    bonus_points = serializers.DecimalField(max_digits=None, decimal_places=None)
