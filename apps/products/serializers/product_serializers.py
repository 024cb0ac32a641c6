"""
Product serializers for detail, create, and update operations.
"""
from rest_framework import serializers

from apps.common.validators import validate_price_range, validate_discount
from ..models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Serializer for product detail responses - GET /api/products/{id}/"""
    isAdvertised = serializers.BooleanField(source='is_advertised', read_only=True)
    createTime = serializers.DateTimeField(source='create_time', format='%Y-%m-%d %H:%M:%S', read_only=True)
    updateTime = serializers.DateTimeField(source='update_time', format='%Y-%m-%d %H:%M:%S', read_only=True)

    class Meta:
        model = Product
        fields = [
            'id', 'name', 'price', 'discount', 'isAdvertised',
            'createTime', 'updateTime'
        ]
        read_only_fields = fields


class ProductCreateUpdateSerializer(serializers.ModelSerializer):
    """Serializer for product creation and full update"""
    isAdvertised = serializers.BooleanField(source='is_advertised', required=False, default=False)

    class Meta:
        model = Product
        fields = ['name', 'price', 'discount', 'isAdvertised']
        extra_kwargs = {
            'discount': {'required': False, 'allow_null': True},
        }

    def validate_price(self, value):
        return validate_price_range(value, min_value=0)

    def validate(self, attrs):
        validate_discount(attrs.get('discount'), attrs.get('price'))
        return attrs
