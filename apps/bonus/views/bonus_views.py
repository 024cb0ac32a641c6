"""
Bonus points calculation views.
"""
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated

from apps.common.utils import success_response
from ..serializers import BonusPointsRequestSerializer, BonusPointsResultSerializer
from ..services import BonusPointsService


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def calculate_bonus_points(request):
    """Calculate the bonus points a customer earns for a purchase"""
    serializer = BonusPointsRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    customer_login = serializer.validated_data['customer_login']
    bonus_points = BonusPointsService.calculate_bonus_points(
        customer_login=customer_login,
        product_quantities=serializer.validated_data['product_quantities']
    )

    result = BonusPointsResultSerializer({
        'customer_login': customer_login,
        'bonus_points': bonus_points
    })
    return success_response(result.data)
