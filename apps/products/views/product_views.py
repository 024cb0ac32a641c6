"""
Product detail, create and update views.
"""
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from rest_framework import status

from apps.common.utils import success_response
from ..serializers import ProductSerializer, ProductCreateUpdateSerializer
from ..services import ProductService


class ProductCreateView(APIView):
    """Product create endpoint - POST /api/products/"""
    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = ProductCreateUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product = ProductService.create_product(serializer.validated_data)

        return success_response(
            ProductSerializer(product).data,
            'Product created',
            status_code=status.HTTP_201_CREATED
        )


class ProductDetailView(APIView):
    """Product detail endpoint - GET/PUT /api/products/{id}/"""
    permission_classes = [IsAuthenticated]

    def get(self, request, id):
        product = ProductService.get_product(id)
        return success_response(ProductSerializer(product).data)

    def put(self, request, id):
        serializer = ProductCreateUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product = ProductService.update_product(id, serializer.validated_data)

        return success_response(ProductSerializer(product).data, 'Product updated')
