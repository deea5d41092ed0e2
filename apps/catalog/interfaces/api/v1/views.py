"""
Catalog API v1 views.
"""
from drf_spectacular.utils import extend_schema
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from ....infrastructure.providers import get_catalog_repository
from ...serializers.item_serializer import ItemSerializer


@extend_schema(tags=['Products'])
class ItemListView(APIView):
    """Catalog listing endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: ItemSerializer(many=True)},
        summary="List products sorted by price",
    )
    def get(self, request):
        items = get_catalog_repository().list_all()
        return Response(ItemSerializer(items, many=True).data)


@extend_schema(tags=['Products'])
class ItemDetailView(APIView):
    """Single catalog item endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: ItemSerializer},
        summary="Get product detail",
    )
    def get(self, request, item_id: str):
        # ItemNotFoundError is turned into a 404 by the exception handler
        item = get_catalog_repository().get(item_id)
        return Response(ItemSerializer(item).data)
