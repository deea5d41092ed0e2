"""
Orders API v1 views.
"""
from dataclasses import asdict

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from ...serializers.cart_serializer import CartSerializer, CartLineCreateSerializer
from ...serializers.checkout_serializer import CheckoutRequestSerializer, CheckoutResultSerializer
from .cart_session import session_for, store_cart


@extend_schema(tags=['Cart'])
class CartView(APIView):
    """Cart endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: CartSerializer},
        summary="Get current cart",
    )
    def get(self, request):
        shop = session_for(request)
        return Response(CartSerializer(shop.view_cart()).data)

    @extend_schema(
        request=CartLineCreateSerializer,
        responses={201: CartSerializer},
        summary="Add item to cart",
    )
    def post(self, request):
        serializer = CartLineCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        shop = session_for(request)
        result = shop.add_to_cart(
            item_id=serializer.validated_data['item_id'],
            quantity=serializer.validated_data['quantity'],
        )
        store_cart(request, shop.cart)
        return Response(CartSerializer(result.data).data, status=status.HTTP_201_CREATED)

    @extend_schema(summary="Clear cart")
    def delete(self, request):
        shop = session_for(request)
        shop.clear_cart()
        store_cart(request, shop.cart)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=['Checkout'])
class CheckoutView(APIView):
    """Checkout endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        request=CheckoutRequestSerializer,
        responses={200: CheckoutResultSerializer},
        summary="Price, pay for and invoice the current cart",
    )
    def post(self, request):
        serializer = CheckoutRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        shop = session_for(request)
        result = shop.checkout(
            coupon_code=serializer.validated_data['coupon_code'],
            payment_method=serializer.validated_data['payment_method'],
        )
        store_cart(request, shop.cart)

        payload = asdict(result.data)
        payload['warnings'] = result.warnings
        return Response(CheckoutResultSerializer(payload).data)
