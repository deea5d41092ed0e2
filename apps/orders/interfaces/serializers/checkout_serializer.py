"""
Checkout serializers.
"""
from rest_framework import serializers

from .cart_serializer import CartLineSerializer


class CheckoutRequestSerializer(serializers.Serializer):
    """Serializer for checkout input."""
    coupon_code = serializers.CharField(max_length=50, required=False, allow_blank=True, default='')
    payment_method = serializers.CharField(max_length=20, required=False, allow_blank=True, default='CARD')


class CheckoutResultSerializer(serializers.Serializer):
    """Serializer for checkout output."""
    completed = serializers.BooleanField(read_only=True)
    states = serializers.ListField(child=serializers.CharField(), read_only=True)
    order_number = serializers.CharField(read_only=True, allow_null=True)
    lines = CartLineSerializer(many=True, read_only=True)
    gross_subtotal = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    total_tax = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    subtotal_with_tax = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    final_amount = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    promotion = serializers.CharField(read_only=True)
    payment_method = serializers.CharField(read_only=True, allow_null=True)
    invoice_saved = serializers.BooleanField(read_only=True)
    warnings = serializers.ListField(child=serializers.CharField(), read_only=True)
