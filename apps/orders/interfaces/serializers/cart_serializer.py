"""
Cart serializers.
"""
from rest_framework import serializers


class CartLineSerializer(serializers.Serializer):
    """Serializer for cart line output."""
    item_id = serializers.CharField(read_only=True)
    item_name = serializers.CharField(read_only=True)
    unit_price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)


class CartSerializer(serializers.Serializer):
    """Serializer for cart output."""
    lines = CartLineSerializer(many=True, read_only=True)
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    tax_total = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    item_count = serializers.IntegerField(read_only=True)


class CartLineCreateSerializer(serializers.Serializer):
    """Serializer for adding a line to the cart.

    Quantity bounds are enforced by the cart itself so the API reports the
    same errors as every other entry point.
    """
    item_id = serializers.CharField(max_length=50)
    quantity = serializers.IntegerField(default=1)
