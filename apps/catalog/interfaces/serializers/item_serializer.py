"""
Item serializers.
"""
from rest_framework import serializers


class ItemSerializer(serializers.Serializer):
    """Serializer for catalog item output."""
    id = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)
    unit_price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    category = serializers.CharField(read_only=True)
    tax_rate = serializers.DecimalField(max_digits=5, decimal_places=2, read_only=True)
