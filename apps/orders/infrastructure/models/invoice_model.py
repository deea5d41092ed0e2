"""
Invoice Django ORM models.
"""
import uuid

from django.db import models


class InvoiceModel(models.Model):
    """Invoice model."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order_number = models.CharField(max_length=50, unique=True, db_index=True)
    issued_at = models.DateTimeField()
    total_tax = models.DecimalField(max_digits=12, decimal_places=2)
    grand_total = models.DecimalField(max_digits=12, decimal_places=2)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'invoices'
        ordering = ['-issued_at']

    def __str__(self):
        return self.order_number


class InvoiceLineModel(models.Model):
    """Invoice line model."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    invoice = models.ForeignKey(InvoiceModel, on_delete=models.CASCADE, related_name='lines')
    position = models.PositiveIntegerField()
    item_name = models.CharField(max_length=255)
    quantity = models.PositiveIntegerField()
    line_total = models.DecimalField(max_digits=12, decimal_places=2)

    class Meta:
        db_table = 'invoice_lines'
        ordering = ['position']

    def __str__(self):
        return f"{self.item_name} x {self.quantity}"
