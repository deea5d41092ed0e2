# Django models
from .invoice_model import InvoiceModel, InvoiceLineModel

__all__ = ['InvoiceModel', 'InvoiceLineModel']
