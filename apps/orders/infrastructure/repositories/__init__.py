# Repository implementations
from .file_invoice_repository import FileInvoiceRepository, render_invoice
from .django_invoice_repository import DjangoInvoiceRepository

__all__ = ['FileInvoiceRepository', 'DjangoInvoiceRepository', 'render_invoice']
