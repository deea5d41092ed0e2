# Django discovers models here; they live in the infrastructure layer
from .infrastructure.models import InvoiceModel, InvoiceLineModel  # noqa: F401
