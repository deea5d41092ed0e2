"""
Invoice repository interface.
"""
from abc import ABC, abstractmethod

from ..entities.invoice import Invoice


class InvoiceRepository(ABC):
    """Sink for finalized invoices."""

    @abstractmethod
    def save(self, invoice: Invoice) -> Invoice:
        """Persist an invoice.

        Raises ``InvoicePersistenceError`` when the write fails.
        """
        pass
