"""
Plain-text invoice files.
"""
import logging
from pathlib import Path
from typing import List, Union

from shared.domain import quantize
from ...domain.entities.invoice import Invoice
from ...domain.exceptions import InvoicePersistenceError
from ...domain.repositories.invoice_repository import InvoiceRepository

logger = logging.getLogger(__name__)

RULE = "-" * 48


def render_invoice(invoice: Invoice) -> str:
    """Render an invoice as the text written to disk."""
    rows: List[str] = [
        "E-COMMERCE INVOICE",
        f"Order ID: {invoice.order_number}",
        f"Date: {invoice.timestamp}",
        RULE,
        f"{'Item':<20} {'Qty':<10} {'Total':<10}",
    ]
    for line in invoice.lines:
        rows.append(f"{line.item_name:<20} {line.quantity:<10} ${quantize(line.line_total):<10.2f}")
    rows += [
        RULE,
        f"Total Tax: ${quantize(invoice.total_tax):.2f}",
        f"Grand Total: ${quantize(invoice.grand_total):.2f}",
    ]
    return "\n".join(rows) + "\n"


class FileInvoiceRepository(InvoiceRepository):
    """Writes one ``invoice_<order number>.txt`` file per invoice."""

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    def path_for(self, invoice: Invoice) -> Path:
        return self.directory / f"invoice_{invoice.order_number}.txt"

    def save(self, invoice: Invoice) -> Invoice:
        """Write the invoice file; an existing file is never overwritten."""
        path = self.path_for(invoice)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with path.open('x', encoding='utf-8') as f:
                f.write(render_invoice(invoice))
        except OSError as e:
            raise InvoicePersistenceError(str(invoice.order_number), str(e)) from e

        logger.info(f"Invoice written to {path}")
        return invoice
