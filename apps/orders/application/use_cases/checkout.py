"""
Checkout use case.

A checkout moves through these states:

    EMPTY -> PRICED -> PROMOTION_RESOLVED -> PAYMENT_DISPATCHED -> INVOICED -> RESET

An empty cart stops at EMPTY with no side effects. Otherwise the cart is
always reset at the end, even when the invoice could not be written. An
unknown coupon and a failed invoice write are reported as warnings and never
abort the checkout. There is no rollback of the payment.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from apps.payments.domain import PaymentProcessor, resolve_processor
from shared.application import UseCase, UseCaseResult
from shared.domain import quantize
from ...domain.entities.cart import Cart
from ...domain.entities.invoice import Invoice
from ...domain.exceptions import InvoicePersistenceError
from ...domain.repositories.invoice_repository import InvoiceRepository
from ...domain.services.pricing import quote
from ..dtos.cart_dto import CartLineDTO
from ..dtos.checkout_dto import CheckoutDTO, CheckoutResultDTO

logger = logging.getLogger(__name__)


class CheckoutState(str, Enum):
    EMPTY = 'empty'
    PRICED = 'priced'
    PROMOTION_RESOLVED = 'promotion_resolved'
    PAYMENT_DISPATCHED = 'payment_dispatched'
    INVOICED = 'invoiced'
    RESET = 'reset'


@dataclass
class CheckoutUseCase(UseCase[CheckoutDTO, CheckoutResultDTO]):
    """Use case for pricing, paying for and invoicing the cart."""

    cart: Cart
    invoice_repository: InvoiceRepository
    resolve_payment: Callable[[Optional[str]], PaymentProcessor] = resolve_processor

    def execute(self, input_dto: CheckoutDTO) -> UseCaseResult[CheckoutResultDTO]:
        if self.cart.is_empty:
            logger.info(f"Checkout skipped, cart {self.cart.id} is empty")
            return UseCaseResult.ok(CheckoutResultDTO.empty([CheckoutState.EMPTY.value]))

        states: List[str] = []
        warnings: List[str] = []
        lines = self.cart.lines

        try:
            priced = quote(self.cart, input_dto.coupon_code)
            states.append(CheckoutState.PRICED.value)
            logger.info(
                f"Cart {self.cart.id} priced: gross={priced.breakdown.gross_subtotal} "
                f"tax={priced.breakdown.total_tax} base={priced.breakdown.subtotal_with_tax}"
            )

            warnings.extend(priced.warnings)
            payable = quantize(priced.final_amount)
            states.append(CheckoutState.PROMOTION_RESOLVED.value)
            logger.info(f"Promotion resolved: {priced.description}, payable={payable}")

            processor = self.resolve_payment(input_dto.payment_method)
            processor.charge(payable)
            states.append(CheckoutState.PAYMENT_DISPATCHED.value)

            invoice = Invoice.create(
                lines=lines,
                total_tax=quantize(priced.breakdown.total_tax),
                grand_total=payable,
            )
            invoice_saved = self._persist(invoice, warnings)
            if invoice_saved:
                states.append(CheckoutState.INVOICED.value)
        finally:
            self.cart.clear()
            states.append(CheckoutState.RESET.value)

        result = CheckoutResultDTO(
            completed=True,
            states=states,
            order_number=invoice.order_number.value,
            lines=[CartLineDTO.from_entity(line) for line in lines],
            gross_subtotal=quantize(priced.breakdown.gross_subtotal),
            total_tax=quantize(priced.breakdown.total_tax),
            subtotal_with_tax=quantize(priced.breakdown.subtotal_with_tax),
            final_amount=payable,
            promotion=priced.description,
            payment_method=processor.method,
            invoice_saved=invoice_saved,
        )
        return UseCaseResult.ok(result, warnings=warnings)

    def _persist(self, invoice: Invoice, warnings: List[str]) -> bool:
        try:
            self.invoice_repository.save(invoice)
        except InvoicePersistenceError as e:
            logger.error(f"Invoice {invoice.order_number} was not saved: {e.message}", exc_info=True)
            warnings.append(e.message)
            return False
        logger.info(f"Invoice generated: {invoice.order_number}")
        return True
