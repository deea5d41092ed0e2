"""
Interactive shop menu.

Reads choices with ``input_func`` and writes through ``write`` so the same loop
serves the ``shop`` management command and tests.
"""
import logging
from typing import Callable

from shared.domain import formatted
from shared.domain.exceptions import DomainException, ValidationError
from ..application.session import ShopSession

logger = logging.getLogger(__name__)

MENU = (
    "",
    "1. View Products",
    "2. Add to Cart",
    "3. View Cart",
    "4. Checkout",
    "5. Exit",
)


class InputFormatError(ValidationError):
    """Raised when the console receives text where a number was expected."""

    def __init__(self, value: str, field: str):
        super().__init__(
            message=f"Expected a whole number for {field}, got {value!r}",
            field=field,
            code="INPUT_FORMAT_ERROR",
        )
        self.value = value


def parse_int(value: str, field: str) -> int:
    try:
        return int(value.strip())
    except ValueError:
        raise InputFormatError(value, field)


class ShopConsole:
    """Menu loop over a single shop session."""

    def __init__(
        self,
        session: ShopSession,
        input_func: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ):
        self.session = session
        self.input = input_func
        self.write = write
        self.actions = {
            1: self.view_products,
            2: self.add_to_cart,
            3: self.view_cart,
            4: self.checkout,
        }

    def run(self) -> None:
        self.write("Welcome to the E-Commerce System")
        while True:
            for line in MENU:
                self.write(line)
            try:
                choice = parse_int(self.input("Select Option: "), "menu option")
            except InputFormatError:
                choice = -1
            except EOFError:
                choice = 5

            if choice == 5:
                self.write("Exiting...")
                return
            action = self.actions.get(choice)
            if action is None:
                self.write("Invalid option.")
                continue
            try:
                action()
            except DomainException as e:
                logger.debug(f"Menu action {choice} rejected: {e.code}")
                self.write(f"Error: {e.message}")

    def view_products(self) -> None:
        self.write("")
        self.write(f"{'ID':<5} | {'Name':<20} | {'Price':<9} | Category")
        self.write("-" * 51)
        for item in self.session.list_products():
            self.write(str(item))

    def add_to_cart(self) -> None:
        item_id = self.input("Enter Product ID: ").strip()
        # Parse before touching the cart so bad input leaves it unchanged
        quantity = parse_int(self.input("Enter Quantity: "), "quantity")
        self.session.add_to_cart(item_id, quantity)
        self.write("Added to cart!")

    def view_cart(self) -> None:
        cart = self.session.view_cart()
        if cart.is_empty:
            self.write("Cart is empty.")
            return
        self.write("")
        self.write("--- Your Cart ---")
        for line in cart.lines:
            self.write(f"{line.item_name} x{line.quantity} = {formatted(line.subtotal)}")

    def checkout(self) -> None:
        if self.session.cart.is_empty:
            self.write("Cart is empty.")
            return
        breakdown = self.session.preview().breakdown
        self.write("")
        self.write("--- Checkout ---")
        self.write(f"Gross Total: {formatted(breakdown.gross_subtotal)}")
        self.write(f"Tax (GST):   {formatted(breakdown.total_tax)}")
        self.write(f"Subtotal:    {formatted(breakdown.subtotal_with_tax)}")

        coupon = self.input("Enter Coupon Code (or press enter to skip): ")
        method = self.input("Payment Method (CARD/UPI): ")
        result = self.session.checkout(coupon_code=coupon, payment_method=method)
        summary = result.data

        for warning in result.warnings:
            self.write(warning)
        self.write(f"Promo Applied: {summary.promotion}")
        self.write(f"FINAL PAYABLE: {formatted(summary.final_amount)}")
        self.write(f"Paid via {summary.payment_method}")
        if summary.invoice_saved:
            self.write(f"Invoice generated: {summary.order_number}")
