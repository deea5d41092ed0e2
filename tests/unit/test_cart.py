"""
Tests for the Cart aggregate.
"""
from decimal import Decimal

import pytest

from apps.orders.domain.entities.cart import Cart
from apps.orders.domain.entities.cart_line import CartLine
from apps.orders.domain.exceptions import InvalidQuantityError, OutOfStockError


class TestAddLine:
    def test_appends_in_insertion_order(self, cart, laptop, book, lamp):
        cart.add_line(lamp, 1)
        cart.add_line(laptop, 2)
        cart.add_line(book, 3)

        assert [(line.item.id, line.quantity) for line in cart.lines] == [
            ('P104', 1), ('P101', 2), ('P102', 3),
        ]

    @pytest.mark.parametrize('quantity', [0, -1, -50])
    def test_non_positive_quantity_rejected_before_mutation(self, cart, laptop, quantity):
        with pytest.raises(InvalidQuantityError) as exc_info:
            cart.add_line(laptop, quantity)
        assert exc_info.value.code == 'INVALID_QUANTITY'
        assert cart.is_empty

    @pytest.mark.parametrize('quantity', [2.5, Decimal('1.5'), True, '3', None])
    def test_non_integer_quantity_rejected_before_mutation(self, cart, laptop, quantity):
        with pytest.raises(InvalidQuantityError):
            cart.add_line(laptop, quantity)
        assert cart.is_empty
        assert cart.subtotal == Decimal('0')

    def test_quantity_above_ceiling_is_out_of_stock(self, cart, laptop):
        cart.add_line(laptop, 1)
        with pytest.raises(OutOfStockError) as exc_info:
            cart.add_line(laptop, 11)
        assert exc_info.value.requested == 11
        assert exc_info.value.available == 10
        assert len(cart) == 1

    def test_ceiling_itself_is_allowed(self, cart, book):
        cart.add_line(book, 10)
        assert cart.item_count == 10

    def test_ceiling_is_configurable(self, book):
        cart = Cart(max_quantity_per_request=2)
        cart.add_line(book, 2)
        with pytest.raises(OutOfStockError):
            cart.add_line(book, 3)

    def test_repeated_item_creates_separate_lines(self, cart, laptop):
        cart.add_line(laptop, 1)
        cart.add_line(laptop, 2)

        assert len(cart.lines) == 2
        assert [line.quantity for line in cart.lines] == [1, 2]
        assert cart.item_count == 3


class TestLines:
    def test_lines_are_a_read_only_snapshot(self, cart, laptop, book):
        cart.add_line(laptop, 1)
        lines = cart.lines

        cart.add_line(book, 1)

        assert len(lines) == 1
        with pytest.raises(AttributeError):
            lines.append(None)

    def test_lines_can_be_iterated_repeatedly(self, cart, laptop, book):
        cart.add_line(laptop, 1)
        cart.add_line(book, 1)

        assert list(cart) == list(cart) == list(cart.lines)


class TestClear:
    def test_clear_empties_cart(self, cart, laptop):
        cart.add_line(laptop, 1)
        cart.clear()
        assert cart.is_empty
        assert cart.lines == ()

    def test_clear_is_idempotent(self, cart):
        cart.clear()
        cart.clear()
        assert cart.is_empty

    def test_cart_usable_after_clear(self, cart, laptop):
        cart.add_line(laptop, 1)
        cart.clear()
        cart.add_line(laptop, 2)
        assert cart.item_count == 2


class TestTotals:
    def test_empty_cart_totals_are_zero(self, cart):
        assert cart.subtotal == Decimal('0')
        assert cart.tax_total == Decimal('0')

    def test_subtotal_and_tax(self, cart, laptop, book, lamp):
        cart.add_line(laptop, 1)   # 1200.00, 18%
        cart.add_line(book, 2)     # 90.00, 5%
        cart.add_line(lamp, 3)     # 90.00, default 5%

        assert cart.subtotal == Decimal('1380.00')
        assert cart.tax_total == Decimal('216') + Decimal('4.5') + Decimal('4.5')

    def test_totals_do_not_depend_on_order(self, laptop, book, headphones):
        forward, backward = Cart(), Cart()
        for item, qty in [(laptop, 2), (book, 7), (headphones, 3)]:
            forward.add_line(item, qty)
        for item, qty in [(headphones, 3), (book, 7), (laptop, 2)]:
            backward.add_line(item, qty)

        assert forward.subtotal == backward.subtotal
        assert forward.tax_total == backward.tax_total

    def test_line_amounts(self, cart, headphones):
        line = cart.add_line(headphones, 2)
        assert line.subtotal == Decimal('300.00')
        assert line.tax_amount == Decimal('54')


class TestCartLine:
    @pytest.mark.parametrize('quantity', [0, -2, 1.0, False])
    def test_rejects_invalid_quantity(self, book, quantity):
        with pytest.raises(InvalidQuantityError) as exc_info:
            CartLine(book, quantity)
        assert exc_info.value.field == 'quantity'

    def test_valid_line(self, book):
        assert CartLine(book, 3).subtotal == Decimal('135.00')
