"""
Cart persistence in the Django session.

The session only stores ``(item_id, quantity)`` pairs; items are re-read from
the catalog on every request. Lines that no longer fit the catalog or the
current quantity ceiling are dropped.
"""
import logging

from apps.catalog.domain.repositories.catalog_repository import CatalogRepository
from ....application.session import ShopSession
from ....domain.entities.cart import Cart
from ....domain.exceptions import InvalidQuantityError, OutOfStockError
from ....infrastructure.providers import build_shop_session, new_cart

logger = logging.getLogger(__name__)

SESSION_KEY = 'cart_lines'


def load_cart(request, catalog: CatalogRepository) -> Cart:
    """Rebuild the cart stored in ``request.session``."""
    cart = new_cart()
    for entry in request.session.get(SESSION_KEY, []):
        item = catalog.lookup(entry['item_id'])
        if item is None:
            logger.warning(f"Dropping cart line for unknown item {entry['item_id']!r}")
            continue
        try:
            cart.add_line(item, entry['quantity'])
        except (InvalidQuantityError, OutOfStockError) as e:
            logger.warning(f"Dropping cart line for {item.id}: {e.message}")
    return cart


def store_cart(request, cart: Cart) -> None:
    """Write the cart lines back to ``request.session``."""
    request.session[SESSION_KEY] = [
        {'item_id': line.item.id, 'quantity': line.quantity}
        for line in cart.lines
    ]


def session_for(request) -> ShopSession:
    """Shop session bound to the cart of the requesting client."""
    shop = build_shop_session()
    shop.cart = load_cart(request, shop.catalog)
    return shop
