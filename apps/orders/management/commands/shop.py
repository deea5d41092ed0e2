"""
Interactive console shop.

    python manage.py shop
"""
from django.core.management.base import BaseCommand

from ...infrastructure.providers import build_shop_session
from ...interfaces.console import ShopConsole


class Command(BaseCommand):
    help = "Browse the catalog, fill a cart and check out from the terminal."

    def handle(self, *args, **options):
        console = ShopConsole(
            session=build_shop_session(),
            input_func=input,
            write=self.stdout.write,
        )
        try:
            console.run()
        except (EOFError, KeyboardInterrupt):
            self.stdout.write("Exiting...")
