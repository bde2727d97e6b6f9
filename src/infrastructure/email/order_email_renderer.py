"""
Order confirmation email renderer.

Turns an Order into a self-contained, inline-styled HTML document plus a
plain text alternative, using Jinja2 templates stored next to this module.

Decision: Autoescaping is on for the HTML template. Item names, product
codes and image URLs come straight from the storefront, so every
interpolated field is HTML-escaped rather than trusted. The plain text
template is left unescaped.
"""

from decimal import Decimal
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from src.domain.money import format_currency
from src.domain.order import Order

TEMPLATES_DIR = Path(__file__).parent / "templates"

# Shown instead of an amount or date the storefront did not send
MISSING_VALUE = "N/A"


class OrderEmailRenderer:
    """
    Pure renderer: the same order always produces the same bytes.

    Nothing in the templates reads the clock; the order date is whatever
    the storefront supplied.
    """

    def __init__(
        self,
        shop_name: str = "Zone 5 Shop",
        shop_tagline: str = "Boldly Graceful",
        support_email: str = "support@zone5shop.com",
        instagram_url: str = "https://www.instagram.com/zone5shop/",
        currency_symbol: str = "₹",
    ):
        self.currency_symbol = currency_symbol
        self.branding = {
            "shop_name": shop_name,
            "shop_tagline": shop_tagline,
            "support_email": support_email,
            "instagram_url": instagram_url,
        }

        self.jinja_env = Environment(
            loader=FileSystemLoader(TEMPLATES_DIR),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )
        self.jinja_env.filters["currency"] = self.format_money

    def format_money(self, amount: Decimal | None) -> str:
        """Currency-format an amount, or the placeholder when it is missing."""
        if amount is None:
            return MISSING_VALUE
        return format_currency(amount, self.currency_symbol)

    def _context(self, order: Order) -> dict:
        return {
            **self.branding,
            "order": order,
            "order_date": order.date or MISSING_VALUE,
            "free_shipping": order.has_free_shipping,
        }

    def render(self, order: Order) -> str:
        """
        Render the HTML confirmation email.

        Args:
            order: The order to confirm

        Returns:
            Complete HTML document as a string
        """
        template = self.jinja_env.get_template("order_confirmation.html")
        return template.render(self._context(order))

    def render_text(self, order: Order) -> str:
        """Render the plain text alternative for clients without HTML support."""
        template = self.jinja_env.get_template("order_confirmation.txt")
        return template.render(self._context(order))
