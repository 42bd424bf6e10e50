# ==============================================================================
# CONTROLADOR DE SESIÓN - Menús de terminal
# ==============================================================================
# Máquina de estados:
#   Menú principal → {Administrador, Cajero} → Menú principal, hasta Salir.
#
# Los menús solo leen datos y llaman a servicios; toda regla de negocio
# vive en services/.
# ==============================================================================

from decimal import Decimal, InvalidOperation
from typing import Optional

import click

from store_checkout import console
from store_checkout.app_container import AppContainer
from store_checkout.models.entities import FIELD_SEPARATOR, MAX_PRICE, Cart, CatalogEntry, Operator


# ═══════════════════════════════════════════════════════════════════════════
# TIPOS DE ENTRADA
# ═══════════════════════════════════════════════════════════════════════════

class TokenType(click.ParamType):
    """Primera palabra de la línea (campos sin espacios: código, email, PIN)."""
    name = 'token'

    def convert(self, value, param, ctx):
        parts = str(value).split()
        if not parts:
            self.fail('a value is required', param, ctx)
        return parts[0]


class BarcodeType(TokenType):
    """Código de barras: una palabra sin comas (separador del archivo)."""
    name = 'barcode'

    def convert(self, value, param, ctx):
        token = super().convert(value, param, ctx)
        if FIELD_SEPARATOR in token:
            self.fail(f'barcode cannot contain {FIELD_SEPARATOR!r}', param, ctx)
        return token


class PriceType(click.ParamType):
    """Decimal no negativo, hasta MAX_PRICE."""
    name = 'price'

    def convert(self, value, param, ctx):
        if isinstance(value, Decimal):
            return value
        try:
            price = Decimal(str(value).split()[0])
        except (InvalidOperation, IndexError):
            self.fail(f'{value!r} is not a valid price', param, ctx)
        if not price.is_finite() or price < 0:
            self.fail('price must be a non-negative number', param, ctx)
        if price > MAX_PRICE:
            self.fail(f'price cannot exceed {MAX_PRICE}', param, ctx)
        return price


TOKEN = TokenType()
BARCODE = BarcodeType()
PRICE = PriceType()
DISCOUNT = click.IntRange(0, 100)
STOCK = click.IntRange(min=0)


# ═══════════════════════════════════════════════════════════════════════════
# MENÚS
# ═══════════════════════════════════════════════════════════════════════════

MAIN_MENU = ('Store Management System', ['Admin Login', 'Cashier Login', 'Exit'])
ADMIN_MENU = ('Administrator Menu', [
    'Add new product',
    'Modify product',
    'Remove product',
    'View inventory',
    'Back to Main menu',
])
CASHIER_MENU = ('Cashier Menu', [
    'Add product to cart',
    'Remove product from cart',
    'View current cart',
    'View inventory',
    'Generate invoice',
    'Back to Main menu',
])


class SessionController:
    """
    Orquesta el inicio de sesión y el despacho de cada menú.

    Uso:
        SessionController(AppContainer()).run()
    """

    def __init__(self, container: AppContainer):
        self.inventory_service = container.inventory_service
        self.cart_service = container.cart_service
        self.operator_service = container.operator_service

    def _choose(self, menu) -> int:
        title, options = menu
        console.info(f"\n\t\t\t {title}")
        for number, label in enumerate(options, start=1):
            console.info(f"\t\t{number}) {label}")
        return click.prompt("\n\t\tPlease Enter your choice", type=int)

    def _show_inventory(self) -> None:
        console.info(self.inventory_service.render())

    # =========================================================================
    # MENÚ PRINCIPAL
    # =========================================================================

    def run(self) -> None:
        """Ciclo del menú principal hasta que se elige Salir."""
        while True:
            choice = self._choose(MAIN_MENU)
            if choice == 1:
                self._admin_login()
            elif choice == 2:
                self._cashier_login()
            elif choice == 3:
                console.info("\nThank you for using our system!")
                return
            else:
                console.info("\t\tInvalid choice!")

    def _admin_login(self) -> None:
        email = click.prompt("\nEnter email", type=TOKEN)
        password = click.prompt("Enter password", type=TOKEN, hide_input=True)

        admin = self.operator_service.authenticate_admin(email, password)
        if admin is None:
            console.info("\nInvalid credentials!")
            return
        self._admin_session()

    def _cashier_login(self) -> None:
        name = click.prompt("\nEnter name").strip()
        pin = click.prompt("Enter PIN (4 digits)", type=TOKEN, hide_input=True)

        cashier = self.operator_service.authenticate_cashier(name, pin)
        if cashier is None:
            console.info("\nInvalid credentials!")
            return
        self._cashier_session(cashier)

    # =========================================================================
    # SESIÓN DE ADMINISTRADOR
    # =========================================================================

    def _admin_session(self) -> None:
        while True:
            choice = self._choose(ADMIN_MENU)
            if choice == 1:
                self._add_product()
            elif choice == 2:
                self._modify_product()
            elif choice == 3:
                self._remove_product()
            elif choice == 4:
                self._show_inventory()
            elif choice == 5:
                return
            else:
                console.info("\t\tInvalid choice!")

    def _prompt_details(self, identifier: Optional[str], stock_label: str) -> CatalogEntry:
        name = click.prompt("Name").strip()
        if identifier is None:
            identifier = click.prompt("Barcode", type=BARCODE)
        return CatalogEntry(
            name=name,
            identifier=identifier,
            price=click.prompt("Price", type=PRICE),
            discount_percent=click.prompt("Discount (%)", type=DISCOUNT),
            stock=click.prompt(stock_label, type=STOCK),
        )

    def _add_product(self) -> None:
        console.info("\nEnter product details:")
        entry = self._prompt_details(None, "Initial stock")
        self.inventory_service.add(entry)
        console.info("\nProduct added successfully!")

    def _modify_product(self) -> None:
        self._show_inventory()
        identifier = click.prompt("\nEnter product barcode to modify", type=TOKEN)
        if self.inventory_service.find(identifier) is None:
            console.info("\nProduct not found in inventory!")
            return

        console.info("\nEnter new product details:")
        new_entry = self._prompt_details(identifier, "Stock")
        self.inventory_service.modify(identifier, new_entry)
        console.info("\nProduct modified successfully!")

    def _remove_product(self) -> None:
        self._show_inventory()
        identifier = click.prompt("\nEnter product barcode to remove", type=TOKEN)
        if self.inventory_service.remove(identifier):
            console.info("\nProduct removed successfully!")
        else:
            console.info("\nProduct not found in inventory!")

    # =========================================================================
    # SESIÓN DE CAJA
    # =========================================================================

    def _cashier_session(self, cashier: Operator) -> None:
        cart = Cart()
        while True:
            choice = self._choose(CASHIER_MENU)
            if choice == 1:
                self._show_inventory()
                identifier = click.prompt("\nEnter product barcode", type=TOKEN)
                self._report(self.cart_service.add_to_cart(cart, identifier))
            elif choice == 2:
                identifier = click.prompt("\nEnter product barcode to remove", type=TOKEN)
                self._report(self.cart_service.remove_from_cart(cart, identifier))
            elif choice == 3:
                console.info(cart.render())
            elif choice == 4:
                self._show_inventory()
            elif choice == 5:
                result = self.cart_service.checkout(cart, cashier)
                if result['ok']:
                    console.info(result['text'])
                self._report(result)
            elif choice == 6:
                returned = self.cart_service.abandon(cart)
                if returned:
                    console.info(f"\n{returned} item(s) returned to inventory.")
                return
            else:
                console.info("\t\tInvalid choice!")

    @staticmethod
    def _report(result) -> None:
        console.info(f"\n{result['mensaje'] if result['ok'] else result['error']}")
