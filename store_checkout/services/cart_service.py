# ==============================================================================
# SERVICIO DE CARRITO
# ==============================================================================
# Centraliza la lógica que mantiene consistentes el carrito y el inventario.
# El carrito vive en la sesión de caja; este servicio no guarda estado.
# ==============================================================================

from typing import Any, Dict

from store_checkout.models.entities import Cart, Invoice, Operator
from store_checkout.services.inventory_service import InventoryService


class CartService:
    """
    Servicio para gestión del carrito de compras.

    Responsabilidades:
    - Agregar/eliminar productos del carrito
    - Descontar y reponer stock en el inventario
    - Generar la factura y vaciar el carrito

    Cada movimiento del carrito va acompañado del movimiento de stock
    inverso en el inventario; ninguno ocurre si la validación falla.
    """

    NOT_IN_INVENTORY = 'Product not found in inventory!'
    OUT_OF_STOCK = 'Product out of stock!'
    NOT_IN_CART = 'Product not found in cart!'
    EMPTY_CART = 'Cart is empty! Cannot generate invoice.'

    def __init__(self, inventory_service: InventoryService):
        """
        Inicializa el servicio de carrito.

        Args:
            inventory_service: Servicio de inventario
        """
        self.inventory_service = inventory_service

    def add_to_cart(self, cart: Cart, identifier: str) -> Dict[str, Any]:
        """
        Agrega una unidad del producto al carrito.

        Args:
            cart: Carrito de la sesión
            identifier: Código del producto

        Returns:
            Dict con resultado (ok, error o mensaje, total)
        """
        entry = self.inventory_service.find(identifier)
        if entry is None:
            return {'ok': False, 'error': self.NOT_IN_INVENTORY}

        if not entry.in_stock:
            return {'ok': False, 'error': self.OUT_OF_STOCK}

        # El snapshot se toma antes de descontar el stock
        cart.add_entry(entry)
        self.inventory_service.adjust_stock(identifier, -1)

        return {
            'ok': True,
            'mensaje': 'Product added to cart successfully!',
            'total': cart.total,
        }

    def remove_from_cart(self, cart: Cart, identifier: str) -> Dict[str, Any]:
        """
        Quita una unidad del producto del carrito y la devuelve al stock.

        Returns:
            Dict con resultado (ok, error o mensaje, total)
        """
        if not cart.remove_entry(identifier):
            return {'ok': False, 'error': self.NOT_IN_CART}

        restocked = self.inventory_service.adjust_stock(identifier, 1)

        return {
            'ok': True,
            'mensaje': 'Product removed from cart successfully!',
            'restocked': restocked,
            'total': cart.total,
        }

    def abandon(self, cart: Cart) -> int:
        """
        Devuelve al inventario todo lo que quedó en el carrito y lo vacía.
        Se usa cuando el cajero sale sin facturar.

        Returns:
            Cantidad de unidades devueltas al stock
        """
        returned = 0
        for entry in cart.entries:
            if self.inventory_service.adjust_stock(entry.identifier, 1):
                returned += 1
        cart.clear()
        return returned

    def checkout(self, cart: Cart, cashier: Operator) -> Dict[str, Any]:
        """
        Genera y renderiza la factura del carrito; después lo vacía.

        Args:
            cart: Carrito de la sesión
            cashier: Cajero que factura

        Returns:
            Dict con ok, invoice y text (factura renderizada),
            o error si el carrito está vacío
        """
        if cart.is_empty:
            return {'ok': False, 'error': self.EMPTY_CART}

        invoice = Invoice.from_cart(cart, cashier)
        text = invoice.render()
        # El carrito se vacía solo cuando la factura ya está impresa en texto
        cart.clear()

        return {
            'ok': True,
            'mensaje': 'Invoice generated successfully!',
            'invoice': invoice,
            'text': text,
        }
