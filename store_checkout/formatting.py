# ==============================================================================
# FORMATO DE TABLAS - Inventario, carrito y factura
# ==============================================================================
# Las tres vistas comparten el mismo ancho de columnas para que la salida
# en terminal quede alineada.
# ==============================================================================

from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Iterable, List

from store_checkout.config import (
    NAME_WIDTH,
    PRICE_WIDTH,
    DISCOUNT_WIDTH,
    STOCK_WIDTH,
    FINAL_PRICE_WIDTH,
    SEPARATOR_WIDTH,
)

CENTS = Decimal('0.01')


def format_money(amount: Decimal) -> str:
    """Monto con dos decimales fijos."""
    amount = Decimal(amount)
    with localcontext() as ctx:
        # quantize necesita precisión para todos los dígitos enteros más los centavos
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return str(amount.quantize(CENTS, rounding=ROUND_HALF_UP))


def separator() -> str:
    return '-' * SEPARATOR_WIDTH


def render_entry_table(entries: Iterable, final_price: bool = False) -> List[str]:
    """
    Genera las líneas de una tabla de productos.

    Args:
        entries: Entradas de catálogo a mostrar
        final_price: True muestra la columna de precio final (carrito,
            factura); False muestra el stock (inventario)

    Returns:
        Lista de líneas: encabezado, separador, filas y separador final
    """
    last_header = 'Final Price' if final_price else 'Stock'
    last_width = FINAL_PRICE_WIDTH if final_price else STOCK_WIDTH

    lines = [
        f"{'Name':<{NAME_WIDTH}}{'Price':>{PRICE_WIDTH}}"
        f"{'Discount':>{DISCOUNT_WIDTH}}{last_header:>{last_width}}",
        separator(),
    ]
    for entry in entries:
        last_value = format_money(entry.final_price) if final_price else str(entry.stock)
        lines.append(
            f"{entry.name:<{NAME_WIDTH}}"
            f"{format_money(entry.price):>{PRICE_WIDTH}}"
            f"{entry.discount_percent:>{DISCOUNT_WIDTH}}%"
            f"{last_value:>{last_width}}"
        )
    lines.append(separator())
    return lines
