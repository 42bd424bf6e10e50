# ==============================================================================
# ENTIDADES DEL DOMINIO - Definiciones de dataclasses
# ==============================================================================
# Cada entidad representa un concepto del negocio.
# Diseñadas para ser independientes del mecanismo de persistencia.
# Los montos se manejan con Decimal para que los totales no acumulen error.
# ==============================================================================

from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import List, Tuple

from store_checkout.formatting import format_money, render_entry_table


# ==============================================================================
# ENUMERACIONES
# ==============================================================================

class OperatorRole(str, Enum):
    """Roles de operador disponibles en el sistema."""
    ADMIN = "admin"
    CASHIER = "cashier"


# Separador de campos en el archivo de catálogo (sin escape)
FIELD_SEPARATOR = ','
FIELD_COUNT = 5

# Precio máximo admitido en catálogo y en la entrada de datos
MAX_PRICE = Decimal('99999999999.99')


class MalformedLineError(ValueError):
    """Una línea del archivo de catálogo no se puede interpretar."""


# ==============================================================================
# ENTIDADES DE OPERADOR
# ==============================================================================

@dataclass(frozen=True)
class Operator:
    """
    Registro fijo de un operador (administrador o cajero).

    Attributes:
        username: Email del administrador o nombre del cajero
        secret: Contraseña o PIN (texto plano o hash de werkzeug)
        role: Rol que define qué menú puede usar
    """
    username: str
    secret: str
    role: OperatorRole = OperatorRole.CASHIER

    def is_admin(self) -> bool:
        return self.role == OperatorRole.ADMIN


# ==============================================================================
# ENTIDADES DE CATÁLOGO
# ==============================================================================

@dataclass
class CatalogEntry:
    """
    Producto del catálogo.

    Attributes:
        name: Nombre visible del producto
        identifier: Código de barras (clave de búsqueda)
        price: Precio de lista
        discount_percent: Descuento entero entre 0 y 100
        stock: Unidades disponibles
    """
    name: str
    identifier: str
    price: Decimal = Decimal('0')
    discount_percent: int = 0
    stock: int = 0

    def __post_init__(self):
        if not isinstance(self.price, Decimal):
            self.price = Decimal(str(self.price))

    @property
    def final_price(self) -> Decimal:
        """Precio después de aplicar el descuento."""
        return self.price * (1 - Decimal(self.discount_percent) / 100)

    @property
    def in_stock(self) -> bool:
        return self.stock > 0

    def copy(self) -> 'CatalogEntry':
        """Copia independiente (snapshot) de esta entrada."""
        return replace(self)

    def to_line(self) -> str:
        """Convierte a una línea del archivo de catálogo."""
        return FIELD_SEPARATOR.join([
            self.name,
            self.identifier,
            str(self.price),
            str(self.discount_percent),
            str(self.stock),
        ])

    @classmethod
    def from_line(cls, line: str) -> 'CatalogEntry':
        """
        Crea instancia desde una línea del archivo de catálogo.

        Se separa desde la derecha: los últimos cuatro campos siempre son
        código, precio, descuento y stock; cualquier coma sobrante queda
        en el nombre.

        Raises:
            MalformedLineError: Si faltan campos o los números no son válidos
        """
        parts = line.rstrip('\r\n').rsplit(FIELD_SEPARATOR, FIELD_COUNT - 1)
        if len(parts) != FIELD_COUNT:
            raise MalformedLineError(f"expected {FIELD_COUNT} fields, got {len(parts)}")

        name, identifier, price_str, discount_str, stock_str = parts
        try:
            price = Decimal(price_str.strip())
            discount = int(discount_str.strip())
            stock = int(stock_str.strip())
        except (InvalidOperation, ValueError) as e:
            raise MalformedLineError(str(e)) from e

        if not price.is_finite() or not 0 <= price <= MAX_PRICE:
            raise MalformedLineError(f"invalid price {price_str!r}")
        if not 0 <= discount <= 100:
            raise MalformedLineError(f"invalid discount {discount_str!r}")
        if stock < 0:
            raise MalformedLineError(f"invalid stock {stock_str!r}")

        return cls(
            name=name,
            identifier=identifier.strip(),
            price=price,
            discount_percent=discount,
            stock=stock,
        )


# ==============================================================================
# ENTIDADES DE CARRITO
# ==============================================================================

@dataclass
class Cart:
    """
    Carrito de una sesión de caja.

    Guarda copias de las entradas del catálogo, no referencias: los cambios
    posteriores al catálogo no alteran lo que ya está en el carrito. El
    total se mantiene incrementalmente y siempre es igual a la suma de los
    precios finales del contenido.
    """
    _entries: List[CatalogEntry] = field(default_factory=list)
    _total: Decimal = Decimal('0')

    @property
    def entries(self) -> Tuple[CatalogEntry, ...]:
        return tuple(self._entries)

    @property
    def total(self) -> Decimal:
        return self._total

    @property
    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def add_entry(self, entry: CatalogEntry) -> None:
        """Agrega un snapshot de la entrada y suma su precio final."""
        snapshot = entry.copy()
        self._entries.append(snapshot)
        self._total += snapshot.final_price

    def remove_entry(self, identifier: str) -> bool:
        """
        Elimina el primer snapshot con ese código.

        Returns:
            True si se eliminó, False si no estaba en el carrito
        """
        for index, entry in enumerate(self._entries):
            if entry.identifier == identifier:
                del self._entries[index]
                self._total -= entry.final_price
                return True
        return False

    def clear(self) -> None:
        self._entries.clear()
        self._total = Decimal('0')

    def render(self) -> str:
        """Vista del carrito actual con su total."""
        lines = ["", "============= Current Cart ============="]
        lines.extend(render_entry_table(self._entries, final_price=True))
        lines.append(f"Total: ${format_money(self._total)}")
        return "\n".join(lines)


# ==============================================================================
# ENTIDADES DE FACTURA
# ==============================================================================

@dataclass(frozen=True)
class Invoice:
    """
    Factura inmutable de un carrito en un momento dado.

    Attributes:
        entries: Copias de los productos facturados
        total: Total del carrito al facturar
        cashier: Nombre del cajero
        created_at: Momento de creación
    """
    entries: Tuple[CatalogEntry, ...]
    total: Decimal
    cashier: str
    created_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def from_cart(cls, cart: Cart, cashier: Operator) -> 'Invoice':
        """
        Crea la factura desde un carrito no vacío.

        Raises:
            ValueError: Si el carrito está vacío
        """
        if cart.is_empty:
            raise ValueError("cannot build an invoice from an empty cart")
        return cls(
            entries=tuple(e.copy() for e in cart.entries),
            total=cart.total,
            cashier=cashier.username,
        )

    def render(self) -> str:
        """Texto de la factura; misma salida en cada llamada."""
        lines = [
            "",
            "=================== INVOICE ===================",
            f"Date: {self.created_at.strftime('%a %b %d %H:%M:%S %Y')}",
            f"Cashier: {self.cashier}",
            "",
            "Products:",
        ]
        lines.extend(render_entry_table(self.entries, final_price=True))
        lines.append(f"Total: ${format_money(self.total)}")
        lines.append("=" * 45)
        return "\n".join(lines)
