# ==============================================================================
# SERVICIO DE INVENTARIO
# ==============================================================================
# Catálogo autoritativo en memoria. Cada operación que modifica el catálogo
# termina con una reescritura completa del archivo.
# ==============================================================================

from typing import List, Optional

from store_checkout.formatting import render_entry_table
from store_checkout.models.entities import CatalogEntry
from store_checkout.repositories.interfaces import ICatalogRepository


class InventoryService:
    """
    Servicio para gestión del inventario.

    Responsabilidades:
    - Alta, baja y modificación de productos
    - Búsqueda por código de barras
    - Movimientos de stock (entradas y salidas de a una unidad)

    No se valida unicidad del código: si hay duplicados, toda búsqueda
    resuelve a la primera coincidencia en orden de inserción.
    """

    def __init__(self, catalog_repo: ICatalogRepository):
        """
        Inicializa el servicio y carga el catálogo.

        Args:
            catalog_repo: Repositorio del catálogo
        """
        self.catalog_repo = catalog_repo
        self._entries: List[CatalogEntry] = catalog_repo.load()

    def _index_of(self, identifier: str) -> Optional[int]:
        for index, entry in enumerate(self._entries):
            if entry.identifier == identifier:
                return index
        return None

    def _persist(self) -> bool:
        return self.catalog_repo.save(self._entries)

    # =========================================================================
    # OPERACIONES DE PRODUCTOS
    # =========================================================================

    def add(self, entry: CatalogEntry) -> None:
        """Agrega un producto al final del catálogo."""
        self._entries.append(entry)
        self._persist()

    def remove(self, identifier: str) -> bool:
        """
        Elimina el primer producto con ese código.
        El archivo se reescribe aunque no se haya eliminado nada.

        Returns:
            True si se eliminó un producto
        """
        index = self._index_of(identifier)
        if index is not None:
            del self._entries[index]
        self._persist()
        return index is not None

    def modify(self, identifier: str, new_entry: CatalogEntry) -> bool:
        """
        Reemplaza los datos del primer producto con ese código.

        Args:
            identifier: Código del producto a modificar
            new_entry: Nuevos datos

        Returns:
            True si el producto existía
        """
        current = self.find(identifier)
        if current is not None:
            current.name = new_entry.name
            current.identifier = new_entry.identifier
            current.price = new_entry.price
            current.discount_percent = new_entry.discount_percent
            current.stock = new_entry.stock
        self._persist()
        return current is not None

    def find(self, identifier: str) -> Optional[CatalogEntry]:
        """
        Busca un producto por código.

        Returns:
            La entrada viva del catálogo, o None si no existe
        """
        index = self._index_of(identifier)
        return None if index is None else self._entries[index]

    def list(self) -> List[CatalogEntry]:
        """Todas las entradas, en orden. La lista es una copia."""
        return list(self._entries)

    # =========================================================================
    # OPERACIONES DE STOCK
    # =========================================================================

    def adjust_stock(self, identifier: str, delta: int) -> bool:
        """
        Suma (o resta) unidades al stock del producto.

        Args:
            identifier: Código del producto
            delta: Cambio en cantidad (positivo o negativo)

        Returns:
            False si el producto no existe o el stock quedaría negativo
        """
        entry = self.find(identifier)
        if entry is None or entry.stock + delta < 0:
            return False
        entry.stock += delta
        self._persist()
        return True

    def render(self) -> str:
        """Vista del inventario actual."""
        lines = ["", "============= Current Inventory ============="]
        lines.extend(render_entry_table(self._entries))
        return "\n".join(lines)
