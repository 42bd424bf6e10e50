# ==============================================================================
# REPOSITORIO DE CATÁLOGO
# ==============================================================================
# Encapsula todo el acceso a inventory.txt
# Una línea por producto: nombre,código,precio,descuento,stock
# ==============================================================================

from typing import List

from store_checkout import console
from store_checkout.models.entities import CatalogEntry, MalformedLineError
from store_checkout.repositories.base import BaseRepository


class CatalogRepository(BaseRepository):
    """
    Repositorio del catálogo de productos.

    Formato de inventory.txt:

        Widget,W1,10.00,10,2
        Gadget,G7,4.50,0,12

    No hay escape de comas; al leer se separa desde la derecha, así que
    un nombre con comas sobrevive a la ida y vuelta.
    """

    def _empty_data(self) -> List[CatalogEntry]:
        return []

    def load(self) -> List[CatalogEntry]:
        """
        Carga el catálogo completo.
        Un archivo ilegible equivale a un catálogo vacío; las líneas mal
        formadas se omiten con una advertencia.

        Returns:
            Lista de entradas en el orden del archivo
        """
        lines = self._read_lines()
        if lines is None:
            return self._empty_data()

        entries = []
        for number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                entries.append(CatalogEntry.from_line(line))
            except MalformedLineError as e:
                console.warning(f"{self.file_path}:{number} skipped ({e})")
        return entries

    def save(self, entries: List[CatalogEntry]) -> bool:
        """
        Guarda el catálogo completo (reemplazo total del archivo).

        Args:
            entries: Todas las entradas, en orden

        Returns:
            True si se escribió el archivo
        """
        return self._write_lines([entry.to_line() for entry in entries])
