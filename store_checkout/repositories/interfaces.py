# ==============================================================================
# INTERFACES DE REPOSITORIOS
# ==============================================================================
#
# Los servicios dependen de estos protocolos, no de la clase concreta.
# Esto permite:
#
# 1. INDEPENDENCIA DE ALMACENAMIENTO
#    - Cambiar el archivo plano por otro formato solo requiere otra clase
#
# 2. TESTING
#    - Fácil crear repositorios en memoria que implementen el protocolo
#
# ==============================================================================

from typing import List, Protocol, runtime_checkable

from store_checkout.models.entities import CatalogEntry


@runtime_checkable
class ICatalogRepository(Protocol):
    """
    Interfaz del repositorio de catálogo.
    """

    def load(self) -> List[CatalogEntry]:
        """Lee el catálogo completo."""
        ...

    def save(self, entries: List[CatalogEntry]) -> bool:
        """Reescribe el catálogo completo. False si no se pudo guardar."""
        ...
