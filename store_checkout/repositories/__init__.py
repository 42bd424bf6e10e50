# ==============================================================================
# CAPA DE REPOSITORIOS - Acceso a datos
# ==============================================================================
# Esta capa encapsula todo el acceso a la persistencia (archivo de texto).
#
# ESTRUCTURA:
# ├── interfaces.py          → Protocolos (contratos para los servicios)
# ├── base.py                → Clase base de lectura/escritura de líneas
# └── catalog_repository.py  → Acceso a inventory.txt
# ==============================================================================

from .interfaces import ICatalogRepository
from .base import BaseRepository
from .catalog_repository import CatalogRepository

__all__ = [
    'ICatalogRepository',
    'BaseRepository',
    'CatalogRepository',
]
