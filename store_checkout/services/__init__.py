# ==============================================================================
# CAPA DE SERVICIOS - Lógica de negocio
# ==============================================================================
# Esta capa contiene TODA la lógica de negocio de la aplicación.
#
# PRINCIPIOS:
# 1. Los servicios orquestan operaciones entre repositorios
# 2. Aplican reglas de negocio y validaciones
# 3. Los menús (session.py) solo llaman a servicios
# 4. Los servicios NO conocen el formato del archivo
#
# ESTRUCTURA:
# ├── inventory_service.py → Catálogo, búsqueda, stock
# ├── cart_service.py      → Carrito, consistencia con stock, factura
# └── operator_service.py  → Credenciales de administrador y cajero
# ==============================================================================

from store_checkout.services.inventory_service import InventoryService
from store_checkout.services.cart_service import CartService
from store_checkout.services.operator_service import OperatorService

__all__ = [
    'InventoryService',
    'CartService',
    'OperatorService',
]
