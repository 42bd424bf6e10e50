# ==============================================================================
# CONTENEDOR DE DEPENDENCIAS - Inyección de servicios
# ==============================================================================
# Este módulo proporciona una forma centralizada de obtener instancias
# de repositorios y servicios. Facilita:
#   - Inyección de dependencias
#   - Testing (se puede pasar otro repositorio u otros operadores)
#
# No hay estado global: main.py crea un contenedor por proceso y lo pasa
# al controlador de sesión.
# ==============================================================================

from typing import Iterable, Optional

from store_checkout import config
from store_checkout.models.entities import Operator
from store_checkout.repositories import CatalogRepository, ICatalogRepository
from store_checkout.services import CartService, InventoryService, OperatorService


class AppContainer:
    """
    Contenedor de dependencias de la aplicación.

    Uso:
        container = AppContainer(catalog_path='/path/to/inventory.txt')
        inventory_service = container.inventory_service
        cart_service = container.cart_service
    """

    def __init__(
        self,
        catalog_path: Optional[str] = None,
        catalog_repo: Optional[ICatalogRepository] = None,
        operators: Optional[Iterable[Operator]] = None
    ):
        """
        Inicializa el contenedor.

        Args:
            catalog_path: Ruta del archivo de catálogo
            catalog_repo: Repositorio ya construido (reemplaza catalog_path)
            operators: Registros de operadores (por defecto, los de config)
        """
        self._catalog_path = catalog_path or config.default_catalog_path()
        self._operators = operators

        # Inicialización diferida
        self._catalog_repo: Optional[ICatalogRepository] = catalog_repo
        self._inventory_service: Optional[InventoryService] = None
        self._cart_service: Optional[CartService] = None
        self._operator_service: Optional[OperatorService] = None

    # =========================================================================
    # REPOSITORIOS
    # =========================================================================

    @property
    def catalog_repo(self) -> ICatalogRepository:
        """Repositorio del catálogo (una instancia por contenedor)."""
        if self._catalog_repo is None:
            self._catalog_repo = CatalogRepository(self._catalog_path)
        return self._catalog_repo

    # =========================================================================
    # SERVICIOS
    # =========================================================================

    @property
    def inventory_service(self) -> InventoryService:
        """Servicio de inventario; carga el catálogo en el primer acceso."""
        if self._inventory_service is None:
            self._inventory_service = InventoryService(self.catalog_repo)
        return self._inventory_service

    @property
    def cart_service(self) -> CartService:
        if self._cart_service is None:
            self._cart_service = CartService(self.inventory_service)
        return self._cart_service

    @property
    def operator_service(self) -> OperatorService:
        if self._operator_service is None:
            if self._operators is None:
                self._operator_service = OperatorService.from_config()
            else:
                self._operator_service = OperatorService(self._operators)
        return self._operator_service
