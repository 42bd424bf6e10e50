# ==============================================================================
# CAPA DE MODELOS - Estructuras de datos del sistema
# ==============================================================================
# Este módulo define todas las entidades del dominio usando dataclasses.
# Independientes del mecanismo de persistencia.
# ==============================================================================

from .entities import (
    # Operadores
    Operator,
    OperatorRole,

    # Catálogo
    CatalogEntry,
    MalformedLineError,

    # Carrito y factura
    Cart,
    Invoice,
)

__all__ = [
    'Operator',
    'OperatorRole',
    'CatalogEntry',
    'MalformedLineError',
    'Cart',
    'Invoice',
]
