# ==============================================================================
# CONFIGURACIÓN - Constantes del sistema y variables de entorno
# ==============================================================================
# Los valores por defecto reproducen la tienda demo. Cada uno se puede
# sobrescribir con una variable de entorno antes de arrancar:
#
#   export STORE_CATALOG_FILE="/ruta/al/inventory.txt"
#   export STORE_ADMIN_PASSWORD="otra_clave"
#
# Los secretos pueden ser texto plano o un hash de werkzeug
# (generate_password_hash), ver OperatorService.
# ==============================================================================

import os

# ═══════════════════════════════════════════════════════════════════════════
# ARCHIVO DE CATÁLOGO
# ═══════════════════════════════════════════════════════════════════════════

CATALOG_FILENAME = 'inventory.txt'
CATALOG_FILE_ENV = 'STORE_CATALOG_FILE'


def default_catalog_path() -> str:
    """Ruta del catálogo: variable de entorno o inventory.txt en el cwd."""
    return os.environ.get(CATALOG_FILE_ENV) or os.path.join(os.getcwd(), CATALOG_FILENAME)


# ═══════════════════════════════════════════════════════════════════════════
# OPERADORES
# ═══════════════════════════════════════════════════════════════════════════

DEFAULT_ADMIN_EMAIL = 'admin@store.com'
DEFAULT_ADMIN_PASSWORD = 'admin123'
DEFAULT_CASHIER_NAME = 'demo_cashier'
DEFAULT_CASHIER_PIN = '1234'


def admin_credentials():
    return (
        os.environ.get('STORE_ADMIN_EMAIL', DEFAULT_ADMIN_EMAIL),
        os.environ.get('STORE_ADMIN_PASSWORD', DEFAULT_ADMIN_PASSWORD),
    )


def cashier_credentials():
    return (
        os.environ.get('STORE_CASHIER_NAME', DEFAULT_CASHIER_NAME),
        os.environ.get('STORE_CASHIER_PIN', DEFAULT_CASHIER_PIN),
    )


# ═══════════════════════════════════════════════════════════════════════════
# PRESENTACIÓN
# ═══════════════════════════════════════════════════════════════════════════

NAME_WIDTH = 30
PRICE_WIDTH = 15
DISCOUNT_WIDTH = 10
STOCK_WIDTH = 10
FINAL_PRICE_WIDTH = 15
SEPARATOR_WIDTH = 70
