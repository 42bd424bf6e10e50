# ==============================================================================
# SERVICIO DE OPERADORES
# ==============================================================================
# Autenticación de administradores y cajeros contra registros fijos.
# ==============================================================================

from typing import Iterable, List, Optional

from werkzeug.security import check_password_hash

from store_checkout import config
from store_checkout.models.entities import Operator, OperatorRole


HASH_PREFIXES = ('pbkdf2:', 'scrypt:')


class OperatorService:
    """
    Servicio de credenciales.

    Los registros se comparan por igualdad. Un secreto guardado como hash
    de werkzeug (pbkdf2:/scrypt:) se verifica con check_password_hash.
    No hay bloqueo ni límite de reintentos.
    """

    def __init__(self, operators: Iterable[Operator]):
        self.operators: List[Operator] = list(operators)

    @classmethod
    def from_config(cls) -> 'OperatorService':
        """Crea el servicio con el administrador y el cajero configurados."""
        admin_email, admin_password = config.admin_credentials()
        cashier_name, cashier_pin = config.cashier_credentials()
        return cls([
            Operator(admin_email, admin_password, OperatorRole.ADMIN),
            Operator(cashier_name, cashier_pin, OperatorRole.CASHIER),
        ])

    @staticmethod
    def is_secret_hashed(secret: str) -> bool:
        return secret.startswith(HASH_PREFIXES)

    def _verify(self, operator: Operator, secret: str) -> bool:
        # Soportar tanto hash como texto plano
        if self.is_secret_hashed(operator.secret):
            return check_password_hash(operator.secret, secret)
        return operator.secret == secret

    def _authenticate(self, role: OperatorRole, username: str, secret: str) -> Optional[Operator]:
        for operator in self.operators:
            if operator.role == role and operator.username == username:
                if self._verify(operator, secret):
                    return operator
        return None

    def authenticate_admin(self, email: str, password: str) -> Optional[Operator]:
        """
        Autentica un administrador por email y contraseña.

        Returns:
            El operador si las credenciales coinciden, None si no
        """
        return self._authenticate(OperatorRole.ADMIN, email, password)

    def authenticate_cashier(self, name: str, pin: str) -> Optional[Operator]:
        """
        Autentica un cajero por nombre y PIN.

        Returns:
            El operador si las credenciales coinciden, None si no
        """
        return self._authenticate(OperatorRole.CASHIER, name, pin)
