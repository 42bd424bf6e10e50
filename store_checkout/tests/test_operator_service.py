from werkzeug.security import generate_password_hash

from store_checkout.models.entities import Operator, OperatorRole
from store_checkout.services import OperatorService


def test_plaintext_credentials(operators):
    service = OperatorService(operators)
    admin = service.authenticate_admin('admin@store.com', 'admin123')
    assert admin is not None and admin.is_admin()
    assert service.authenticate_admin('admin@store.com', 'wrong') is None
    assert service.authenticate_cashier('demo_cashier', '1234').username == 'demo_cashier'
    assert service.authenticate_cashier('demo_cashier', '9999') is None


def test_roles_are_not_interchangeable(operators):
    service = OperatorService(operators)
    assert service.authenticate_cashier('admin@store.com', 'admin123') is None
    assert service.authenticate_admin('demo_cashier', '1234') is None


def test_hashed_secret():
    hashed = generate_password_hash('s3cret')
    service = OperatorService([Operator('boss@store.com', hashed, OperatorRole.ADMIN)])
    assert OperatorService.is_secret_hashed(hashed)
    assert service.authenticate_admin('boss@store.com', 's3cret') is not None
    assert service.authenticate_admin('boss@store.com', hashed) is None


def test_from_config_reads_environment(monkeypatch):
    monkeypatch.setenv('STORE_CASHIER_NAME', 'ana')
    monkeypatch.setenv('STORE_CASHIER_PIN', '4321')
    service = OperatorService.from_config()
    assert service.authenticate_cashier('ana', '4321') is not None
    assert service.authenticate_admin('admin@store.com', 'admin123') is not None
