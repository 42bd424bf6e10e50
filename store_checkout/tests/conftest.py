from decimal import Decimal

import pytest

from store_checkout.app_container import AppContainer
from store_checkout.models.entities import CatalogEntry, Operator, OperatorRole
from store_checkout.repositories import CatalogRepository


@pytest.fixture
def catalog_path(tmp_path):
    return str(tmp_path / 'inventory.txt')


@pytest.fixture
def widget():
    return CatalogEntry('Widget', 'W1', Decimal('10.00'), 10, 2)


@pytest.fixture
def operators():
    return [
        Operator('admin@store.com', 'admin123', OperatorRole.ADMIN),
        Operator('demo_cashier', '1234', OperatorRole.CASHIER),
    ]


@pytest.fixture
def container(catalog_path, operators):
    return AppContainer(catalog_path=catalog_path, operators=operators)


@pytest.fixture
def reload_catalog(catalog_path):
    """Lee el archivo con un repositorio nuevo (sin estado en memoria)."""
    return lambda: CatalogRepository(catalog_path).load()
