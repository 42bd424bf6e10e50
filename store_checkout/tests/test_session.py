from decimal import Decimal

import pytest
from click.testing import CliRunner

from store_checkout.main import cli
from store_checkout.repositories import CatalogRepository

ADMIN_LOGIN = ['1', 'admin@store.com', 'admin123']
CASHIER_LOGIN = ['2', 'demo_cashier', '1234']
EXIT = ['3']


@pytest.fixture
def run(catalog_path):
    runner = CliRunner()

    def _run(*steps):
        lines = [line for step in steps for line in step]
        return runner.invoke(cli, ['--catalog', catalog_path], input='\n'.join(lines) + '\n')
    return _run


@pytest.fixture
def stocked(catalog_path, widget):
    CatalogRepository(catalog_path).save([widget])


def read_catalog(path):
    with open(path, encoding='utf-8') as f:
        return f.read()


def test_exit(run):
    result = run(EXIT)
    assert result.exit_code == 0
    assert 'Store Management System' in result.output
    assert 'Thank you for using our system!' in result.output


def test_invalid_choice(run):
    result = run(['9'], EXIT)
    assert result.exit_code == 0
    assert 'Invalid choice!' in result.output


def test_bad_credentials_return_to_main_menu(run):
    result = run(['1', 'admin@store.com', 'nope'], ['2', 'demo_cashier', '0000'], EXIT)
    assert result.exit_code == 0
    assert result.output.count('Invalid credentials!') == 2
    assert 'Administrator Menu' not in result.output
    assert 'Cashier Menu' not in result.output


def test_admin_adds_product(run, catalog_path):
    result = run(
        ADMIN_LOGIN,
        ['1', 'Widget Deluxe', 'W1', 'abc', '10.00', '10', '2'],
        ['4', '5'],
        EXIT,
    )
    assert result.exit_code == 0
    assert 'Product added successfully!' in result.output
    assert 'Widget Deluxe' in result.output
    assert read_catalog(catalog_path) == 'Widget Deluxe,W1,10.00,10,2\n'


def test_admin_price_above_limit_is_reprompted(run, catalog_path):
    result = run(
        ADMIN_LOGIN,
        ['1', 'Yacht', 'Y1', '1E+27', '10.00', '0', '1'],
        ['5'],
        EXIT,
    )
    assert result.exit_code == 0
    assert 'price cannot exceed' in result.output
    assert read_catalog(catalog_path) == 'Yacht,Y1,10.00,0,1\n'


def test_admin_modifies_product(run, stocked, catalog_path):
    result = run(ADMIN_LOGIN, ['2', 'W1', 'Widget', '20.00', '0', '5'], ['2', 'NOPE'], ['5'], EXIT)
    assert result.exit_code == 0
    assert 'Product modified successfully!' in result.output
    assert 'Product not found in inventory!' in result.output
    assert read_catalog(catalog_path) == 'Widget,W1,20.00,0,5\n'


def test_admin_removes_product(run, stocked, catalog_path):
    result = run(ADMIN_LOGIN, ['3', 'W1'], ['3', 'W1'], ['5'], EXIT)
    assert result.exit_code == 0
    assert 'Product removed successfully!' in result.output
    assert 'Product not found in inventory!' in result.output
    assert read_catalog(catalog_path) == ''


def test_cashier_checkout(run, stocked, catalog_path):
    result = run(
        CASHIER_LOGIN,
        ['1', 'W1', '1', 'W1', '1', 'W1'],
        ['3', '5', '3', '6'],
        EXIT,
    )
    assert result.exit_code == 0
    assert result.output.count('Product added to cart successfully!') == 2
    assert 'Product out of stock!' in result.output
    assert 'INVOICE' in result.output
    assert 'Cashier: demo_cashier' in result.output
    assert 'Total: $18.00' in result.output
    assert 'Invoice generated successfully!' in result.output
    # Después de facturar el carrito queda vacío
    assert result.output.count('Total: $0.00') == 1
    assert CatalogRepository(catalog_path).load()[0].stock == 0


def test_cashier_empty_checkout(run, stocked):
    result = run(CASHIER_LOGIN, ['5', '6'], EXIT)
    assert result.exit_code == 0
    assert 'Cart is empty! Cannot generate invoice.' in result.output
    assert 'INVOICE' not in result.output


def test_cashier_remove_and_leave(run, stocked, catalog_path):
    result = run(
        CASHIER_LOGIN,
        ['1', 'W1', '2', 'X9', '2', 'W1', '1', 'W1', '6'],
        EXIT,
    )
    assert result.exit_code == 0
    assert 'Product not found in cart!' in result.output
    assert 'Product removed from cart successfully!' in result.output
    assert '1 item(s) returned to inventory.' in result.output

    entry = CatalogRepository(catalog_path).load()[0]
    assert entry.stock == 2
    assert entry.final_price == Decimal('9.00')


def test_starts_with_non_utf8_catalog(run, catalog_path):
    with open(catalog_path, 'wb') as f:
        f.write(b'Caf\xe9,C1,2.50,0,3\nWidget,W1,10.00,10,2\n')

    result = run(CASHIER_LOGIN, ['4', '6'], EXIT)
    assert result.exit_code == 0
    assert 'not valid UTF-8' in result.output
    assert 'Widget' in result.output
    assert 'Thank you for using our system!' in result.output
