# ==============================================================================
# PUNTO DE ENTRADA - Comando de terminal
# ==============================================================================
# Uso:
#   store-checkout
#   store-checkout --catalog /ruta/al/inventory.txt
#   python -m store_checkout
#
# El catálogo se carga una sola vez al arrancar; cada cambio lo reescribe.
# ==============================================================================

import click

from store_checkout import config
from store_checkout.app_container import AppContainer
from store_checkout.session import SessionController


@click.command()
@click.option(
    '--catalog', 'catalog_path',
    type=click.Path(dir_okay=False),
    envvar=config.CATALOG_FILE_ENV,
    default=None,
    help=f'Catalog file (default: ./{config.CATALOG_FILENAME}).',
)
def cli(catalog_path):
    """Store checkout: catalog administration and cashier invoices."""
    container = AppContainer(catalog_path=catalog_path)
    SessionController(container).run()


if __name__ == '__main__':
    cli()
