# ==============================================================================
# MENSAJES DE CONSOLA
# ==============================================================================
# Mensajes operativos con etiqueta, una línea por evento:
#   [WARNING] ...  → stderr, el sistema sigue funcionando
#   [ERROR] ...    → stderr, la operación falló pero el menú continúa
# Los mensajes para el usuario (resultado de cada opción) van a stdout.
# ==============================================================================

import click


def info(message: str) -> None:
    click.echo(message)


def warning(message: str) -> None:
    click.echo(f"[WARNING] {message}", err=True)


def error(message: str) -> None:
    click.echo(f"[ERROR] {message}", err=True)
