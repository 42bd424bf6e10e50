"""Store checkout demo: flat-file catalog, cashier cart and invoices."""

__version__ = '1.0.0'
