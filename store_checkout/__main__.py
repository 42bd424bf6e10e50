from store_checkout.main import cli

cli(prog_name='store-checkout')
