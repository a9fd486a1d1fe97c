import click

from shopcart.infrastructure.cli.cart_commands import cart_checkout, cart_demo, discount_codes
from shopcart.utils.logging import configure_logging


@click.group()
@click.option("--verbose", is_flag=True, help="Log domain events at DEBUG level.")
@click.option("--json-logs", is_flag=True, help="Render log events as JSON lines.")
def cli(verbose: bool, json_logs: bool) -> None:
    """shopcart — Shopping cart & checkout"""
    configure_logging(level="DEBUG" if verbose else "WARNING", json=json_logs)


# Register subcommands
cli.add_command(cart_checkout)
cli.add_command(cart_demo)
cli.add_command(discount_codes)
