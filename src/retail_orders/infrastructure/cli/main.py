import logging

import click

from retail_orders.infrastructure.cli.customer_commands import customer_show
from retail_orders.infrastructure.cli.order_commands import order_list, order_show

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=str),
    default=None,
    help="Directory holding orders.csv and customers.csv.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_dir: str | None, verbose: bool) -> None:
    """Retail Orders: browse orders and customers"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )
    ctx.ensure_object(dict)
    ctx.obj["data_dir"] = data_dir


@cli.group()
def order() -> None:
    """Browse orders."""


@cli.group()
def customer() -> None:
    """Browse customers."""


# Register subcommands
order.add_command(order_list)
order.add_command(order_show)
customer.add_command(customer_show)
