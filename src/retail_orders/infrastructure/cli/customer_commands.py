"""CLI commands for the Customer entity."""

from __future__ import annotations

import click

from retail_orders.application.show_customer import ShowCustomerHandler
from retail_orders.domain.exceptions import DomainException
from retail_orders.infrastructure.bootstrap import customer_repository, order_repository


@click.command("show")
@click.option("--id", "customer_id", required=True, type=int, help="Customer ID to display.")
@click.pass_obj
def customer_show(obj: dict, customer_id: int) -> None:
    """Show a customer and a summary of their orders."""
    customers = customer_repository(obj.get("data_dir"))
    handler = ShowCustomerHandler(
        customer_repo=customers,
        order_repo=order_repository(obj.get("data_dir"), customers=customers),
    )

    try:
        dto = handler.handle(customer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer #{dto.id}  {dto.email}")
    click.echo(f"Address:  {dto.address}")
    click.echo(f"Orders:   {dto.order_count}")
    click.echo(f"Spent:    {dto.lifetime_total}")
