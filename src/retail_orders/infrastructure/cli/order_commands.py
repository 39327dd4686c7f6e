"""CLI commands for the Order entity."""

from __future__ import annotations

import click

from retail_orders.application.dto import OrderDTO
from retail_orders.application.list_orders import ListOrdersHandler
from retail_orders.application.show_order import ShowOrderHandler
from retail_orders.domain.exceptions import DomainException
from retail_orders.domain.model.order import FulfillmentStatus
from retail_orders.infrastructure.bootstrap import order_repository


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: #{dto.customer_id} {dto.customer_email}")
    click.echo()
    click.echo(f"  {'Product':<30} {'Price':>10}")
    click.echo(f"  {'-'*41}")
    for item in dto.items:
        click.echo(f"  {item.product_name:<30} {item.unit_price:>10}")
    click.echo(f"  {'-'*41}")
    click.echo(f"  {'Subtotal':<30} {dto.subtotal:>10}")
    click.echo(f"  {'Tax':<30} {dto.tax:>10}")
    click.echo(f"  {'Order Total':<30} {dto.total:>10}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(obj: dict, order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository(obj.get("data_dir")))

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option("--customer", "customer_id", type=int, default=None, help="Only this customer's orders.")
@click.option(
    "--status",
    type=click.Choice([s.value for s in FulfillmentStatus]),
    default=None,
    help="Only orders in this fulfillment status.",
)
@click.pass_obj
def order_list(obj: dict, customer_id: int | None, status: str | None) -> None:
    """List orders in file order."""
    handler = ListOrdersHandler(order_repo=order_repository(obj.get("data_dir")))

    try:
        dtos = handler.handle(
            customer_id=customer_id,
            status=FulfillmentStatus(status) if status else None,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dtos:
        click.echo("No orders found.")
        return

    click.echo(f"  {'ID':>5} {'Customer':>8} {'Status':<12} {'Items':>5} {'Total':>10}")
    click.echo(f"  {'-'*44}")
    for dto in dtos:
        click.echo(
            f"  {dto.id:>5} {dto.customer_id:>8} {dto.status:<12} {len(dto.items):>5} {dto.total:>10}"
        )
