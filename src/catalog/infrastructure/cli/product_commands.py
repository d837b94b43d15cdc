"""CLI commands for the Product aggregate.

Each command drives the same list view-state and form controller a
graphical client would, against the API configured by CATALOG_API_URL.
"""

from __future__ import annotations

import asyncio
from typing import Optional

import click

from catalog.application.product_form import ProductFormController, SubmitResult
from catalog.application.product_list import (
    DEFAULT_PAGE_SIZE,
    PAGE_SIZE_OPTIONS,
    ProductListState,
)
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import product_service, settings
from catalog.infrastructure.cli.adapters import ClickNotifier, ConsoleNavigator


def _list_state(page_size: int = DEFAULT_PAGE_SIZE) -> ProductListState:
    return ProductListState(
        product_service(settings()),
        ConsoleNavigator(),
        ClickNotifier(),
        page_size=page_size,
    )


@click.command("list")
@click.option("--search", default="", help="Filter by ID, name or description.")
@click.option("--page", default=1, type=int, help="Page number to show.")
@click.option(
    "--page-size",
    default=str(DEFAULT_PAGE_SIZE),
    type=click.Choice([str(n) for n in PAGE_SIZE_OPTIONS]),
    help="Products per page.",
)
def product_list(search: str, page: int, page_size: str) -> None:
    """List products in the catalog."""
    state = _list_state(int(page_size))
    asyncio.run(state.load())
    if state.error:
        raise click.ClickException("Could not load products.")

    state.apply_search(search)
    state.go_to_page(page)

    if not state.paginated_products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<12} {'Name':<32} {'Release':<10} {'Revision':<10}")
    click.echo("-" * 67)
    for p in state.paginated_products:
        click.echo(
            f"{p.id:<12} {p.name[:32]:<32} {p.date_release.isoformat():<10} "
            f"{p.date_revision.isoformat():<10}"
        )
    click.echo("-" * 67)
    click.echo(
        f"{state.total_results} result(s)  page {state.current_page} of {state.total_pages}"
    )


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show one product."""
    try:
        product = asyncio.run(product_service(settings()).get_by_id(product_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for field, value in product.to_dict().items():
        click.echo(f"{field + ':':<15} {value}")


def _raise_for_result(form: ProductFormController, result: SubmitResult) -> None:
    if result is SubmitResult.SAVED:
        return
    if result is SubmitResult.FAILED:
        raise click.ClickException(form.operation_error or "Operation failed")
    for field, message in form.errors.items():
        click.echo(f"  {field}: {message}", err=True)
    raise click.ClickException("The product was not saved.")


async def _submit_new(form: ProductFormController, product_id: str, fields: dict, release: str) -> SubmitResult:
    form.on_id_change(product_id)
    for field, value in fields.items():
        form.on_field_change(field, value)
    form.on_date_release_change(release)
    return await form.submit()


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID (3-10 characters).")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", required=True, help="Product description.")
@click.option("--logo", required=True, help="Logo URL.")
@click.option("--date-release", required=True, help="Release date (YYYY-MM-DD).")
def product_add(product_id: str, name: str, description: str, logo: str, date_release: str) -> None:
    """Add a new product to the catalog."""
    form = ProductFormController(product_service(settings()), ConsoleNavigator())
    fields = {"name": name, "description": description, "logo": logo}

    try:
        result = asyncio.run(_submit_new(form, product_id, fields, date_release))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _raise_for_result(form, result)
    click.echo(
        f"Product '{form.draft.id}' added (revision due {form.draft.date_revision})"
    )


async def _submit_edit(form: ProductFormController, fields: dict, release: Optional[str]) -> Optional[SubmitResult]:
    if not await form.load():
        return None
    for field, value in fields.items():
        form.on_field_change(field, value)
    if release is not None:
        form.on_date_release_change(release)
    return await form.submit()


@click.command("edit")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
@click.option("--logo", default=None, help="New logo URL.")
@click.option("--date-release", default=None, help="New release date (YYYY-MM-DD).")
def product_edit(
    product_id: str,
    name: Optional[str],
    description: Optional[str],
    logo: Optional[str],
    date_release: Optional[str],
) -> None:
    """Edit an existing product."""
    form = ProductFormController(product_service(settings()), ConsoleNavigator(), product_id)
    fields = {
        k: v
        for k, v in {"name": name, "description": description, "logo": logo}.items()
        if v is not None
    }

    try:
        result = asyncio.run(_submit_edit(form, fields, date_release))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if result is None:
        raise click.ClickException(f"Product '{product_id}' could not be loaded.")
    _raise_for_result(form, result)
    click.echo(f"Product '{product_id}' updated")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.confirmation_option(prompt="Are you sure you want to delete this product?")
def product_delete(product_id: str) -> None:
    """Delete a product."""
    state = _list_state()
    state.open_delete(product_id)
    if not asyncio.run(state.confirm_delete()):
        raise click.exceptions.Exit(1)
    click.echo(f"Product '{product_id}' deleted")
