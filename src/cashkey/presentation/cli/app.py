"""Cashkey CLI application using Typer.

Inspect, build and edit cash flow states straight from a share link or a
bare fragment, without a browser.
"""

import logging
import sys
from pathlib import Path

import typer
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cashkey.application.commands import (
    AddItemCommand,
    DeleteItemCommand,
    EditItemCommand,
)
from cashkey.application.queries import CashflowSummaryQuery, SankeyQuery
from cashkey.domain.cashflow import AmountPeriod, CashflowState, ItemKind, sample_state
from cashkey.domain.shared.exceptions import DomainException
from cashkey.infrastructure.codec import (
    UrlStateCodec,
    resolve_fragment,
    url_with_fragment,
)
from cashkey_config.settings import get_settings

app = typer.Typer(
    name="cashkey",
    help="Cashkey - cash flow Sankey diagrams stored in a link",
    no_args_is_help=True,
)
console = Console()
codec = UrlStateCodec()


def _log_level(verbose: bool) -> int:
    if verbose:
        return logging.DEBUG
    level = getattr(logging, get_settings().log_level.upper(), logging.INFO)
    return level if isinstance(level, int) else logging.INFO


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
) -> None:
    logging.basicConfig(
        level=_log_level(verbose),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _load_or_exit(value: str) -> CashflowState:
    state = codec.decode(resolve_fragment(value))
    if state is None:
        console.print("[red]Could not read a cash flow state from the input.[/red]")
        raise typer.Exit(code=1)
    return state


def _print_share(fragment: str) -> None:
    share_url = url_with_fragment(get_settings().public_base_url, fragment)
    console.print(f"[cyan]Fragment[/cyan]: {fragment}", soft_wrap=True)
    console.print(f"[cyan]Share URL[/cyan]: {share_url}", soft_wrap=True)


def _items_table(title: str, state: CashflowState, kind: ItemKind) -> Table:
    table = Table(title=title)
    table.add_column("ID", style="dim")
    table.add_column("Name")
    table.add_column("Amount", justify="right")
    table.add_column("VAT", justify="right")
    for item in state.items_of(kind):
        vat = f"{item.vat_amount:,}" if item.vat_included else ""
        table.add_row(item.id, escape(item.name), f"{item.amount:,}", vat)
    return table


@app.command("sample")
def show_sample() -> None:
    """Print a share link for the demo cash flow."""
    _print_share(codec.encode(sample_state()))


@app.command("decode")
def decode_state(
    value: str = typer.Argument(..., help="Share URL or bare fragment"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of tables"),
) -> None:
    """Show the items stored in a link."""
    state = _load_or_exit(value)
    if as_json:
        typer.echo(state.model_dump_json(by_alias=True, exclude_defaults=True, indent=2))
        return
    console.print(_items_table("Income", state, ItemKind.INCOME))
    console.print(_items_table("Expenses", state, ItemKind.EXPENSE))


@app.command("encode")
def encode_state(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON file"),
) -> None:
    """Encode a JSON file with ``incomes`` and ``expenses`` into a link."""
    try:
        state = CashflowState.model_validate_json(path.read_text(encoding="utf-8"))
    except PydanticValidationError as e:
        console.print(f"[red]Invalid cash flow file:[/red] {e.error_count()} errors")
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"])
            console.print(f"  [dim]{location}[/dim]: {error['msg']}")
        raise typer.Exit(code=1) from None
    _print_share(codec.encode(state))


@app.command("sankey")
def show_sankey(
    value: str = typer.Argument(..., help="Share URL or bare fragment"),
) -> None:
    """Print the Sankey nodes and links for a link."""
    result = SankeyQuery().execute(_load_or_exit(value))
    if result.is_empty():
        console.print("[yellow]Nothing to draw: no items.[/yellow]")
        return

    nodes = Table(title="Nodes")
    nodes.add_column("#", justify="right")
    nodes.add_column("Name")
    nodes.add_column("Category")
    nodes.add_column("Value", justify="right")
    nodes.add_column("%", justify="right")
    for idx, node in enumerate(result.nodes):
        percentage = "" if node.percentage is None else str(node.percentage)
        nodes.add_row(
            str(idx),
            escape(node.name),
            node.category.value,
            f"{node.value:,}",
            percentage,
        )

    links = Table(title="Links")
    links.add_column("From")
    links.add_column("To")
    links.add_column("Value", justify="right")
    for link in result.links:
        links.add_row(
            escape(result.nodes[link.source].name),
            escape(result.nodes[link.target].name),
            f"{link.value:,}",
        )

    console.print(nodes)
    console.print(links)


@app.command("summary")
def show_summary(
    value: str = typer.Argument(..., help="Share URL or bare fragment"),
) -> None:
    """Print income, VAT, expense and balance totals."""
    summary = CashflowSummaryQuery().execute(_load_or_exit(value))

    console.print(f"Income:   {summary.total_income:,}")
    if summary.has_vat:
        console.print(f"VAT:      {summary.vat_total:,}")
    console.print(f"Expenses: {summary.total_expense:,}")
    if summary.is_surplus:
        console.print(f"[green]Surplus:  {summary.balance:,}[/green]")
    else:
        console.print(f"[red]Deficit:  {abs(summary.balance):,}[/red]")


@app.command("add")
def add_item(  # NOQA: PLR0913
    value: str = typer.Argument(..., help="Share URL, bare fragment, or - to start empty"),
    name: str = typer.Argument(..., help="Item name"),
    amount: str = typer.Argument(..., help="Amount, separators are ignored"),
    expense: bool = typer.Option(False, "--expense", help="Add an expense"),
    monthly: bool = typer.Option(False, "--monthly", help="Amount is per month"),
    vat: bool = typer.Option(False, "--vat", help="Income amount includes VAT"),
) -> None:
    """Add an item and print the new link."""
    state = CashflowState.empty() if value == "-" else _load_or_exit(value)
    command = AddItemCommand(codec, vat_rate=get_settings().vat_rate)
    try:
        update = command.execute(
            state,
            kind=ItemKind.EXPENSE if expense else ItemKind.INCOME,
            name=name,
            amount=amount,
            period=AmountPeriod.MONTHLY if monthly else AmountPeriod.ANNUAL,
            vat_included=vat,
        )
    except DomainException as e:
        console.print(f"[red]{escape(e.message)}[/red]")
        raise typer.Exit(code=1) from None
    _print_share(update.fragment)


@app.command("edit")
def edit_item(  # NOQA: PLR0913
    value: str = typer.Argument(..., help="Share URL or bare fragment"),
    item_id: str = typer.Argument(..., help="ID of the item to edit"),
    name: str = typer.Argument(..., help="New item name"),
    amount: str = typer.Argument(..., help="New amount, gross when VAT is included"),
    vat: bool = typer.Option(False, "--vat", help="Amount includes VAT"),
    no_vat: bool = typer.Option(False, "--no-vat", help="Amount excludes VAT"),
) -> None:
    """Edit an item in place and print the new link.

    Without --vat or --no-vat the item keeps its current VAT setting.
    """
    if vat and no_vat:
        console.print("[red]Use either --vat or --no-vat, not both.[/red]")
        raise typer.Exit(code=1)

    state = _load_or_exit(value)
    vat_included = True if vat else (False if no_vat else None)
    command = EditItemCommand(codec, vat_rate=get_settings().vat_rate)
    try:
        update = command.execute(
            state,
            item_id=item_id,
            name=name,
            amount=amount,
            vat_included=vat_included,
        )
    except DomainException as e:
        console.print(f"[red]{escape(e.message)}[/red]")
        raise typer.Exit(code=1) from None
    _print_share(update.fragment)


@app.command("remove")
def remove_item(
    value: str = typer.Argument(..., help="Share URL or bare fragment"),
    item_id: str = typer.Argument(..., help="ID of the item to remove"),
) -> None:
    """Remove an item and print the new link."""
    state = _load_or_exit(value)
    try:
        update = DeleteItemCommand(codec).execute(state, item_id)
    except DomainException as e:
        console.print(f"[red]{escape(e.message)}[/red]")
        raise typer.Exit(code=1) from None
    _print_share(update.fragment)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
