"""CLI for the e-chalupy.cz tool server."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import get_log_level, load_config
from .errors import ChalupyError
from .server import ToolServer
from .service import ChalupyService

app = typer.Typer(
    name="chalupy",
    help="Search vacation rentals on e-chalupy.cz, or serve the search tools over JSON-RPC.",
)
console = Console()
# stdout carries the protocol in `serve`, so logs always go to stderr
err_console = Console(stderr=True)


def _setup(config_path: Optional[Path]) -> ChalupyService:
    cfg = load_config(config_path)
    logging.basicConfig(
        level=get_log_level(cfg),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True, show_path=False)],
    )
    return ChalupyService(config=cfg)


def _fail(exc: ChalupyError) -> None:
    err_console.print(f"[red]{exc}[/red]")
    raise typer.Exit(1)


ConfigOption = typer.Option(None, "--config", "-c", help="Path to config.yaml")


@app.command()
def serve(config_path: Optional[Path] = ConfigOption) -> None:
    """Serve the tools as newline-delimited JSON-RPC on stdin/stdout."""
    service = _setup(config_path)
    try:
        ToolServer(service).serve()
    finally:
        service.close()


@app.command()
def search(
    query: Optional[str] = typer.Option(None, "--query", "-q", help="Text to look for in title, description or location"),
    region: Optional[str] = typer.Option(None, "--region", "-r", help="Region slug, e.g. krkonose"),
    features: Optional[list[str]] = typer.Option(None, "--feature", "-f", help="Feature slug (repeatable)"),
    persons: Optional[int] = typer.Option(None, "--persons", "-p", help="Minimum capacity"),
    date_from: Optional[str] = typer.Option(None, "--from", help="Stay start, YYYY-MM-DD"),
    date_to: Optional[str] = typer.Option(None, "--to", help="Stay end, YYYY-MM-DD"),
    price_min: Optional[float] = typer.Option(None, "--price-min", help="Minimum price (CZK)"),
    price_max: Optional[float] = typer.Option(None, "--price-max", help="Maximum price (CZK)"),
    limit: int = typer.Option(10, "--limit", "-n", help="Max results (<= 100)"),
    config_path: Optional[Path] = ConfigOption,
) -> None:
    """Search listings and print them as a table."""
    service = _setup(config_path)
    params = {
        "query": query,
        "region": region,
        "features": features or None,
        "persons": persons,
        "dateFrom": date_from,
        "dateTo": date_to,
        "priceMin": price_min,
        "priceMax": price_max,
        "maxResults": limit,
    }
    try:
        listings = service.search_listings(params)
    except ChalupyError as e:
        _fail(e)
    finally:
        service.close()

    if not listings:
        console.print("[yellow]No listings found.[/yellow]")
        return

    table = Table(title=f"Listings ({len(listings)})")
    table.add_column("#", style="dim")
    table.add_column("Title", style="cyan")
    table.add_column("Location")
    table.add_column("Price", justify="right")
    table.add_column("Rating", justify="center")
    table.add_column("URL", style="dim")
    for i, l in enumerate(listings, 1):
        title = l.title[:40] + "..." if len(l.title) > 40 else l.title
        table.add_row(str(i), title, l.location, l.price, l.rating or "", l.url)
    console.print(table)


@app.command()
def detail(
    url: str = typer.Argument(..., help="Listing URL on e-chalupy.cz"),
    config_path: Optional[Path] = ConfigOption,
) -> None:
    """Show details of one listing."""
    service = _setup(config_path)
    try:
        d = service.get_listing_details(url)
    except ChalupyError as e:
        _fail(e)
    finally:
        service.close()

    console.print(f"[bold cyan]{d.title}[/bold cyan]")
    console.print(f"{d.location}  |  {d.price}  |  rating: {d.rating or '-'}")
    console.print(f"capacity: {d.capacity if d.capacity is not None else '-'}  "
                  f"bedrooms: {d.bedrooms if d.bedrooms is not None else '-'}")
    if d.tags:
        console.print(f"[dim]tags: {', '.join(d.tags)}[/dim]")
    console.print()
    console.print(d.full_description or "[dim](no description)[/dim]")
    if d.equipment:
        table = Table(title="Equipment")
        table.add_column("Category", style="cyan")
        table.add_column("Items")
        for category, items in d.equipment.items():
            table.add_row(category, ", ".join(items))
        console.print(table)


def _catalog_table(title: str, entries: list) -> None:
    if not entries:
        console.print(f"[yellow]No {title.lower()} found.[/yellow]")
        return
    table = Table(title=title)
    table.add_column("Slug", style="cyan")
    table.add_column("Name")
    table.add_column("Listings", justify="right")
    for e in entries:
        table.add_row(e.slug, e.name, str(e.count))
    console.print(table)


@app.command()
def regions(config_path: Optional[Path] = ConfigOption) -> None:
    """List region slugs usable with --region."""
    service = _setup(config_path)
    try:
        entries = service.list_regions()
    except ChalupyError as e:
        _fail(e)
    finally:
        service.close()
    _catalog_table("Regions", entries)


@app.command()
def features(config_path: Optional[Path] = ConfigOption) -> None:
    """List feature slugs usable with --feature."""
    service = _setup(config_path)
    try:
        entries = service.list_features()
    except ChalupyError as e:
        _fail(e)
    finally:
        service.close()
    _catalog_table("Features", entries)


if __name__ == "__main__":
    app()
