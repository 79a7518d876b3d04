"""CLI principal (Typer + Rich).

Por qué aquí:
- La CLI solo construye componentes concretos, los inyecta y pinta resultados.
- Los errores de dominio (`SolidD2Error`) se capturan en este borde y nada más.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.caches import UserIdCache
from adapters.feed import HttpFeedRequester, JsonFeedParser, JsonFilePostStore
from adapters.fetcher import Fetcher
from adapters.product_network import ProductNetwork
from adapters.stores import JsonFileValueStore
from cli import doctor
from cli.ui_components import build_products_table, build_records_table, build_shapes_table, print_banner
from core.config import AppSettings
from core.domain.models import Alien, User
from core.domain.shapes import Rectangle, Square, total_area
from core.errors import SolidD2Error
from core.services.feed_sync import FeedSyncManager
from core.services.product_screen import ProductScreen

app = typer.Typer(no_args_is_help=True, help="SOLID design principles as small composable components.")
cache_app = typer.Typer(no_args_is_help=True, help="User id cache backed by the simple JSON store.")
app.add_typer(cache_app, name="cache")
app.command(name="doctor")(doctor.run)

_console = Console()
_err_console = Console(stderr=True)


class RecordKind(str, Enum):
    USERS = "users"
    ALIENS = "aliens"


_RECORD_TYPES = {
    RecordKind.USERS: User,
    RecordKind.ALIENS: Alien,
}


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _fail(exc: SolidD2Error) -> typer.Exit:
    _err_console.print(f"[red]Error:[/red] {exc}")
    return typer.Exit(code=1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
    banner: bool = typer.Option(False, "--banner", help="Print the welcome banner."),
) -> None:
    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)
    if banner:
        print_banner(_console)


@app.command()
def shapes(
    width: int = typer.Option(7, min=0, help="Rectangle width."),
    height: int = typer.Option(5, min=0, help="Rectangle height."),
    edge: int = typer.Option(5, min=0, help="Square edge."),
) -> None:
    """Compute areas through the shared `Geometric` contract."""

    items = [Rectangle(width=width, height=height), Square(edge=edge)]
    _console.print(build_shapes_table(items, total=total_area(items)))


@app.command()
def products(
    user_id: Optional[str] = typer.Argument(None, help="User whose products are listed."),
) -> None:
    """Load the product screen over the HTTP catalog."""

    settings = AppSettings()
    screen = ProductScreen(ProductNetwork(settings), user_id=user_id, settings=settings)
    try:
        loaded = asyncio.run(screen.load())
    except SolidD2Error as exc:
        raise _fail(exc) from exc
    _console.print(build_products_table(loaded, user_id=screen.user_id))


@app.command()
def fetch(
    kind: RecordKind = typer.Argument(..., help="Record kind to fetch."),
    url: Optional[str] = typer.Option(None, help="Override the endpoint."),
) -> None:
    """Fetch and decode records with the generic fetcher."""

    settings = AppSettings()
    fetcher = Fetcher(_RECORD_TYPES[kind], url=url, settings=settings)
    try:
        records = asyncio.run(fetcher.fetch())
    except SolidD2Error as exc:
        raise _fail(exc) from exc
    _console.print(build_records_table(records, title=f"{kind.value} ({fetcher.url})"))


@app.command()
def sync(
    output: Path = typer.Option(Path("reports") / "feed.json", "--output", "-o", help="Destination JSON file."),
    url: Optional[str] = typer.Option(None, help="Override the feed endpoint."),
) -> None:
    """Run request -> parse -> save over the social feed."""

    settings = AppSettings()
    manager = FeedSyncManager(
        HttpFeedRequester(url, settings=settings),
        JsonFeedParser(),
        JsonFilePostStore(output),
    )
    try:
        posts = asyncio.run(manager.create())
    except SolidD2Error as exc:
        raise _fail(exc) from exc
    _console.print(f"[green]Saved {len(posts)} posts to:[/green] {output}")


def _user_id_cache() -> UserIdCache:
    settings = AppSettings()
    return UserIdCache(JsonFileValueStore(settings.resolved_defaults_path()))


@cache_app.command(name="save-user-id")
def cache_save_user_id(value: str = typer.Argument(..., help="User id to remember.")) -> None:
    try:
        _user_id_cache().save(value.encode("utf-8"))
    except SolidD2Error as exc:
        raise _fail(exc) from exc
    _console.print(f"[green]Saved user id:[/green] {value}")


@cache_app.command(name="show")
def cache_show() -> None:
    try:
        user_id = _user_id_cache().retrieve_user_id()
    except SolidD2Error as exc:
        raise _fail(exc) from exc
    if user_id is None:
        _console.print("[yellow]No user id stored.[/yellow]")
        return
    _console.print(user_id)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
