"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

from rich.console import Console
from rich.table import Table

from adapters.http_client import get_bytes, parse_endpoint
from core.config import AppSettings, get_user_env_file
from core.errors import TransportFailure

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    parsed = parse_endpoint(url)
    if parsed is None:
        return False, f"Malformed URL: {url!r}"
    try:
        data = await get_bytes(parsed, settings=settings)
    except TransportFailure as exc:
        return False, str(exc)
    return True, f"{len(data)} bytes"


def run() -> None:
    """Run baseline diagnostics and show the effective configuration."""

    settings = AppSettings()

    table = Table(title="SOLID-D2 Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("User .env", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))
    table.add_row("API base_url", "OK", settings.api_base_url)
    table.add_row("Feed url", "OK", settings.feed_url)
    table.add_row("Defaults store", "OK", str(settings.resolved_defaults_path()))
    if settings.decode_failure_as_empty:
        table.add_row("Decode policy", "WARN", "Undecodable payloads are reported as empty lists")
    else:
        table.add_row("Decode policy", "OK", "Undecodable payloads raise DecodeFailure")

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http(settings.api_base_url, settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)
