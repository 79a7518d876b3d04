"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from pydantic import BaseModel
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.interfaces.catalog import ProductRecord
from core.interfaces.geometry import Geometric


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("SOLID-D2", style="bold cyan")
    subtitle = Text("Contratos • Variantes • Orquestadores", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_products_table(products: Sequence[ProductRecord], *, user_id: str) -> Table:
    table = Table(title=f"Products for {user_id}")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Cost", style="green", justify="right")
    table.add_column("Image", style="dim", justify="right")
    for product in products:
        table.add_row(product.name, str(product.cost), f"{len(product.image)} bytes")
    return table


def build_shapes_table(shapes: Iterable[Geometric], *, total: int) -> Table:
    table = Table(title="Shapes", show_footer=True)
    table.add_column("Shape", style="cyan", no_wrap=True, footer="Total")
    table.add_column("Dimensions", style="white")
    table.add_column("Area", style="green", justify="right", footer=str(total))
    for shape in shapes:
        dims = ""
        if isinstance(shape, BaseModel):
            dims = ", ".join(f"{k}={v}" for k, v in shape.model_dump().items())
        table.add_row(type(shape).__name__, dims, str(shape.area()))
    return table


def build_records_table(records: Sequence[BaseModel], *, title: str) -> Table:
    """Tabla genérica: una columna por campo del primer registro."""

    table = Table(title=title)
    if not records:
        table.add_column("(no records)", style="dim")
        return table

    fields = list(type(records[0]).model_fields)
    for name in fields:
        table.add_column(name, style="white")
    for record in records:
        values = record.model_dump()
        table.add_row(*("" if values.get(name) is None else str(values.get(name)) for name in fields))
    return table
