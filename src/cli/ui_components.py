"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- `ConsoleReporter` es la implementación de `Reporter` que usan los pipelines.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import GeneratedFile


class ConsoleReporter:
    """Imprime mensajes de pipeline con prefijos de color.

    Usa `Text.assemble` en vez de markup: URLs y rutas pueden contener
    corchetes.
    """

    def __init__(self, console: Console) -> None:
        self._console = console

    def _line(self, prefix: str, style: str, message: str) -> None:
        self._console.print(Text.assemble((prefix, style), " ", message))

    def header(self, message: str) -> None:
        self._line("[HEADER]", "bold blue", message)

    def info(self, message: str) -> None:
        self._line("[INFO]", "green", message)

    def warning(self, message: str) -> None:
        self._line("[WARNING]", "yellow", message)

    def error(self, message: str) -> None:
        self._line("[ERROR]", "bold red", message)


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("Branding Customizer", style="bold cyan")
    subtitle = Text("Favicons • Logo SVG • Variables SCSS", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_summary_table(icons: list[GeneratedFile], stylesheet: GeneratedFile | None) -> Table:
    """Tabla del resumen final, construida a partir del listado en disco."""

    table = Table(title="Generated files")
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("File", style="white")
    table.add_column("Size", style="magenta", justify="right")

    for item in icons:
        table.add_row("icon", item.name, f"{item.size_bytes} bytes")
    if stylesheet is not None:
        table.add_row("styles", stylesheet.name, f"{stylesheet.size_bytes} bytes")
    return table
