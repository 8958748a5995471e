"""Gestión del árbol de salida.

Crea los directorios, limpia salidas previas y vuelve a listar lo que hay en
disco. El resumen de la CLI se construye siempre a partir de este listado,
nunca de lo que se escribió en memoria.
"""

from __future__ import annotations

from pathlib import Path

from core.domain.models import ICON_EXTENSIONS, IGNORE_FILE_CONTENT, GeneratedFile, OutputLayout
from core.interfaces.reporter import Reporter


def ensure_directories(layout: OutputLayout, reporter: Reporter) -> dict[Path, bool]:
    """Crea los directorios de salida que falten.

    Idempotente. Devuelve `{directorio: creado}`.
    """

    reporter.info("Setting up directory structure...")

    created: dict[Path, bool] = {}
    for directory in layout.directories():
        if directory.is_dir():
            reporter.info(f"Directory already exists: {directory}")
            created[directory] = False
        else:
            directory.mkdir(parents=True, exist_ok=True)
            reporter.info(f"Created directory: {directory}")
            created[directory] = True
    return created


def _is_icon_file(path: Path) -> bool:
    return path.is_file() and path.suffix.lower() in ICON_EXTENSIONS


def clean_previous(layout: OutputLayout, reporter: Reporter) -> list[Path]:
    """Borra imágenes y hoja de estilos generadas en ejecuciones anteriores.

    Un directorio o fichero inexistente cuenta como ya limpio.
    """

    reporter.info("Cleaning previous customizations...")

    removed: list[Path] = []
    try:
        candidates = sorted(p for p in layout.public_dir.iterdir() if _is_icon_file(p))
    except FileNotFoundError:
        candidates = []

    for path in [*candidates, layout.definitions_file]:
        try:
            path.unlink()
        except FileNotFoundError:
            continue
        removed.append(path)

    reporter.info("Previous customizations cleaned")
    return removed


def ensure_ignore_file(layout: OutputLayout, reporter: Reporter) -> bool:
    """Escribe `.gitignore` en la raíz si no existe. Nunca lo sobrescribe."""

    path = layout.ignore_file
    if path.exists():
        return False

    reporter.info("Creating .gitignore for custom folder...")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(IGNORE_FILE_CONTENT, encoding="utf-8")
    reporter.info(f"Created {path}")
    return True


def list_icon_files(layout: OutputLayout) -> list[GeneratedFile]:
    """Lista (ordenado) los `.png`/`.ico`/`.svg` presentes en `public/`."""

    if not layout.public_dir.is_dir():
        return []
    return [
        GeneratedFile.from_path(p)
        for p in sorted(layout.public_dir.iterdir(), key=lambda p: p.name)
        if _is_icon_file(p)
    ]


def stylesheet_file(layout: OutputLayout) -> GeneratedFile | None:
    if not layout.definitions_file.is_file():
        return None
    return GeneratedFile.from_path(layout.definitions_file)
