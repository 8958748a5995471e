"""Render de templates (Jinja2).

Por qué Jinja2 para un único fichero SCSS y un SVG:
- El contenido fijo vive en `templates/` y no mezclado con código.
- Mismo mecanismo de carga que el resto de exportadores.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


@lru_cache(maxsize=1)
def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )


def render_template(name: str, **context: object) -> str:
    """Renderiza `templates/<name>` con el contexto dado."""

    return _get_env().get_template(name).render(**context)
