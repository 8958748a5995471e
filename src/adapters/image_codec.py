"""Operaciones de imagen sobre Pillow.

Por qué está en adapters:
- Decodificar, redimensionar y codificar son detalles de infraestructura.
- El Core solo conoce `IconVariant` y rutas.
"""

from __future__ import annotations

import base64
from io import BytesIO
from pathlib import Path

from PIL import Image, ImageOps, UnidentifiedImageError

from adapters.templating import render_template
from core.errors import InvalidImageError


def validate_image(path: Path) -> None:
    """Comprueba que `path` es una imagen bien formada.

    Lanza `InvalidImageError` si Pillow no la reconoce o está truncada.
    """

    try:
        with Image.open(path) as im:
            im.verify()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError) as exc:
        raise InvalidImageError(f"not a valid image: {exc}") from exc


def contain(source: Path, size: int, background: tuple[int, int, int, int]) -> Image.Image:
    """Encaja la imagen en un cuadrado `size` x `size` ('contain').

    Conserva la proporción y rellena el resto con `background` (RGBA),
    centrando el contenido. Escala tanto hacia abajo como hacia arriba.
    """

    with Image.open(source) as im:
        rgba = im.convert("RGBA")
    return ImageOps.pad(
        rgba,
        (size, size),
        method=Image.Resampling.LANCZOS,
        color=background,
        centering=(0.5, 0.5),
    )


def write_png(source: Path, output: Path, size: int, background: tuple[int, int, int, int]) -> Path:
    contain(source, size, background).save(output, format="PNG")
    return output


def write_ico(source: Path, output: Path, sizes: tuple[int, ...], background: tuple[int, int, int, int]) -> Path:
    """Escribe un ICO real con una entrada por tamaño.

    El plugin ICO de Pillow reescala desde la imagen base, así que se parte
    del tamaño mayor ya encajado.
    """

    base = contain(source, max(sizes), background)
    base.save(output, format="ICO", sizes=[(s, s) for s in sorted(sizes)])
    return output


def png_bytes(source: Path, size: int, background: tuple[int, int, int, int]) -> bytes:
    buffer = BytesIO()
    contain(source, size, background).save(buffer, format="PNG")
    return buffer.getvalue()


def render_svg_wrapper(png: bytes, size: int) -> str:
    """SVG mínimo que embebe un PNG en base64 con width/height/viewBox = size."""

    return render_template(
        "logo.svg.j2",
        size=size,
        base64_image=base64.b64encode(png).decode("ascii"),
    )


def write_svg_logo(source: Path, output: Path, size: int, background: tuple[int, int, int, int]) -> Path:
    svg = render_svg_wrapper(png_bytes(source, size, background), size)
    output.write_text(svg, encoding="utf-8")
    return output
