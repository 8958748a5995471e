"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta y documentación autocontenida (Field) sin acoplar el
  Core a Pillow, httpx o la consola.

Nota:
- Estos modelos describen *qué* se genera y *dónde*, no *cómo*.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

ICON_EXTENSIONS: tuple[str, ...] = (".png", ".ico", ".svg")

IGNORE_FILE_CONTENT = "# Generated customization files\npublic/\nstyles/\n"

TRANSPARENT = (0, 0, 0, 0)
WHITE_TRANSPARENT = (255, 255, 255, 0)


class IconSource(str, Enum):
    """Imagen de origen de una variante."""

    MAIN = "main"
    DARK = "dark"
    LOGO = "logo"


class OutputLayout(BaseModel):
    """Árbol de salida fijo bajo el directorio de personalización.

    Por qué un modelo:
    - Todas las rutas derivan de una única raíz configurable.
    - Los tests pueden apuntar la raíz a un directorio temporal.
    """

    model_config = ConfigDict(frozen=True)

    root: Path = Field(..., description="Directorio raíz (p.ej. `custom`).")

    @property
    def public_dir(self) -> Path:
        return self.root / "public"

    @property
    def styles_dir(self) -> Path:
        return self.root / "styles"

    @property
    def definitions_file(self) -> Path:
        return self.styles_dir / "_definitions.scss"

    @property
    def ignore_file(self) -> Path:
        return self.root / ".gitignore"

    def directories(self) -> list[Path]:
        return [self.root, self.public_dir, self.styles_dir]


class IconVariant(BaseModel):
    """Una salida raster/vectorial del pipeline de iconos."""

    model_config = ConfigDict(frozen=True)

    filename: str = Field(..., min_length=1, description="Nombre del fichero en `public/`.")
    sizes: tuple[int, ...] = Field(
        ...,
        min_length=1,
        description="Lado(s) en píxeles. Más de uno solo para ICO multi-resolución.",
    )
    source: IconSource = Field(default=IconSource.MAIN, description="Imagen de origen.")
    description: str = Field(..., min_length=1, description="Texto para los mensajes de progreso.")
    background: tuple[int, int, int, int] = Field(
        default=TRANSPARENT,
        description="Color RGBA del relleno al encajar ('contain').",
    )

    @property
    def size(self) -> int:
        return max(self.sizes)


RASTER_VARIANTS: tuple[IconVariant, ...] = (
    IconVariant(filename="favicon-16x16.png", sizes=(16,), description="16x16 favicon"),
    IconVariant(filename="favicon-32x32.png", sizes=(32,), description="32x32 favicon"),
    IconVariant(
        filename="favicon-16x16-dark.png",
        sizes=(16,),
        source=IconSource.DARK,
        description="16x16 dark favicon",
    ),
    IconVariant(
        filename="favicon-32x32-dark.png",
        sizes=(32,),
        source=IconSource.DARK,
        description="32x32 dark favicon",
    ),
    IconVariant(filename="apple-touch-icon.png", sizes=(180,), description="Apple Touch Icon"),
    IconVariant(filename="favicon.ico", sizes=(16, 32, 48), description="favicon.ico"),
)

LOGO_VARIANT = IconVariant(
    filename="logo.svg",
    sizes=(512,),
    source=IconSource.LOGO,
    description="SVG logo",
    background=WHITE_TRANSPARENT,
)

OUTPUT_FILENAMES: frozenset[str] = frozenset(
    [v.filename for v in RASTER_VARIANTS] + [LOGO_VARIANT.filename]
)


class GeneratedFile(BaseModel):
    """Fichero presente en disco tras la generación."""

    name: str = Field(..., min_length=1)
    path: Path
    size_bytes: int = Field(..., ge=0)

    @classmethod
    def from_path(cls, path: Path) -> "GeneratedFile":
        return cls(name=path.name, path=path, size_bytes=path.stat().st_size)


class ThemeDefinitions(BaseModel):
    """Valores ya resueltos que se interpolan en `_definitions.scss`."""

    primary: str
    secondary: str
    red: str
    green: str
    text_muted: str
    secondary_background: str
    secondary_text: str

    force_link_underline: bool = True
    lighter_primary_hover: bool = True
    lighter_secondary_hover: bool = True
    header_logo: bool = True

    def template_context(self) -> dict[str, str]:
        """Contexto para el template: colores literales y booleanos en minúscula."""

        context: dict[str, str] = {}
        for key, value in self.model_dump().items():
            if isinstance(value, bool):
                context[key] = "true" if value else "false"
            else:
                context[key] = value
        return context
