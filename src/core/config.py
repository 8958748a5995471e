"""Configuración del customizer.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Se construye una sola vez al arrancar y se pasa explícitamente a cada
  pipeline, lo que permite inyectar configuraciones en los tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

TRUTHY_STRINGS = frozenset({"true", "yes", "1", "on"})

# Orden en el que se validan y reportan los colores.
COLOR_FIELDS: tuple[tuple[str, str, str], ...] = (
    ("custom_primary_color", "CUSTOM_PRIMARY_COLOR", "Primary"),
    ("custom_secondary_color", "CUSTOM_SECONDARY_COLOR", "Secondary"),
    ("custom_red_color", "CUSTOM_RED_COLOR", "Red"),
    ("custom_green_color", "CUSTOM_GREEN_COLOR", "Green"),
    ("custom_text_muted_color", "CUSTOM_TEXT_MUTED_COLOR", "Text Muted"),
    ("custom_secondary_background_color", "CUSTOM_SECONDARY_BACKGROUND_COLOR", "Secondary Background"),
    ("custom_secondary_text_color", "CUSTOM_SECONDARY_TEXT_COLOR", "Secondary Text"),
)

BOOLEAN_FIELDS: tuple[str, ...] = (
    "custom_force_link_underline",
    "custom_lighter_primary_hover",
    "custom_lighter_secondary_hover",
    "custom_header_logo",
)


def to_boolean(value: Any) -> bool:
    """Coerción permisiva de flags booleanos.

    Reglas:
    - `bool` se devuelve tal cual.
    - Strings: "true"/"yes"/"1"/"on" (sin distinguir mayúsculas) son `True`,
      cualquier otro string es `False`.
    - Ausente u otro tipo: `True`. Un flag sin definir queda activado.
    """

    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.lower() in TRUTHY_STRINGS
    return True


class CustomizerSettings(BaseSettings):
    """Configuración central del customizer.

    Por qué pydantic-settings:
    - Tipado + defaults documentados en el borde (env vars / `.env`).
    - Un único contrato de configuración para CLI y pipelines.

    Los colores no se validan aquí: lo hace el pipeline de estilos, para que
    `--icons-only` no dependa de ellos.
    """

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    icon_url: str | None = Field(
        default=None,
        description="URL del icono principal (requerida salvo --styles-only).",
    )
    logo_url: str | None = Field(
        default=None,
        description="URL del logo para el SVG (usa ICON_URL si no se define).",
    )
    icon_black_url: str | None = Field(
        default=None,
        description="URL de la variante negra del icono (favicons dark).",
    )

    custom_primary_color: str = Field(default="#0a0d10", description="Primary color.")
    custom_secondary_color: str = Field(default="#0a0d10", description="Secondary color.")
    custom_red_color: str = Field(default="#d74949", description="Red/danger color.")
    custom_green_color: str = Field(default="#319236", description="Green/success color.")
    custom_text_muted_color: str = Field(default="#888", description="Muted text color.")
    custom_secondary_background_color: str = Field(
        default="#f1f1f1",
        description="Secondary background color.",
    )
    custom_secondary_text_color: str = Field(
        default="#7a7a7a",
        description="Secondary text color.",
    )

    custom_force_link_underline: bool = Field(default=True, description="Subrayar siempre los links.")
    custom_lighter_primary_hover: bool = Field(default=True, description="Hover más claro en botones primarios.")
    custom_lighter_secondary_hover: bool = Field(default=True, description="Hover más claro en botones secundarios.")
    custom_header_logo: bool = Field(default=True, description="Mostrar logo en la cabecera.")

    custom_root: Path = Field(
        default=Path("custom"),
        description="Directorio raíz de la personalización generada.",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    http_user_agent: str = Field(
        default="branding-customizer/0.1",
        min_length=1,
        description="User-Agent para las descargas.",
    )

    @field_validator("icon_url", "logo_url", "icon_black_url", mode="before")
    @classmethod
    def _blank_url_is_unset(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator(*(name for name, _, _ in COLOR_FIELDS), mode="before")
    @classmethod
    def _blank_color_uses_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None or (isinstance(value, str) and value == ""):
            return cls.model_fields[info.field_name].default
        return value

    @field_validator(*BOOLEAN_FIELDS, mode="before")
    @classmethod
    def _coerce_boolean(cls, value: Any) -> bool:
        return to_boolean(value)

    def colors(self) -> list[tuple[str, str, str]]:
        """Devuelve `(env_name, label, value)` en orden de validación."""

        return [(env, label, getattr(self, name)) for name, env, label in COLOR_FIELDS]
