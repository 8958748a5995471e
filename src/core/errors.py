"""Errores del customizer.

Por qué una jerarquía propia:
- La CLI solo necesita capturar `CustomizerError` para terminar con código 1.
- Los pipelines pueden distinguir fallos fatales de fallos degradables
  (p.ej. un icono opcional que no descarga).
"""

from __future__ import annotations


class CustomizerError(Exception):
    """Base de todos los errores fatales del customizer."""


class ConfigError(CustomizerError):
    """Configuración inválida: URL requerida ausente o color mal formado."""


class DownloadError(CustomizerError):
    """Fallo al descargar una imagen (HTTP no-2xx, red, imagen corrupta)."""

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class InvalidImageError(DownloadError):
    """El cuerpo descargado no se puede decodificar como imagen."""


class AssetGenerationError(CustomizerError):
    """Fallo al redimensionar, codificar o escribir un asset generado."""
