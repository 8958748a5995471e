"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y redirects para todas las descargas.
- Facilita testeo: se puede sustituir el transporte por un `httpx.MockTransport`.
"""

from __future__ import annotations

from pathlib import Path

import httpx

from adapters.image_codec import validate_image
from core.config import CustomizerSettings
from core.errors import InvalidImageError
from core.interfaces.reporter import Reporter


def build_client(
    settings: CustomizerSettings,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` síncrono con defaults seguros.

    El pipeline es estrictamente secuencial, así que no hace falta un
    cliente asíncrono.
    """

    headers = {
        "User-Agent": settings.http_user_agent,
        "Accept": "image/*,*/*;q=0.8",
    }
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def _remove_partial(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        pass


def download_image(
    client: httpx.Client,
    url: str | None,
    output_path: Path,
    description: str,
    reporter: Reporter,
) -> bool:
    """Descarga `url` a `output_path` y valida que sea una imagen.

    Lógica:
    - Un único GET, sin reintentos. Cualquier status no-2xx es fallo.
    - El cuerpo se escribe tal cual; luego se reabre con Pillow solo para
      validar (el resultado se descarta).
    - Ante cualquier fallo se borra el fichero parcial y se devuelve `False`.
      Escalar el error es decisión del llamador.
    """

    if not url:
        reporter.warning(f"No URL provided for {description}, skipping...")
        return False

    reporter.info(f"Downloading {description} from: {url}")

    try:
        response = client.get(url)
        if not response.is_success:
            raise httpx.HTTPStatusError(
                f"HTTP {response.status_code}: {response.reason_phrase}",
                request=response.request,
                response=response,
            )
        output_path.write_bytes(response.content)
        validate_image(output_path)
    except (httpx.HTTPError, httpx.InvalidURL, InvalidImageError, OSError) as exc:
        reporter.error(f"Failed to download {description} from {url}: {exc}")
        _remove_partial(output_path)
        return False

    reporter.info(f"Successfully downloaded and validated {description}")
    return True
