"""Icon generation pipeline.

Downloads the configured source images, derives the fixed favicon set plus
the SVG logo, and removes every temporary download before returning. The
flow is strictly sequential: each download, resize and write finishes
before the next one starts.

Printing stays out of this module; progress goes through a `Reporter`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import httpx

from adapters.http_client import build_client, download_image
from adapters.image_codec import write_ico, write_png, write_svg_logo
from core.config import CustomizerSettings
from core.domain.models import (
    LOGO_VARIANT,
    RASTER_VARIANTS,
    GeneratedFile,
    IconSource,
    IconVariant,
    OutputLayout,
)
from core.errors import AssetGenerationError, ConfigError, DownloadError
from core.interfaces.reporter import Reporter
from core.services.directories import list_icon_files

MAIN_ICON_TEMP = "main_icon_temp.png"
BLACK_ICON_TEMP = "black_icon_temp.png"
LOGO_TEMP = "logo_temp.png"


@dataclass
class IconSources:
    """Resolved source files for one run."""

    main: Path
    dark: Path
    logo: Path | None = None
    temporaries: list[Path] = field(default_factory=list)

    def path_for(self, source: IconSource) -> Path:
        if source is IconSource.DARK:
            return self.dark
        if source is IconSource.LOGO:
            return self.logo or self.main
        return self.main


def _remove_quietly(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        pass


def generate_variant(variant: IconVariant, source: Path, output_dir: Path, reporter: Reporter) -> Path:
    """Writes one output of the fixed set. The format follows the extension."""

    output = output_dir / variant.filename
    suffix = output.suffix.lower()

    if suffix == ".ico":
        sizes = ", ".join(f"{s}x{s}" for s in variant.sizes)
        reporter.info(f"Generating {variant.description} with multiple sizes ({sizes})")
        return write_ico(source, output, variant.sizes, variant.background)

    if suffix == ".svg":
        reporter.info(f"Generating {variant.description}")
        write_svg_logo(source, output, variant.size, variant.background)
        reporter.info(f"SVG logo generated successfully at: {output}")
        return output

    reporter.info(f"Generating {variant.description} ({variant.size}x{variant.size})")
    return write_png(source, output, variant.size, variant.background)


def _download_optional(
    client: httpx.Client,
    url: str | None,
    output: Path,
    description: str,
    reporter: Reporter,
) -> Path | None:
    if not url:
        return None
    if download_image(client, url, output, description, reporter):
        return output
    return None


def _resolve_dark_source(
    settings: CustomizerSettings,
    client: httpx.Client,
    output_dir: Path,
    reporter: Reporter,
    sources: IconSources,
) -> None:
    black = _download_optional(
        client,
        settings.icon_black_url,
        output_dir / BLACK_ICON_TEMP,
        "black icon",
        reporter,
    )
    if black is not None:
        sources.dark = black
        sources.temporaries.append(black)
    elif settings.icon_black_url:
        reporter.warning("Failed to download black icon, using main icon for dark variants")
    else:
        reporter.warning("No black icon available, using main icon for dark variants")


def _resolve_logo(
    settings: CustomizerSettings,
    client: httpx.Client,
    output_dir: Path,
    reporter: Reporter,
    sources: IconSources,
) -> None:
    if not settings.logo_url or settings.logo_url == settings.icon_url:
        return

    logo = _download_optional(client, settings.logo_url, output_dir / LOGO_TEMP, "logo image", reporter)
    if logo is None:
        reporter.warning("Failed to download logo, using icon as fallback")
        return
    sources.logo = logo
    sources.temporaries.append(logo)


def _report_outputs(layout: OutputLayout, reporter: Reporter) -> list[GeneratedFile]:
    files = list_icon_files(layout)
    reporter.info(f"Generated files in {layout.public_dir}:")
    for item in files:
        reporter.info(f"    {item.name} ({item.size_bytes} bytes)")
    return files


def generate_icons(
    settings: CustomizerSettings,
    reporter: Reporter,
    client: httpx.Client | None = None,
) -> list[GeneratedFile]:
    """Runs the whole icon pipeline and returns the files now in `public/`.

    Raises:
        ConfigError: `ICON_URL` is not set.
        DownloadError: the main icon could not be downloaded or decoded.
        AssetGenerationError: a variant could not be rendered or written.
    """

    reporter.header("Generating custom icons...")

    if not settings.icon_url:
        raise ConfigError("ICON_URL environment variable is required")

    layout = OutputLayout(root=settings.custom_root)
    output_dir = layout.public_dir
    output_dir.mkdir(parents=True, exist_ok=True)

    owns_client = client is None
    client = client or build_client(settings)

    main_icon = output_dir / MAIN_ICON_TEMP
    sources = IconSources(main=main_icon, dark=main_icon, temporaries=[main_icon])
    try:
        if not download_image(client, settings.icon_url, main_icon, "main icon", reporter):
            raise DownloadError(
                f"Could not download main icon from {settings.icon_url}",
                url=settings.icon_url,
            )

        _resolve_dark_source(settings, client, output_dir, reporter, sources)

        try:
            for variant in RASTER_VARIANTS:
                generate_variant(variant, sources.path_for(variant.source), output_dir, reporter)

            _resolve_logo(settings, client, output_dir, reporter, sources)
            generate_variant(LOGO_VARIANT, sources.path_for(LOGO_VARIANT.source), output_dir, reporter)
        except (OSError, ValueError) as exc:
            raise AssetGenerationError(f"Icon generation failed: {exc}") from exc
    finally:
        for temp in sources.temporaries:
            _remove_quietly(temp)
        if owns_client:
            client.close()

    reporter.info("Icon generation completed successfully!")
    return _report_outputs(layout, reporter)
