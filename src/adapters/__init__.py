"""Adaptadores de infraestructura: HTTP (httpx), imágenes (Pillow) y templates (Jinja2)."""
