"""Núcleo del customizer: configuración, dominio y pipelines."""
