"""Pipelines de generación y gestión del árbol de salida."""
