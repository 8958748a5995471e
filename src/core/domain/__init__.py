"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (Pydantic v2): layout de salida,
  variantes de icono, ficheros generados y valores del tema.
- El dominio no conoce HTTP, Pillow ni la CLI.
"""
