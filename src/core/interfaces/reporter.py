"""Contrato de reporte de progreso.

Por qué Protocol:
- Los pipelines informan de su avance sin saber si hay una consola Rich,
  un logger o un stub de test al otro lado.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Reporter(Protocol):
    """Canal mínimo de mensajes de un pipeline.

    Reglas de diseño:
    - `header` abre una etapa; `info`/`warning`/`error` son líneas sueltas.
    - Ningún método lanza excepciones: reportar no decide el flujo.
    """

    def header(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...
