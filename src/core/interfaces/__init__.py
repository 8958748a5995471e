"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementa la capa de presentación.
- El Core depende de abstracciones y nunca imprime directamente.
"""
