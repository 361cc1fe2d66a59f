"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (Pydantic v2, dataclasses, Enum).
- El dominio no conoce HTTP, CLI ni el sistema de archivos: solo conceptos del problema.
"""
