"""APOD Manager: archivo local de Astronomy Picture of the Day (NASA)."""

from __future__ import annotations

__version__ = "0.1.0"
