"""Servicios de aplicación (orquestación sin I/O de presentación)."""
