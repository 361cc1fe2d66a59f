"""Adaptadores de I/O: HTTP (httpx) y almacenamiento JSON local."""
