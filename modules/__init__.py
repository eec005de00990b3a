"""Helper modules for the motorcycle store."""

__all__ = [
    "catalogs",
    "formatting",
]
