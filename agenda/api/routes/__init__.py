from . import contacts, health

__all__ = [
    "contacts",
    "health",
]
