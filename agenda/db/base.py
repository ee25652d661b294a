# noqa: F401 to ensure models are imported for metadata
from agenda.models.contact import Contact

__all__ = [
    "Contact",
]
