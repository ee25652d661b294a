from agenda.services.contact import ContactService

__all__ = [
    "ContactService",
]
