from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlmodel import Session, func, select

from agenda.core.logging_setup import logger
from agenda.models.base import utcnow
from agenda.models.contact import Contact
from agenda.utils.contact_validation import (
    ContactValidationError,
    validate_contact_create,
    validate_contact_update,
)


class ContactService:
    def __init__(self, session: Session) -> None:
        self.session = session

    def list_contacts(self, favorite_only: bool = False, search: str = "") -> list[Contact]:
        statement = select(Contact).where(Contact.active == True)  # noqa: E712
        if favorite_only:
            statement = statement.where(Contact.favorite == True)  # noqa: E712
        term = (search or "").strip().lower()
        if term:
            statement = statement.where(func.lower(Contact.name).contains(term, autoescape=True))
        statement = statement.order_by(func.lower(Contact.name), Contact.id)
        return list(self.session.exec(statement).all())

    def get_contact(self, contact_id: int) -> Contact | None:
        statement = select(Contact).where(Contact.id == contact_id, Contact.active == True)  # noqa: E712
        return self.session.exec(statement).first()

    def create_contact(self, data: Mapping[str, Any]) -> Contact:
        try:
            cleaned = validate_contact_create(data)
        except ContactValidationError as exc:
            logger.info(f"Cadastro de contato recusado: {[error.field for error in exc.errors]}")
            raise

        contact = Contact(**cleaned, active=True, favorite=False)
        self.session.add(contact)
        self.session.commit()
        self.session.refresh(contact)
        logger.info(f"Contato criado id={contact.id}")
        return contact

    def update_contact(self, contact: Contact, data: Mapping[str, Any]) -> Contact:
        try:
            cleaned = validate_contact_update(data)
        except ContactValidationError as exc:
            logger.info(f"Atualização do contato id={contact.id} recusada: {[error.field for error in exc.errors]}")
            raise

        for field, value in cleaned.items():
            setattr(contact, field, value)
        contact.updated_at = utcnow()

        self.session.add(contact)
        self.session.commit()
        self.session.refresh(contact)
        logger.info(f"Contato atualizado id={contact.id} campos={sorted(cleaned)}")
        return contact

    def deactivate_contact(self, contact_id: int) -> Contact | None:
        contact = self.session.get(Contact, contact_id)
        if not contact:
            return None
        if contact.active:
            contact.active = False
            contact.updated_at = utcnow()
            self.session.add(contact)
            self.session.commit()
            self.session.refresh(contact)
            logger.info(f"Contato desativado id={contact.id}")
        return contact

    def toggle_favorite(self, contact_id: int) -> Contact | None:
        # Inactive contacts can still be toggled; only a missing id is an error.
        statement = select(Contact).where(Contact.id == contact_id).with_for_update()
        contact = self.session.exec(statement).first()
        if not contact:
            return None
        contact.favorite = not contact.favorite
        contact.updated_at = utcnow()
        self.session.add(contact)
        self.session.commit()
        self.session.refresh(contact)
        logger.info(f"Contato id={contact.id} favorito={contact.favorite}")
        return contact

    def preview_contact(self, data: Mapping[str, Any], partial: bool = False) -> dict[str, Any]:
        """Run the create (or update, when ``partial``) validation without persisting."""
        if partial:
            return validate_contact_update(data)
        return validate_contact_create(data)
