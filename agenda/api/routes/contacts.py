from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlmodel import Session

from agenda.api.deps import get_db
from agenda.schemas.contact import (
    ContactCreate,
    ContactFields,
    ContactRead,
    ContactUpdate,
    ContactValidationResult,
    FieldErrorRead,
)
from agenda.services.contact import ContactService
from agenda.utils.contact_validation import ContactValidationError

router = APIRouter(prefix="/contacts", tags=["contacts"])

NOT_FOUND_DETAIL = "Contato não encontrado."


def _service(session: Session) -> ContactService:
    return ContactService(session)


def _bad_request(exc: ContactValidationError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.as_detail())


@router.get("", response_model=List[ContactRead])
def list_contacts(
    favorite: bool = Query(False, description="Somente favoritos"),
    search: str = Query("", description="Trecho do nome"),
    session: Session = Depends(get_db),
) -> List[ContactRead]:
    contacts = _service(session).list_contacts(favorite_only=favorite, search=search)
    return [ContactRead.model_validate(contact, from_attributes=True) for contact in contacts]


@router.post("", response_model=ContactRead, status_code=status.HTTP_201_CREATED)
def create_contact(
    payload: ContactCreate,
    session: Session = Depends(get_db),
) -> ContactRead:
    try:
        contact = _service(session).create_contact(payload.submitted())
    except ContactValidationError as exc:
        raise _bad_request(exc) from exc
    return ContactRead.model_validate(contact, from_attributes=True)


@router.post("/validate", response_model=ContactValidationResult, response_model_exclude_unset=True)
def validate_contact(
    payload: ContactCreate,
    partial: bool = Query(False, description="Aplicar as regras de atualização"),
    session: Session = Depends(get_db),
) -> ContactValidationResult:
    try:
        cleaned = _service(session).preview_contact(payload.submitted(), partial=partial)
    except ContactValidationError as exc:
        errors = [FieldErrorRead(**error.as_dict()) for error in exc.errors]
        return ContactValidationResult(valid=False, errors=errors)
    return ContactValidationResult(valid=True, contact=ContactFields(**cleaned), errors=[])


@router.get("/{contact_id}", response_model=ContactRead)
def get_contact(
    contact_id: int,
    session: Session = Depends(get_db),
) -> ContactRead:
    contact = _service(session).get_contact(contact_id)
    if not contact:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contato não encontrado ou inativo.")
    return ContactRead.model_validate(contact, from_attributes=True)


@router.put("/{contact_id}", response_model=ContactRead)
def update_contact(
    contact_id: int,
    payload: ContactUpdate,
    session: Session = Depends(get_db),
) -> ContactRead:
    service = _service(session)
    contact = service.get_contact(contact_id)
    if not contact:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL)
    try:
        updated = service.update_contact(contact, payload.submitted())
    except ContactValidationError as exc:
        raise _bad_request(exc) from exc
    return ContactRead.model_validate(updated, from_attributes=True)


@router.delete("/{contact_id}", response_model=ContactRead)
def delete_contact(
    contact_id: int,
    session: Session = Depends(get_db),
) -> ContactRead:
    contact = _service(session).deactivate_contact(contact_id)
    if not contact:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL)
    return ContactRead.model_validate(contact, from_attributes=True)


@router.patch("/{contact_id}/favorite", response_model=ContactRead)
def toggle_favorite(
    contact_id: int,
    session: Session = Depends(get_db),
) -> ContactRead:
    contact = _service(session).toggle_favorite(contact_id)
    if not contact:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL)
    return ContactRead.model_validate(contact, from_attributes=True)
