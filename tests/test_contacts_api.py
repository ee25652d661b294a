from fastapi import status
from sqlmodel import Session

from agenda.db import session as db_session_module
from agenda.models.contact import Contact
from tests.conftest import contact_payload, contacts_url  # type: ignore


def _create(client, **overrides) -> dict:
    response = client.post(contacts_url(), json=contact_payload(**overrides))
    assert response.status_code == status.HTTP_201_CREATED, response.json()
    return response.json()


def test_create_and_read_back_formats_phone(client) -> None:
    created = _create(client, gender="feminino", dateOfBirth="1992-03-04", profilePictureUrl="  ")

    assert created["phone"] == "(11) 98765-4321"
    assert created["gender"] == "FEMININO"
    assert created["active"] is True
    assert created["favorite"] is False
    assert created["profilePictureUrl"] is None
    assert created["dateOfBirth"].startswith("1992-03-04")
    assert "createdAt" in created

    response = client.get(contacts_url(created["id"]))
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["phone"] == "(11) 98765-4321"


def test_create_reports_every_field_error(client) -> None:
    response = client.post(contacts_url(), json={"name": "", "email": "maria@exemplo", "phone": "1234"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    detail = response.json()["detail"]
    assert detail["message"] == "Verifique os dados do formulário."
    paths = [error["path"] for error in detail["errors"]]
    assert paths == [["name"], ["email"], ["phone"]]
    assert [error["code"] for error in detail["errors"]] == ["required", "invalid_format", "invalid_length"]
    assert client.get(contacts_url()).json() == []


def test_create_ignores_favorite_and_active_from_body(client) -> None:
    created = _create(client, favorite=True, active=False)
    assert created["favorite"] is False
    assert created["active"] is True


def test_update_with_only_null_date_keeps_other_fields(client) -> None:
    created = _create(client, dateOfBirth="1980-01-01", gender="outro")

    response = client.put(contacts_url(created["id"]), json={"dateOfBirth": None})

    assert response.status_code == status.HTTP_200_OK, response.json()
    updated = response.json()
    assert updated["dateOfBirth"] is None
    assert updated["name"] == created["name"]
    assert updated["email"] == created["email"]
    assert updated["phone"] == created["phone"]
    assert updated["gender"] == "OUTRO"
    assert updated["updatedAt"] is not None


def test_update_rejects_bad_fields(client) -> None:
    created = _create(client)

    response = client.put(contacts_url(created["id"]), json={"gender": 3, "phone": None})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    detail = response.json()["detail"]
    assert detail["message"] == "Verifique os dados do formulário para atualização."
    assert [error["path"][0] for error in detail["errors"]] == ["phone", "gender"]
    assert client.get(contacts_url(created["id"])).json()["phone"] == created["phone"]


def test_update_unknown_or_inactive_contact_returns_404(client) -> None:
    assert client.put(contacts_url(999), json={"name": "X"}).status_code == status.HTTP_404_NOT_FOUND

    created = _create(client)
    client.delete(contacts_url(created["id"]))
    assert client.put(contacts_url(created["id"]), json={"name": "X"}).status_code == status.HTTP_404_NOT_FOUND


def test_toggle_favorite_twice_returns_to_original(client) -> None:
    created = _create(client)

    first = client.patch(contacts_url(created["id"], "favorite"))
    second = client.patch(contacts_url(created["id"], "favorite"))

    assert first.status_code == status.HTTP_200_OK
    assert first.json()["favorite"] is True
    assert second.json()["favorite"] is False
    assert client.patch(contacts_url(12345, "favorite")).status_code == status.HTTP_404_NOT_FOUND


def test_soft_delete_hides_contact_but_keeps_row(client, db_session: Session) -> None:
    created = _create(client)

    response = client.delete(contacts_url(created["id"]))

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["active"] is False
    assert client.get(contacts_url()).json() == []
    missing = client.get(contacts_url(created["id"]))
    assert missing.status_code == status.HTTP_404_NOT_FOUND
    assert missing.json()["detail"] == "Contato não encontrado ou inativo."
    assert db_session.get(Contact, created["id"]) is not None
    assert client.delete(contacts_url(777)).status_code == status.HTTP_404_NOT_FOUND


def test_list_filters_by_favorite_and_search(client) -> None:
    paulo = _create(client, name="Paulo Freire", email="paulo@example.com")
    clara = _create(client, name="clara Nunes", email="clara@example.com")
    _create(client, name="Roberto Carlos", email="roberto@example.com")
    client.patch(contacts_url(paulo["id"], "favorite"))
    client.patch(contacts_url(clara["id"], "favorite"))

    names = [item["name"] for item in client.get(contacts_url()).json()]
    assert names == ["clara Nunes", "Paulo Freire", "Roberto Carlos"]

    favorites = client.get(contacts_url(), params={"favorite": "true"}).json()
    assert [item["name"] for item in favorites] == ["clara Nunes", "Paulo Freire"]

    found = client.get(contacts_url(), params={"search": "CARL"}).json()
    assert [item["name"] for item in found] == ["Roberto Carlos"]

    both = client.get(contacts_url(), params={"favorite": "true", "search": "fre"}).json()
    assert [item["name"] for item in both] == ["Paulo Freire"]


def test_validate_endpoint_previews_without_saving(client) -> None:
    ok = client.post(contacts_url("validate"), json=contact_payload(phone="2133445566", gender="nao_binario"))
    assert ok.status_code == status.HTTP_200_OK
    body = ok.json()
    assert body["valid"] is True
    assert body["errors"] == []
    assert body["contact"]["phone"] == "(21) 3344-5566"
    assert body["contact"]["gender"] == "NAO_BINARIO"

    bad = client.post(contacts_url("validate"), json={"email": "nope"}).json()
    assert bad["valid"] is False
    assert {error["path"][0] for error in bad["errors"]} == {"name", "email", "phone"}

    partial = client.post(contacts_url("validate"), params={"partial": "true"}, json={"phone": "11 91234 5678"}).json()
    assert partial["valid"] is True
    assert partial["contact"] == {"phone": "(11) 91234-5678"}

    assert client.get(contacts_url()).json() == []


def test_non_numeric_id_is_rejected(client) -> None:
    response = client.get(contacts_url("abc"))
    assert response.status_code == 422


def test_health_endpoints(client) -> None:
    assert client.get("/health/live").json() == {"status": "ok"}
    ready = client.get("/health/ready")
    assert ready.status_code == status.HTTP_200_OK
    assert ready.json() == {"status": "ready"}


def test_ready_returns_503_when_database_unreachable(client, monkeypatch) -> None:
    monkeypatch.setattr(db_session_module, "database_is_reachable", lambda: False)

    ready = client.get("/health/ready")

    assert ready.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
    assert ready.json()["detail"] == "Banco de dados indisponível."


def test_create_rejects_date_outside_utc_range(client) -> None:
    response = client.post(contacts_url(), json=contact_payload(dateOfBirth="9999-12-31T23:00:00-03:00"))

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    errors = response.json()["detail"]["errors"]
    assert errors == [{"path": ["dateOfBirth"], "message": "Data de Nascimento inválida.", "code": "invalid_date"}]
    assert client.get(contacts_url()).json() == []


def test_search_matches_accented_names_case_insensitively(client) -> None:
    joao = _create(client, name="JOÃO Silva", email="joao@example.com")
    _create(client, name="Joana Dark", email="joana@example.com")

    found = client.get(contacts_url(), params={"search": "joão"}).json()
    assert [item["id"] for item in found] == [joao["id"]]
