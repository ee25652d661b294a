from fastapi import APIRouter, HTTPException, status

from agenda.db import session as db_session

router = APIRouter(tags=["health"])


@router.get("/live")
def live() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/ready")
def ready() -> dict[str, str]:
    if not db_session.database_is_reachable():
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Banco de dados indisponível.")
    return {"status": "ready"}
