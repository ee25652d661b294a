from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from agenda.api.routes import contacts, health
from agenda.core.config import settings
from agenda.core.logging_setup import logger
from agenda.db import session as db_session


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    # Inicializa banco / tabelas
    db_session.init_db()
    yield


def _normalize_origin(value: str | None) -> str | None:
    if not value:
        return None
    cleaned = value.strip().rstrip("/")
    return cleaned or None


def create_app() -> FastAPI:
    application = FastAPI(
        title=settings.project_name,
        debug=settings.debug,
        lifespan=lifespan,
    )

    logger.info("Agenda de Contatos API inicializada")

    # ===============================================================
    # CORS
    # ===============================================================
    origins: list[str] = []
    for item in settings.allowed_origins:
        normalized = _normalize_origin(item)
        if normalized and normalized not in origins:
            origins.append(normalized)

    logger.info(f"CORS configurado com origins: {origins}")

    application.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ===============================================================
    # Erros inesperados
    # ===============================================================
    @application.middleware("http")
    async def log_unhandled_errors(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logger.exception(f"Erro inesperado em {request.method} {request.url.path}")
            return JSONResponse(
                status_code=500,
                content={"detail": "Ocorreu um erro interno do servidor."},
            )

    # ===============================================================
    # ROTAS
    # ===============================================================
    application.include_router(health.router, prefix="/health")
    application.include_router(contacts.router, prefix=settings.api_prefix)

    @application.get("/")
    def root():
        return {"service": settings.project_name}

    return application


app = create_app()
