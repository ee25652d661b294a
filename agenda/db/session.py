from typing import Any, Generator

from sqlalchemy import event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, create_engine

from agenda.core.config import settings
from agenda.core.logging_setup import logger
from agenda.db import base  # noqa: F401

connect_args: dict[str, Any] = {}
if settings.database_url.startswith("sqlite"):
    connect_args["check_same_thread"] = False


def _unicode_lower(value: Any) -> Any:
    return value.lower() if isinstance(value, str) else value


def register_sqlite_functions(target: Engine) -> None:
    """SQLite's built-in lower() only folds ASCII; replace it so "JOÃO" matches "joão"."""
    if target.dialect.name != "sqlite":
        return

    @event.listens_for(target, "connect")
    def _register_lower(dbapi_connection, connection_record) -> None:
        dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


engine = create_engine(
    settings.database_url,
    echo=settings.debug,
    future=True,
    connect_args=connect_args,
)
register_sqlite_functions(engine)


def init_db() -> None:
    SQLModel.metadata.create_all(bind=engine)
    logger.info("Tabelas verificadas/criadas")


def get_session() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


def database_is_reachable() -> bool:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error(f"Banco de dados indisponível: {exc}")
        return False
    return True
