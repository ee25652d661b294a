from typing import Generator

from sqlmodel import Session

from agenda.db import session as db_session


def get_db() -> Generator[Session, None, None]:
    yield from db_session.get_session()
