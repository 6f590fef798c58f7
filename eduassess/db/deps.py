# eduassess/db/deps.py
from typing import Generator

from fastapi import Request
from sqlalchemy.orm import Session


def get_db(request: Request) -> Generator[Session, None, None]:
    # session factory is created by create_app() and kept on app.state
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
