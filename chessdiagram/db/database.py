"""Generate database engine / sessions"""

import os
from typing import Any, Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from chessdiagram.db.schema import Base

DATABASE_URL = os.environ.get("CHESSDIAGRAM_DATABASE_URL", "sqlite:///chessdiagram.db")


def create_db_engine(url: str = DATABASE_URL, **kwargs: Any) -> Engine:
    """Create the engine and make sure all tables exist"""
    engine = create_engine(url, **kwargs)
    Base.metadata.create_all(bind=engine)
    return engine


def get_db(engine: Engine) -> Generator[Session, None, None]:
    db = sessionmaker(bind=engine)()
    try:
        yield db
    finally:
        db.close()
