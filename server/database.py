# server/database.py

import os
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker

import config
from models import Base


logger = logging.getLogger(__name__)


# -------------------------------
# Persistence Handle
# -------------------------------

class Database:
    """
    Owns the connection pool (a SQLAlchemy engine) and the session factory.
    One instance is meant to live for the whole process.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = make_url(url)
        connect_args = {}

        if self.url.get_backend_name() == "sqlite":
            connect_args["check_same_thread"] = False
            if self.url.database and self.url.database != ":memory:":
                directory = os.path.dirname(self.url.database)
                if directory:
                    os.makedirs(directory, exist_ok=True)

        self.engine = create_engine(self.url, echo=echo, connect_args=connect_args)
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

    @contextmanager
    def session(self) -> Iterator[Session]:
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    def create_all(self):
        Base.metadata.create_all(bind=self.engine)

    def dispose(self):
        self.engine.dispose()


_database: Optional[Database] = None


def get_database() -> Database:
    """
    Returns the process-wide handle, building it on first access.
    Construction errors propagate to the caller; nothing is retried.
    """
    global _database
    if _database is None:
        echo = config.SQL_ECHO and not config.is_production()
        _database = Database(config.DATABASE_URL, echo=echo)
        logger.info("Database handle created for %s", _database.url.render_as_string(hide_password=True))
    return _database


def close_database():
    global _database
    if _database is not None:
        _database.dispose()
        _database = None


def get_db(request: Request) -> Iterator[Session]:
    database: Database = request.app.state.database
    with database.session() as db:
        yield db
