import pytest
import streamlit as st
from fastapi.testclient import TestClient

import config
from database import close_database, get_database


@pytest.fixture
def database(tmp_path, monkeypatch):
    """
    A fresh SQLite database per test, installed as the process-wide handle.
    """
    monkeypatch.setattr(config, "DATABASE_URL", f"sqlite:///{tmp_path / 'test.db'}")
    close_database()
    st.cache_resource.clear()

    database = get_database()
    database.create_all()
    yield database

    close_database()
    st.cache_resource.clear()


@pytest.fixture
def db_session(database):
    with database.session() as db:
        yield db


@pytest.fixture
def client(database):
    from main import app

    with TestClient(app) as client:
        yield client
