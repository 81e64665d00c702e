# app/services/actions.py

import streamlit as st
from core.signup import SignupResult, signup as create_user, get_first_user
from database import Database, get_database


# -------------------------------
# In-process calls into the backend
# -------------------------------

@st.cache_resource
def get_cached_database() -> Database:
    """
    Keeps one database handle across Streamlit reruns and reloads.
    """
    database = get_database()
    database.create_all()
    return database


def signup(username: str, password: str) -> SignupResult:
    with get_cached_database().session() as db:
        return create_user(db, username, password)


def get_user_details():
    with get_cached_database().session() as db:
        user = get_first_user(db)
        if user is None:
            return None
        return {"name": user.username, "email": user.username}
