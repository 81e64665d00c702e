# app/ui/button.py

import os
import logging
import streamlit as st
from dotenv import load_dotenv
from services import actions, api

load_dotenv()

logger = logging.getLogger(__name__)

# "direct" calls the backend in-process, "http" goes through the FastAPI endpoint
SIGNUP_TRANSPORT = os.getenv("SIGNUP_TRANSPORT", "direct")
DEFAULT_ERROR = "Failed to create user"

IDLE = "idle"
SUBMITTING = "submitting"
SUCCESS = "success"
ERROR = "error"


def get_signup_fn():
    if SIGNUP_TRANSPORT == "http":
        return api.signup_user
    return actions.signup


def run_signup(state, username, password, signup_fn):
    """
    Moves the form through idle -> submitting -> success | error.
    On success the page switches to home; on error the user stays on the form.
    """
    state["signup_status"] = SUBMITTING
    state["signup_error"] = None

    try:
        result = signup_fn(username, password)
    except Exception:
        logger.exception("Signup call failed")
        state["signup_status"] = ERROR
        state["signup_error"] = "An unexpected error occurred"
        return None

    if result.ok:
        state["signup_status"] = SUCCESS
        state["page"] = "home"
    else:
        state["signup_status"] = ERROR
        state["signup_error"] = result.message or DEFAULT_ERROR
    return result


def signup_button(label, username, password) -> bool:
    """
    Renders the submit button. Returns True when the signup succeeded.
    """
    if not st.button(label, type="primary"):
        return False

    with st.spinner("Signing up..."):
        result = run_signup(st.session_state, username, password, get_signup_fn())
    return result is not None and result.ok
