from pathlib import Path
from unittest import mock

from streamlit.testing.v1 import AppTest

from core.signup import SignupErrorKind, SignupResult, signup
from ui.button import run_signup

APP_SCRIPT = str(Path(__file__).resolve().parents[1] / "app" / "main.py")


def test_run_signup_success_navigates_home():
    state = {"signup_status": "idle"}
    seen = []

    def fake_signup(username, password):
        seen.append((state["signup_status"], username, password))
        return SignupResult.success(1)

    result = run_signup(state, "alice", "secret123", fake_signup)

    assert result.ok
    assert seen == [("submitting", "alice", "secret123")]
    assert state["signup_status"] == "success"
    assert state["page"] == "home"
    assert state["signup_error"] is None


def test_run_signup_failure_stays_on_form():
    state = {"signup_status": "idle"}

    def fake_signup(username, password):
        return SignupResult.failure(SignupErrorKind.CONFLICT, "Username already exists")

    run_signup(state, "alice", "pw", fake_signup)

    assert state["signup_status"] == "error"
    assert state["signup_error"] == "Username already exists"
    assert "page" not in state


def test_run_signup_failure_without_message_uses_fallback():
    state = {}

    run_signup(state, "alice", "pw", lambda u, p: SignupResult(ok=False, error=SignupErrorKind.UNKNOWN))

    assert state["signup_error"] == "Failed to create user"


def test_run_signup_unexpected_exception():
    state = {}

    def broken_signup(username, password):
        raise RuntimeError("boom")

    assert run_signup(state, "alice", "pw", broken_signup) is None
    assert state["signup_status"] == "error"
    assert state["signup_error"] == "An unexpected error occurred"


def test_signup_form_success(database):
    at = AppTest.from_file(APP_SCRIPT, default_timeout=30).run()
    assert at.title[0].value == "📝 Sign Up"

    at.text_input(key="signup_username").input("alice")
    at.text_input(key="signup_password").input("secret123")
    at.button[0].click().run()

    assert not at.exception
    assert len(at.error) == 0
    assert at.session_state["page"] == "home"
    assert at.title[0].value == "🏠 Home"


def test_signup_form_duplicate_username(database, db_session):
    signup(db_session, "alice", "secret123")

    at = AppTest.from_file(APP_SCRIPT, default_timeout=30).run()
    at.text_input(key="signup_username").input("alice")
    at.text_input(key="signup_password").input("other")
    at.button[0].click().run()

    assert not at.exception
    assert at.session_state["signup_status"] == "error"
    assert "Username already exists" in at.error[0].value
    assert at.title[0].value == "📝 Sign Up"


def test_app_configures_logging_from_settings(database):
    with mock.patch("config.setup_logging") as setup_logging:
        at = AppTest.from_file(APP_SCRIPT, default_timeout=30).run()

    assert not at.exception
    setup_logging.assert_called()
