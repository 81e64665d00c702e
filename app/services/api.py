# app/services/api.py

import os
import requests
from dotenv import load_dotenv
from core.signup import SignupErrorKind, SignupResult

load_dotenv()

# Base URL of the FastAPI backend
FASTAPI_URL = os.getenv("FASTAPI_URL", "http://localhost:8000")
REQUEST_TIMEOUT = 10


# -------------------------------
# User-related functions
# -------------------------------

def signup_user(username, password) -> SignupResult:
    """
    Signs up a user through the HTTP endpoint.
    """
    try:
        res = requests.post(
            f"{FASTAPI_URL}/api/user/signup",
            json={"username": username, "password": password},
            timeout=REQUEST_TIMEOUT,
        )
    except requests.RequestException as e:
        return SignupResult.failure(SignupErrorKind.UNAVAILABLE, str(e))

    if res.status_code == 200:
        return SignupResult(ok=True)

    try:
        data = res.json()
    except ValueError:
        data = {}
    if not isinstance(data, dict):
        data = {}
    try:
        kind = SignupErrorKind(data.get("kind"))
    except ValueError:
        kind = SignupErrorKind.UNKNOWN
    return SignupResult.failure(kind, data.get("detail") or f"Error: Status {res.status_code}")


def get_user_details():
    """
    Retrieves the first registered user's details, or None.
    """
    try:
        res = requests.get(f"{FASTAPI_URL}/api/user/details", timeout=REQUEST_TIMEOUT)
    except requests.RequestException:
        return None
    return res.json() if res.status_code == 200 else None
