# server/api/user.py

from pydantic import BaseModel
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from core.signup import SignupErrorKind, signup, get_first_user
from database import get_db


router = APIRouter(prefix="/api/user")


ERROR_STATUS = {
    SignupErrorKind.VALIDATION: 422,
    SignupErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    SignupErrorKind.UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
    SignupErrorKind.UNKNOWN: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class SignupRequest(BaseModel):
    username: str
    password: str


class UserDetails(BaseModel):
    name: str
    email: str


def error_response(status_code: int, detail: str, kind: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail, "kind": kind})


# -------------------------------
# Signup Endpoints
# -------------------------------

@router.post("/signup")
def signup_user(body: SignupRequest, db: Session = Depends(get_db)):
    """
    Creates a user from a JSON body with username and password.
    """
    result = signup(db, body.username, body.password)
    if not result.ok:
        return error_response(ERROR_STATUS[result.error], result.message, result.error.value)
    return {"message": "Signed up"}


@router.get("/details", response_model=UserDetails)
def get_user_details(db: Session = Depends(get_db)):
    """
    Returns the first registered user. The username doubles as the email.
    """
    user = get_first_user(db)
    if user is None:
        return error_response(status.HTTP_404_NOT_FOUND, "No users found", "not_found")
    return {"name": user.username, "email": user.username}
