from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_user, get_token_claims
from app.models.user import User
from app.schemas.auth import LoginRequest
from app.schemas.common import ErrorResponse, SuccessResponse, success_response
from app.services.auth_service import auth_service, serialize_user

router = APIRouter(prefix="/auth")


@router.post(
    "/login",
    summary="Back-office login; returns a bearer access token",
    response_model=SuccessResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Wrong email or password"},
        403: {"model": ErrorResponse, "description": "Account deactivated"},
    },
)
def login(body: LoginRequest, db: Session = Depends(get_db)):
    return success_response("Login successful", auth_service.login(db, body))


@router.get("/me", summary="Profile of the token's owner", response_model=SuccessResponse)
def me(current_user: User = Depends(get_current_user)):
    return success_response("Profile retrieved", serialize_user(current_user))


@router.post("/logout", summary="Revoke the bearer token used for this request", response_model=SuccessResponse)
def logout(
    claims:       dict    = Depends(get_token_claims),
    current_user: User    = Depends(get_current_user),
    db:           Session = Depends(get_db),
):
    auth_service.logout(db, claims, current_user.id)
    return success_response("Logged out successfully", None)
