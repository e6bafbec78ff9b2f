"""User registration and account routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db, get_current_user_id
from api.responses import StatusResponse, BAD_REQUEST, CONFLICT, NOT_FOUND, UNAUTHORIZED
from domain.schemas.auth_schemas import UserCreate, UserResponse
from services.auth_service import AuthService

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger("dailydiet.api.users")


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**BAD_REQUEST, **CONFLICT},
)
def register_user(user: UserCreate, db: Session = Depends(get_db)):
    """Register a new user. Returns 409 if the email is already taken."""
    return AuthService.register(db, user)


@router.get("/me", response_model=UserResponse, responses={**UNAUTHORIZED, **NOT_FOUND})
def get_me(
    user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)
):
    """Profile of the authenticated user."""
    return AuthService.get_user(db, user_id)


@router.delete(
    "/me", response_model=StatusResponse, responses={**UNAUTHORIZED, **NOT_FOUND}
)
def delete_me(
    user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)
):
    """Delete the authenticated user together with all of their meals."""
    AuthService.delete_account(db, user_id)
    return StatusResponse(deleted=user_id)
