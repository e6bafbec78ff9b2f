"""Login route"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db, get_session_authority
from api.responses import UNAUTHORIZED
from domain.schemas.auth_schemas import LoginRequest, TokenResponse
from services.auth_service import AuthService
from services.security import SessionAuthority

router = APIRouter(prefix="/auth", tags=["Auth"])
logger = logging.getLogger("dailydiet.api.auth")


@router.post("/login", response_model=TokenResponse, responses=UNAUTHORIZED)
def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db),
    authority: SessionAuthority = Depends(get_session_authority),
):
    """
    Exchange email and password for a bearer token.

    The token is valid for 24 hours by default and must be sent as
    ``Authorization: Bearer <token>`` on every meal and metrics request.
    """
    return AuthService.login(db, authority, credentials.email, credentials.password)
