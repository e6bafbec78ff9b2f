"""
API dependencies for dependency injection
"""

from datetime import timedelta
from functools import lru_cache
from typing import Generator, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import UnauthorizedError
from domain.models import get_db_session
from services.security import SessionAuthority

bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


@lru_cache(maxsize=1)
def get_session_authority() -> SessionAuthority:
    """Token issuer/verifier built once from settings"""
    return SessionAuthority(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        ttl=timedelta(hours=settings.token_ttl_hours),
    )


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    authority: SessionAuthority = Depends(get_session_authority),
) -> int:
    """
    Resolve the caller's user id from the ``Authorization: Bearer`` header.

    Routes that depend on this never run for unauthenticated requests.
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise UnauthorizedError("Not authenticated", code="MISSING_TOKEN")
    return authority.verify(credentials.credentials)
