from functools import lru_cache
from typing import Optional
from sqlalchemy.orm import Session
import logging

from domain.models import AppUser
from domain.schemas.auth_schemas import TokenResponse, UserCreate
from repositories import UserRepository
from services.security import hash_password, verify_password, SessionAuthority
from app.config import settings
from app.exceptions import ConflictError, NotFoundError, UnauthorizedError

logger = logging.getLogger("dailydiet.auth")

INVALID_CREDENTIALS = "Invalid email or password"


@lru_cache(maxsize=4)
def _dummy_hash(rounds: int) -> str:
    # Checked against when the email is unknown so both failures cost one bcrypt round
    return hash_password("dummy-password-for-timing", rounds=rounds)


class AuthService:
    """Business logic for registration, login and account management"""

    @staticmethod
    def register(
        db: Session, user_data: UserCreate, rounds: Optional[int] = None
    ) -> AppUser:
        """
        Register a new user.

        The password is hashed before anything touches the database and the
        plaintext is not kept on the returned model.

        Raises:
            ConflictError: If the email is already registered
            ServiceValidationError: If the password cannot be hashed safely
        """
        user_repo = UserRepository(db)

        if user_repo.get_by_email(user_data.email):
            logger.warning(f"register_conflict email={user_data.email}")
            raise ConflictError("Email already registered", code="EMAIL_TAKEN")

        password_hash = hash_password(
            user_data.password, rounds=rounds or settings.bcrypt_rounds
        )
        # Unique constraint still guards against a concurrent registration
        user = user_repo.create_user(user_data.name, user_data.email, password_hash)

        logger.info(f"user_registered user_id={user.user_id} email={user.email}")
        return user

    @staticmethod
    def verify_credentials(db: Session, email: str, password: str) -> int:
        """
        Return the user id for a matching email/password pair.

        Unknown email and wrong password raise the same error, so callers
        cannot probe which emails are registered.
        """
        user = UserRepository(db).get_by_email(email)

        if user is None:
            verify_password(password, _dummy_hash(settings.bcrypt_rounds))
            logger.info("login_failed reason=credentials")
            raise UnauthorizedError(INVALID_CREDENTIALS, code="INVALID_CREDENTIALS")

        if not verify_password(password, user.password_hash):
            logger.info(f"login_failed reason=credentials user_id={user.user_id}")
            raise UnauthorizedError(INVALID_CREDENTIALS, code="INVALID_CREDENTIALS")

        return user.user_id

    @staticmethod
    def login(
        db: Session, authority: SessionAuthority, email: str, password: str
    ) -> TokenResponse:
        """Verify credentials and mint a session token"""
        user_id = AuthService.verify_credentials(db, email, password)
        token, expires_at = authority.issue_with_expiry(user_id)
        logger.info(f"login_succeeded user_id={user_id}")
        return TokenResponse(access_token=token, expires_at=expires_at)

    @staticmethod
    def get_user(db: Session, user_id: int) -> AppUser:
        user = UserRepository(db).get_by_id(user_id)
        if not user:
            raise NotFoundError(f"User {user_id} not found")
        return user

    @staticmethod
    def delete_account(db: Session, user_id: int) -> None:
        """Delete a user and, by cascade, every meal they own"""
        user_repo = UserRepository(db)
        if not user_repo.delete_user(user_id):
            raise NotFoundError(f"User {user_id} not found")
        logger.info(f"user_deleted user_id={user_id}")
