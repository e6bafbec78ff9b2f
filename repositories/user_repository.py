"""
User Repository - Data access layer for user accounts
"""

from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import AppUser
from app.exceptions import ConflictError


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserRepository(BaseRepository[AppUser]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, AppUser)

    def get_by_email(self, email: str) -> Optional[AppUser]:
        """Get user by (normalized) email"""
        return (
            self.db.query(AppUser)
            .filter(AppUser.email == normalize_email(email))
            .first()
        )

    def create_user(self, name: str, email: str, password_hash: str) -> AppUser:
        """Create a new user; a duplicate email raises ConflictError"""
        user = AppUser(
            name=name, email=normalize_email(email), password_hash=password_hash
        )
        try:
            self.db.add(user)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictError(
                "Email already registered", code="EMAIL_TAKEN"
            ) from e
        self.db.refresh(user)
        return user

    def delete_user(self, user_id: int) -> bool:
        """Delete user and all their meals (cascade)"""
        user = self.get_by_id(user_id)
        if user:
            self.delete(user)
            return True
        return False
