"""
Meal log database models.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Integer,
    String,
    Text,
    TIMESTAMP,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base, IsoDateTime


class Meal(Base):
    """A single meal logged by a user, flagged as on or off the diet.

    meal_id is autoincrementing, so ordering by it gives insertion order.
    """

    __tablename__ = "meal"

    meal_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("app_user.user_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String(120), nullable=False)
    description = Column(Text)
    occurred_at = Column(IsoDateTime, nullable=False)
    on_diet = Column(Boolean, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    user = relationship("AppUser", back_populates="meals")

    def __repr__(self) -> str:
        return (
            f"<Meal meal_id={self.meal_id} user_id={self.user_id} "
            f"on_diet={self.on_diet}>"
        )
