from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime


class UserCreate(BaseModel):
    """Schema for registering a new user"""

    name: str = Field(..., min_length=1, max_length=120, description="Display name")
    email: EmailStr
    password: str = Field(
        ..., min_length=8, max_length=72, description="Plaintext secret, never stored"
    )

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class LoginRequest(BaseModel):
    """Login credentials, checked only against the credential store"""

    email: str
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_at: Optional[datetime] = None


class UserResponse(BaseModel):
    user_id: int
    name: str
    email: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
