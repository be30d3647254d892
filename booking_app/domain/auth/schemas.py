"""Auth domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, EmailStr, Field, field_validator

from ...models import Role


class AdminSignupRequest(BaseModel):
    """Schema for registering an admin account"""

    email: EmailStr
    password: str = Field(..., min_length=6)
    name: str = Field(..., min_length=2)


class SignupRequest(AdminSignupRequest):
    """Schema for public registration (clients and providers)"""

    role: Role = Field(..., validation_alias=AliasChoices("role", "type"))

    @field_validator("role")
    @classmethod
    def reject_admin_role(cls, v):
        if v == Role.ADMIN:
            raise ValueError("ADMIN accounts must be created through /auth/admin-signup")
        return v


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)


class UserResponse(BaseModel):
    """Public view of an account - never includes the password hash"""

    id: str
    email: str
    name: str
    role: Role
    createdAt: Optional[datetime] = None


class AuthResponse(BaseModel):
    user: UserResponse
    token: str


class MeResponse(BaseModel):
    user: UserResponse
