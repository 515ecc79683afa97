"""Authentication Pydantic schemas for API validation."""

from pydantic import BaseModel, Field, field_validator


class UserBase(BaseModel):
    """Fields shared by every user schema."""

    username: str = Field(
        ...,
        min_length=3,
        max_length=50,
        pattern=r"^[A-Za-z0-9_-]+$",
        description="Letters, numbers, underscores, and hyphens only",
    )


class UserCreate(UserBase):
    """Registration payload."""

    password: str = Field(..., min_length=8, max_length=72)

    @field_validator("password")
    @classmethod
    def password_has_letter_and_digit(cls, value: str) -> str:
        if not any(c.isalpha() for c in value) or not any(c.isdigit() for c in value):
            raise ValueError("Password must contain at least one letter and one digit")
        return value


class UserLogin(BaseModel):
    """Login payload. No strength rules: those apply at registration."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserResponse(UserBase):
    """Public view of a user. Never includes the password hash."""

    id: str
    created_at: str


class TokenPayload(BaseModel):
    """Decoded JWT claims."""

    sub: str
    username: str
    iat: int
    exp: int


class TokenResponse(BaseModel):
    """Login response body."""

    access_token: str
    token_type: str = "bearer"
    user: UserResponse
