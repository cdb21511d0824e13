from typing import Optional

from pydantic import BaseModel, Field, field_validator

# bcrypt only accepts passwords up to 72 bytes
PASSWORD_MAX_BYTES = 72


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request"""
    username: str = Field(min_length=3, max_length=200)
    name: Optional[str] = Field(default=None, max_length=200)
    password: str = Field(min_length=3)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
            raise ValueError(f"password must be at most {PASSWORD_MAX_BYTES} bytes")
        return value


class UserResponse(BaseModel):
    """DTO for user response (no password hash)"""
    id: str
    username: str
    name: Optional[str] = None
