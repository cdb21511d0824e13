from dataclasses import dataclass
from typing import Optional

from ...core.exceptions import ValidationError

USERNAME_MIN_LENGTH = 3


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    username: str
    password_hash: str
    name: Optional[str] = None

    def __post_init__(self):
        """Business validations"""
        if not self.username or len(self.username.strip()) < USERNAME_MIN_LENGTH:
            raise ValidationError(
                f"User validation failed: username: must be at least {USERNAME_MIN_LENGTH} characters"
            )
        if not self.password_hash:
            raise ValidationError("Password hash is required")
