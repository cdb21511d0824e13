from .config import Settings, get_settings
from .security import (
    hash_password,
    verify_password,
)
from .exceptions import (
    BloglistError,
    ValidationError,
    DuplicateUsernameError,
    PersistenceError,
)
from .logging_config import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "hash_password",
    "verify_password",
    "BloglistError",
    "ValidationError",
    "DuplicateUsernameError",
    "PersistenceError",
    "setup_logging",
]
