"""Domain exceptions shared by use cases, repositories and the API error handlers."""


class BloglistError(Exception):
    """Base class for all application errors"""
    
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(BloglistError):
    """Input that breaks a business rule (mapped to 400)"""


class DuplicateUsernameError(ValidationError):
    """Insert rejected by the unique index on username"""
    
    def __init__(self, username: str) -> None:
        super().__init__(
            f"User validation failed: username: expected `username` to be unique. Value: `{username}`"
        )
        self.username = username


class PersistenceError(BloglistError):
    """Any other failure reported by the document store (mapped to 500)"""
