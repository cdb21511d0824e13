# Standard library imports
from dataclasses import dataclass
from typing import Optional

# Local application imports
from ...core.exceptions import ValidationError


@dataclass
class Blog:
    """
    Pure domain model for Blog entity.
    
    A stored blog entry always carries a non-empty title and url.
    The id is assigned by the repository on creation and never changes.
    """
    id: Optional[str]
    title: str
    url: str
    author: Optional[str] = None
    likes: int = 0
    
    def __post_init__(self) -> None:
        """Business validations"""
        if not self.title or not self.title.strip():
            raise ValidationError("Blog validation failed: title: Path `title` is required.")
        if not self.url or not self.url.strip():
            raise ValidationError("Blog validation failed: url: Path `url` is required.")
        if self.likes is None:
            self.likes = 0
