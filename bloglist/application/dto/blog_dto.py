# Standard library imports
from typing import Optional

# External package imports
from pydantic import BaseModel, Field

# Local application imports
from ...domain.models.blog import Blog


class BlogCreateRequest(BaseModel):
    """DTO for blog creation request"""
    title: str = Field(min_length=1)
    author: Optional[str] = None
    url: str = Field(min_length=1)
    likes: Optional[int] = None  # defaults to 0 in the use case


class BlogUpdateRequest(BaseModel):
    """DTO for blog update request; every field is optional (partial update)"""
    title: Optional[str] = Field(default=None, min_length=1)
    author: Optional[str] = None
    url: Optional[str] = Field(default=None, min_length=1)
    likes: Optional[int] = None


class BlogResponse(BaseModel):
    """DTO for blog response"""
    id: str
    title: str
    author: Optional[str] = None
    url: str
    likes: int

    @classmethod
    def from_domain(cls, blog: Blog) -> "BlogResponse":
        return cls(
            id=blog.id or "",
            title=blog.title,
            author=blog.author,
            url=blog.url,
            likes=blog.likes,
        )
