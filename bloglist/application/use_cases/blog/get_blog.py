# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.blog_repository import BlogRepository
from ...dto.blog_dto import BlogResponse


class GetBlogUseCase:
    """Use case for getting a blog by ID"""
    
    def __init__(
        self,
        blog_repository: BlogRepository,
    ) -> None:
        self.blog_repository = blog_repository
    
    async def execute(self, blog_id: str) -> Optional[BlogResponse]:
        """
        Get a blog by ID
        
        Args:
            blog_id: ID of the blog
            
        Returns:
            BlogResponse, or None when no blog has this ID (malformed IDs included)
        """
        blog = await self.blog_repository.find_by_id(blog_id)
        if blog is None:
            return None
        return BlogResponse.from_domain(blog)
