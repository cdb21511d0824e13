# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.blog_repository import BlogRepository
from ...dto.blog_dto import BlogResponse


class ListBlogsUseCase:
    """Use case for listing all blogs"""
    
    def __init__(
        self,
        blog_repository: BlogRepository,
    ) -> None:
        self.blog_repository = blog_repository
    
    async def execute(self) -> List[BlogResponse]:
        """
        List every stored blog in insertion order
        
        Returns:
            List of BlogResponse objects (empty when there are no blogs)
        """
        blogs = await self.blog_repository.find_all()
        return [BlogResponse.from_domain(blog) for blog in blogs]
