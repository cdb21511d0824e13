# Standard library imports
import logging

# Local application imports
from ....domain.repositories.blog_repository import BlogRepository
from ....domain.models.blog import Blog
from ...dto.blog_dto import BlogCreateRequest, BlogResponse

logger = logging.getLogger(__name__)


class CreateBlogUseCase:
    """Use case for creating a new blog"""
    
    def __init__(self, blog_repository: BlogRepository) -> None:
        self.blog_repository = blog_repository
    
    async def execute(self, request: BlogCreateRequest) -> BlogResponse:
        """
        Create a new blog
        
        Args:
            request: Blog creation request
            
        Returns:
            BlogResponse with the stored blog, including its new ID
            
        Raises:
            ValidationError: If title or url is blank
        """
        new_blog = Blog(
            id=None,  # Will be set by repository
            title=request.title,
            author=request.author,
            url=request.url,
            likes=request.likes or 0,
        )
        
        saved_blog = await self.blog_repository.create(new_blog)
        logger.info(f"Created blog {saved_blog.id}")
        
        return BlogResponse.from_domain(saved_blog)
