# Standard library imports
import logging

# Local application imports
from ....domain.repositories.blog_repository import BlogRepository

logger = logging.getLogger(__name__)


class DeleteBlogUseCase:
    """Use case for deleting a blog; deleting a missing blog is not an error"""
    
    def __init__(self, blog_repository: BlogRepository) -> None:
        self.blog_repository = blog_repository
    
    async def execute(self, blog_id: str) -> None:
        deleted = await self.blog_repository.delete(blog_id)
        if deleted:
            logger.info(f"Deleted blog {blog_id}")
        else:
            logger.debug(f"Delete requested for unknown blog {blog_id}")
