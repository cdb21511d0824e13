# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....core.exceptions import ValidationError
from ....domain.constants import BlogFields
from ....domain.repositories.blog_repository import BlogRepository
from ...dto.blog_dto import BlogUpdateRequest, BlogResponse

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = (BlogFields.TITLE, BlogFields.URL)


class UpdateBlogUseCase:
    """Use case for updating an existing blog with a full or partial record"""
    
    def __init__(self, blog_repository: BlogRepository) -> None:
        self.blog_repository = blog_repository
    
    async def execute(self, blog_id: str, request: BlogUpdateRequest) -> Optional[BlogResponse]:
        """
        Apply the supplied fields to a stored blog
        
        Fields left out of the request keep their stored value. Title and url
        may be replaced but not cleared.
        
        Args:
            blog_id: ID of the blog to update
            request: Fields to replace
            
        Returns:
            BlogResponse reflecting the update, or None if the blog does not exist
            
        Raises:
            ValidationError: If title or url is set to null or blank
        """
        changes = request.model_dump(exclude_unset=True)
        
        for field in _REQUIRED_FIELDS:
            if field in changes and (changes[field] is None or not changes[field].strip()):
                raise ValidationError(f"Blog validation failed: {field}: Path `{field}` is required.")
        
        if BlogFields.LIKES in changes and changes[BlogFields.LIKES] is None:
            changes[BlogFields.LIKES] = 0
        
        if changes:
            updated_blog = await self.blog_repository.update(blog_id, changes)
        else:
            updated_blog = await self.blog_repository.find_by_id(blog_id)
        
        if updated_blog is None:
            return None
        
        logger.info(f"Updated blog {updated_blog.id} (fields: {', '.join(sorted(changes)) or 'none'})")
        return BlogResponse.from_domain(updated_blog)
