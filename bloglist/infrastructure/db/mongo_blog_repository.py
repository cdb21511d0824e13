# Standard library imports
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import PersistenceError, ValidationError
from ...domain.repositories.blog_repository import BlogRepository
from ...domain.models.blog import Blog
from ...domain.constants import BlogFields


def _to_object_id(blog_id: str) -> Optional[ObjectId]:
    """Parse a blog ID; malformed IDs are reported as None (treated as not found)"""
    if not blog_id:
        return None
    try:
        return ObjectId(blog_id)
    except (InvalidId, TypeError):
        return None


class MongoBlogRepository(BlogRepository):
    """MongoDB implementation of BlogRepository"""
    
    def __init__(self, blog_collection: AsyncIOMotorCollection) -> None:
        self.blog_collection = blog_collection
    
    async def find_all(self) -> List[Blog]:
        """
        List all blogs
        
        Returns:
            Blogs sorted by _id, i.e. in insertion order
        """
        try:
            cursor = self.blog_collection.find({}).sort(BlogFields.MONGO_ID, ASCENDING)
            blogs = []
            async for document in cursor:
                blogs.append(self._document_to_blog(document))
            return blogs
        except PyMongoError as e:
            raise PersistenceError(f"Error listing blogs: {str(e)}") from e
    
    async def find_by_id(self, blog_id: str) -> Optional[Blog]:
        """
        Find blog by ID
        
        Args:
            blog_id: Blog ID to search for
            
        Returns:
            Blog domain model if found, None otherwise
        """
        object_id = _to_object_id(blog_id)
        if object_id is None:
            return None
        
        try:
            document = await self.blog_collection.find_one({BlogFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise PersistenceError(f"Error finding blog by ID: {str(e)}") from e
        
        if document is None:
            return None
        return self._document_to_blog(document)
    
    async def create(self, blog: Blog) -> Blog:
        """
        Insert a new blog
        
        Args:
            blog: Blog domain model without ID
            
        Returns:
            Saved Blog domain model with ID set
        """
        if not blog:
            raise ValueError("Blog cannot be None")
        
        try:
            result = await self.blog_collection.insert_one(self._blog_to_dict(blog))
            
            # Fetch and return the newly created document
            new_document = await self.blog_collection.find_one({BlogFields.MONGO_ID: result.inserted_id})
        except PyMongoError as e:
            raise PersistenceError(f"Error saving blog: {str(e)}") from e
        
        if new_document is None:
            raise PersistenceError("Blog was created but could not be retrieved")
        return self._document_to_blog(new_document)
    
    async def update(self, blog_id: str, changes: Dict[str, Any]) -> Optional[Blog]:
        """
        Set the given fields on a stored blog
        
        Args:
            blog_id: ID of the blog to update
            changes: Field name -> new value
            
        Returns:
            Updated Blog domain model, or None if no blog has this ID
        """
        object_id = _to_object_id(blog_id)
        if object_id is None:
            return None
        
        update = {k: v for k, v in changes.items() if k not in (BlogFields.MONGO_ID, BlogFields.ID)}
        
        try:
            if update:
                document = await self.blog_collection.find_one_and_update(
                    {BlogFields.MONGO_ID: object_id},
                    {"$set": update},
                    return_document=ReturnDocument.AFTER,
                )
            else:
                document = await self.blog_collection.find_one({BlogFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise PersistenceError(f"Error updating blog: {str(e)}") from e
        
        if document is None:
            return None
        return self._document_to_blog(document)
    
    async def delete(self, blog_id: str) -> bool:
        """Delete blog by ID; malformed IDs delete nothing"""
        object_id = _to_object_id(blog_id)
        if object_id is None:
            return False
        
        try:
            result = await self.blog_collection.delete_one({BlogFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise PersistenceError(f"Error deleting blog: {str(e)}") from e
        return result.deleted_count > 0
    
    def _document_to_blog(self, document: Dict[str, Any]) -> Blog:
        """
        Convert MongoDB document to Blog domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            Blog domain model with the ObjectId exposed as a string ID
        """
        if not document or BlogFields.MONGO_ID not in document:
            raise PersistenceError("Invalid document: missing _id field")
        
        try:
            return Blog(
                id=str(document[BlogFields.MONGO_ID]),
                title=document.get(BlogFields.TITLE, ""),
                author=document.get(BlogFields.AUTHOR),
                url=document.get(BlogFields.URL, ""),
                likes=document.get(BlogFields.LIKES) or 0,
            )
        except ValidationError as e:
            # stored document breaks the Blog invariants
            raise PersistenceError(f"Invalid blog document {document[BlogFields.MONGO_ID]}: {e.message}") from e
    
    def _blog_to_dict(self, blog: Blog) -> Dict[str, Any]:
        """Convert Blog domain model to MongoDB document (without _id)"""
        return {
            BlogFields.TITLE: blog.title,
            BlogFields.AUTHOR: blog.author,
            BlogFields.URL: blog.url,
            BlogFields.LIKES: blog.likes,
        }
