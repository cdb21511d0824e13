from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from ..models.blog import Blog


class BlogRepository(ABC):
    """Repository interface - defines contract for blog data access"""
    
    @abstractmethod
    async def find_all(self) -> List[Blog]:
        """List every blog in insertion order"""
        pass
    
    @abstractmethod
    async def find_by_id(self, blog_id: str) -> Optional[Blog]:
        """Find blog by ID; unknown and malformed IDs both yield None"""
        pass
    
    @abstractmethod
    async def create(self, blog: Blog) -> Blog:
        """Insert a new blog and return it with its assigned ID"""
        pass
    
    @abstractmethod
    async def update(self, blog_id: str, changes: Dict[str, Any]) -> Optional[Blog]:
        """Apply field changes and return the updated blog, or None if absent"""
        pass
    
    @abstractmethod
    async def delete(self, blog_id: str) -> bool:
        """Delete blog by ID; returns whether a document was removed"""
        pass
