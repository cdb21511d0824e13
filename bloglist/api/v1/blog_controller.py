# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, Response, status

# Local application imports
from ...application.dto.blog_dto import BlogCreateRequest, BlogUpdateRequest, BlogResponse
from ...application.use_cases.blog.list_blogs import ListBlogsUseCase
from ...application.use_cases.blog.create_blog import CreateBlogUseCase
from ...application.use_cases.blog.get_blog import GetBlogUseCase
from ...application.use_cases.blog.update_blog import UpdateBlogUseCase
from ...application.use_cases.blog.delete_blog import DeleteBlogUseCase
from ...di.base_container import BaseContainer
from .dependencies import get_container


router = APIRouter(tags=["blogs"])


@router.get("", response_model=List[BlogResponse])
async def list_blogs(
    container: BaseContainer = Depends(get_container),
) -> List[BlogResponse]:
    """
    List all blogs
    
    Returns:
        List of BlogResponse objects, in insertion order
    """
    list_blogs_use_case = container.get(ListBlogsUseCase)
    return await list_blogs_use_case.execute()


@router.post("", response_model=BlogResponse, status_code=status.HTTP_201_CREATED)
async def create_blog(
    request: BlogCreateRequest,
    container: BaseContainer = Depends(get_container),
) -> BlogResponse:
    """
    Create a new blog
    
    Args:
        request: Blog creation request (title and url are required)
        
    Returns:
        BlogResponse with created blog information
    """
    create_blog_use_case = container.get(CreateBlogUseCase)
    return await create_blog_use_case.execute(request)


@router.get("/{blog_id}", response_model=BlogResponse)
async def get_blog(
    blog_id: str,
    container: BaseContainer = Depends(get_container),
):
    """
    Get a blog by ID
    
    Unknown and malformed IDs both answer 404 with an empty body.
    """
    get_blog_use_case = container.get(GetBlogUseCase)
    
    blog = await get_blog_use_case.execute(blog_id)
    if blog is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return blog


@router.put("/{blog_id}", response_model=BlogResponse)
async def update_blog(
    blog_id: str,
    request: BlogUpdateRequest,
    container: BaseContainer = Depends(get_container),
):
    """
    Update a blog with a full or partial record
    
    Args:
        blog_id: ID of the blog
        request: Fields to replace; omitted fields are left as stored
        
    Returns:
        BlogResponse reflecting the update
    """
    update_blog_use_case = container.get(UpdateBlogUseCase)
    
    blog = await update_blog_use_case.execute(blog_id, request)
    if blog is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return blog


@router.delete("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_blog(
    blog_id: str,
    container: BaseContainer = Depends(get_container),
) -> Response:
    """Delete a blog; answers 204 whether or not it existed"""
    delete_blog_use_case = container.get(DeleteBlogUseCase)
    await delete_blog_use_case.execute(blog_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
