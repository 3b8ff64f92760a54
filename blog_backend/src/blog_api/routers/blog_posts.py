from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from ..logging_config import get_logger
from ..schemas import BlogPostCreate, BlogPostOut, BlogPostUpdate
from ..store import BlogPostStore

logger = get_logger(__name__)

router = APIRouter(
    prefix="/blogPostsRouter",
    tags=["blog posts"],
)


# PUBLIC_INTERFACE
def get_store(request: Request) -> BlogPostStore:
    """
    Dependency returning the store owned by the running application.
    """
    return request.app.state.store


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[BlogPostOut],
    summary="List Blog Posts",
    description="List all blog posts in the order they were created.",
    responses={200: {"description": "List retrieved successfully"}},
)
def list_blog_posts(store: BlogPostStore = Depends(get_store)) -> List[BlogPostOut]:
    """
    List every blog post.
    """
    return [BlogPostOut(**post) for post in store.list()]


# PUBLIC_INTERFACE
@router.get(
    "/{post_id}",
    response_model=BlogPostOut,
    summary="Get Blog Post",
    description="Get a single blog post by ID.",
    responses={
        200: {"description": "Blog post found"},
        404: {"description": "Blog post not found"},
    },
)
def get_blog_post(post_id: str, store: BlogPostStore = Depends(get_store)) -> BlogPostOut:
    """
    Retrieve a single blog post by its ID.
    """
    return BlogPostOut(**store.get(post_id))


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=BlogPostOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create Blog Post",
    description="Create a new blog post and return it with its generated id and publishDate.",
    responses={
        201: {"description": "Blog post created successfully"},
        400: {"description": "Missing or invalid fields"},
    },
)
def create_blog_post(payload: BlogPostCreate, store: BlogPostStore = Depends(get_store)) -> BlogPostOut:
    """
    Create a new blog post.
    """
    created = store.create(payload.model_dump(exclude_none=True))
    logger.info("blog_post_created", post_id=created["id"])
    return BlogPostOut(**created)


# PUBLIC_INTERFACE
@router.put(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Replace Blog Post",
    description=(
        "Replace an existing blog post. The body must hold the full record and its id "
        "must match the id in the path."
    ),
    responses={
        204: {"description": "Blog post updated"},
        400: {"description": "Missing fields or mismatched id"},
        404: {"description": "Blog post not found"},
    },
)
def put_blog_post(
    post_id: str, payload: BlogPostUpdate, store: BlogPostStore = Depends(get_store)
) -> Response:
    """
    Full replace of a blog post. Returns 204 with an empty body.
    """
    store.update(post_id, payload.model_dump())
    logger.info("blog_post_updated", post_id=post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# PUBLIC_INTERFACE
@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete Blog Post",
    description="Delete a blog post by ID.",
    responses={
        204: {"description": "Blog post deleted"},
        404: {"description": "Blog post not found"},
    },
)
def delete_blog_post(post_id: str, store: BlogPostStore = Depends(get_store)) -> Response:
    """
    Delete a blog post. Returns 204 on success, 404 if not found.
    """
    store.remove(post_id)
    logger.info("blog_post_deleted", post_id=post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
