"""
Post endpoints for API v1.

Listing, reading and searching posts is public; creating requires an
authenticated user, and updating or deleting additionally requires
that user to own the post.  Every handler answers with the uniform
envelope from ``core.responses`` and is wrapped by ``error_boundary``
so unexpected failures become a 500 envelope with an
operation-specific message.

On update and delete the caller is authenticated first (401), then the
post is resolved inside the handler (404), then ownership is checked
(403), and only then is the request body validated (422).
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from blog_api.app.core.errors import AuthorizationError, NotFoundError, error_boundary
from blog_api.app.core.pagination import resolve_page
from blog_api.app.core.responses import success_response
from blog_api.app.core.security import get_current_user
from blog_api.app.core.validation import read_payload, validate_payload
from blog_api.app.schemas.post import PostPage, PostRead, PostWrite, SearchQuery
from blog_api.app.services.post_service import PostService

router = APIRouter()


async def load_post(post_id: str) -> PostRead:
    """Resolve the ``{post_id}`` path segment to a post.

    Identifiers that are not integers cannot match a post and are
    reported as not found.
    """
    try:
        post_key = int(post_id)
    except ValueError:
        raise NotFoundError("Post not found")
    post = await PostService.get_post(post_key)
    if post is None:
        raise NotFoundError("Post not found")
    return post


def _page_data(result: PostPage, **extra: Any) -> Dict[str, Any]:
    data: Dict[str, Any] = {"posts": result.posts}
    data.update(extra)
    data["pagination"] = result.pagination
    return data


@router.get("")
@error_boundary("Failed to retrieve posts")
async def list_posts(page: Optional[str] = Query(None)) -> JSONResponse:
    """List all posts, newest first, ten per page."""
    result = await PostService.list_posts(resolve_page(page))
    return success_response(data=_page_data(result))


@router.post("", status_code=status.HTTP_201_CREATED)
@error_boundary("Failed to create post")
async def create_post(
    request: Request,
    current_user: dict = Depends(get_current_user),
) -> JSONResponse:
    """Create a post owned by the authenticated user."""
    data = validate_payload(PostWrite, await read_payload(request))
    post = await PostService.create_post(data, current_user["user_id"])
    return success_response(
        data={"post": post},
        message="Post created successfully",
        status_code=status.HTTP_201_CREATED,
    )


@router.get("/mine")
@error_boundary("Failed to retrieve your posts")
async def my_posts(
    page: Optional[str] = Query(None),
    current_user: dict = Depends(get_current_user),
) -> JSONResponse:
    """List the authenticated user's posts, newest first."""
    result = await PostService.list_user_posts(current_user["user_id"], resolve_page(page))
    return success_response(data=_page_data(result))


@router.get("/search")
@error_boundary("Failed to search posts")
async def search_posts(
    q: Optional[str] = Query(None),
    page: Optional[str] = Query(None),
) -> JSONResponse:
    """Search posts by a case-insensitive substring of title or body."""
    query = validate_payload(SearchQuery, {"q": q}, message="Search query is required")
    term = query.q.strip()
    result = await PostService.search_posts(term, resolve_page(page))
    return success_response(data=_page_data(result, search_term=term))


@router.get("/{post_id}")
@error_boundary("Failed to retrieve post")
async def show_post(post_id: str) -> JSONResponse:
    """Retrieve a single post with its owner."""
    post = await load_post(post_id)
    return success_response(data={"post": post})


@router.api_route("/{post_id}", methods=["PUT", "PATCH"])
@error_boundary("Failed to update post")
async def update_post(
    post_id: str,
    request: Request,
    current_user: dict = Depends(get_current_user),
) -> JSONResponse:
    """Replace the title and body of a post owned by the authenticated user."""
    post = await load_post(post_id)
    if post.user_id != current_user["user_id"]:
        raise AuthorizationError("You can only update your own posts")
    data = validate_payload(PostWrite, await read_payload(request))
    updated = await PostService.update_post(post.id, data)
    if updated is None:
        raise NotFoundError("Post not found")
    return success_response(data={"post": updated}, message="Post updated successfully")


@router.delete("/{post_id}")
@error_boundary("Failed to delete post")
async def delete_post(
    post_id: str,
    current_user: dict = Depends(get_current_user),
) -> JSONResponse:
    """Delete a post owned by the authenticated user."""
    post = await load_post(post_id)
    if post.user_id != current_user["user_id"]:
        raise AuthorizationError("You can only delete your own posts")
    if not await PostService.delete_post(post.id):
        raise NotFoundError("Post not found")
    return success_response(message="Post deleted successfully")
