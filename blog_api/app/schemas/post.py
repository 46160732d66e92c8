"""
Pydantic models for post data.

``PostWrite`` is the payload accepted by create and update; both
fields are required non-blank strings and the title is limited to
255 characters.  ``PostRead`` is the representation returned by the
API, with the owning user embedded as ``PostOwner``.  ``Pagination``
describes the window of a paginated listing.
"""

from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import AfterValidator, BaseModel, Field, StrictStr

from ..core.validation import not_blank

RequiredStr = Annotated[StrictStr, AfterValidator(not_blank)]


class PostWrite(BaseModel):
    """Schema for creating or updating a post."""

    title: Annotated[StrictStr, Field(max_length=255, examples=["Hello World"]), AfterValidator(not_blank)]
    body: Annotated[RequiredStr, Field(examples=["My first post."])]


class SearchQuery(BaseModel):
    """Query parameters accepted by the search endpoint."""

    q: RequiredStr


class PostOwner(BaseModel):
    """Summary of the user owning a post."""

    id: int
    name: str


class PostRead(BaseModel):
    """Schema for reading a post from the API."""

    id: int
    title: str
    body: str
    user_id: int
    created_at: datetime
    updated_at: datetime
    user: PostOwner


class Pagination(BaseModel):
    """Pagination window of a listing.

    ``from`` is a Python keyword, so the field is declared as
    ``from_`` and serialised under its alias.
    """

    current_page: int
    last_page: int
    per_page: int
    total: int
    from_: Optional[int] = Field(None, alias="from")
    to: Optional[int] = None

    model_config = {
        "populate_by_name": True,
    }


class PostPage(BaseModel):
    """One page of posts together with its pagination window."""

    posts: List[PostRead]
    pagination: Pagination
