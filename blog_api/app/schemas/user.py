"""
Pydantic models for user data.

Users exist so posts have an owner and requests can be
authenticated.  Passwords are accepted on registration and login
only; they are never returned through the API.
"""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field, StrictStr

from ..core.validation import not_blank


class UserCreate(BaseModel):
    """Schema for registering a user."""

    name: Annotated[StrictStr, Field(max_length=255, examples=["Jane Doe"]), AfterValidator(not_blank)]
    email: Annotated[StrictStr, Field(max_length=255, examples=["jane@example.com"]), AfterValidator(not_blank)]
    password: Annotated[StrictStr, Field(min_length=8, examples=["strongpassword"])]


class UserLogin(BaseModel):
    """Credentials exchanged for an access token."""

    email: StrictStr = Field(..., examples=["jane@example.com"])
    password: StrictStr = Field(..., examples=["strongpassword"])


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int
    name: str
    email: str


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
