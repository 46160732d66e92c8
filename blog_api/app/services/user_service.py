"""
Business logic for users.

``UserService`` registers users and checks their credentials.  Users
exist to own posts and to authenticate requests; profile management
is out of scope.
"""

import logging
import sqlite3
from typing import Optional

from blog_api.app.core.db import get_connection
from blog_api.app.core.security import hash_password, verify_password
from blog_api.app.schemas.user import UserCreate, UserRead


class EmailTakenError(ValueError):
    """Raised when registering an email that is already in use."""


class UserService:
    """Service for registering and authenticating users."""

    @classmethod
    async def create_user(cls, data: UserCreate) -> UserRead:
        """Create a new user with a hashed password and return it.

        Raises ``EmailTakenError`` if the email is already registered.
        """
        logger = logging.getLogger(__name__)
        logger.info("Registering user %s", data.email)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            try:
                cursor.execute(
                    "INSERT INTO users (name, email, password) VALUES (?, ?, ?)",
                    (data.name, data.email, hash_password(data.password)),
                )
            except sqlite3.IntegrityError as e:
                conn.rollback()
                raise EmailTakenError(f"Email {data.email} is already registered") from e
            user_id = cursor.lastrowid
            conn.commit()
            return UserRead(id=user_id, name=data.name, email=data.email)
        finally:
            conn.close()

    @classmethod
    async def authenticate(cls, email: str, password: str) -> Optional[UserRead]:
        """Return the user if the credentials match, otherwise ``None``."""
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT id, name, email, password FROM users WHERE email = ?",
                (email,),
            ).fetchone()
        finally:
            conn.close()
        if not row or not verify_password(password, row["password"]):
            return None
        return UserRead(id=row["id"], name=row["name"], email=row["email"])

    @classmethod
    async def get_user_by_id(cls, user_id: int) -> Optional[UserRead]:
        """Retrieve a user by ID."""
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT id, name, email FROM users WHERE id = ?",
                (user_id,),
            ).fetchone()
        finally:
            conn.close()
        if row:
            return UserRead(id=row["id"], name=row["name"], email=row["email"])
        return None
