"""
Business logic for posts.

``PostService`` reads and writes the ``posts`` table.  Every post is
returned together with a summary of its owner.  Listings are ordered
newest first (``created_at`` then ``id``, both descending, so posts
created within the same second keep a stable order across pages) and
sliced into fixed pages of ``PER_PAGE`` items.

Filters are plain functions returning an SQL fragment and its
parameters; ``_paginate`` composes any number of them into the
listing query.  Ownership checks are the caller's concern.
"""

import logging
import sqlite3
from typing import Any, List, Optional, Sequence, Tuple

from blog_api.app.core.db import get_connection
from blog_api.app.core.pagination import PER_PAGE, build_window, page_offset
from blog_api.app.schemas.post import PostOwner, PostPage, PostRead, PostWrite

Filter = Tuple[str, Sequence[Any]]

_SELECT_POSTS = """
    SELECT p.id, p.title, p.body, p.user_id, p.created_at, p.updated_at,
           u.name AS user_name
    FROM posts p
    JOIN users u ON u.id = p.user_id
"""

_NEWEST_FIRST = " ORDER BY p.created_at DESC, p.id DESC"


def owner_filter(user_id: int) -> Filter:
    """Restrict a listing to posts owned by ``user_id``."""
    return "p.user_id = ?", (user_id,)


def search_filter(term: str) -> Filter:
    """Match posts whose title or body contains ``term``.

    Both sides are case-folded with the ``casefold`` SQL function
    registered by ``get_connection``, so matching is case-insensitive
    beyond ASCII and the term is never interpreted as a pattern.
    """
    return (
        "(instr(casefold(p.title), casefold(?)) > 0"
        " OR instr(casefold(p.body), casefold(?)) > 0)",
        (term, term),
    )


class PostService:
    """Service for listing, searching and mutating posts."""

    @classmethod
    async def list_posts(cls, page: int = 1) -> PostPage:
        """Return one page of all posts, newest first."""
        return cls._paginate(page)

    @classmethod
    async def list_user_posts(cls, user_id: int, page: int = 1) -> PostPage:
        """Return one page of the posts owned by ``user_id``."""
        return cls._paginate(page, owner_filter(user_id))

    @classmethod
    async def search_posts(cls, term: str, page: int = 1) -> PostPage:
        """Return one page of posts whose title or body contains ``term``.

        ``term`` must be non-blank; the endpoint validates it before
        calling this method.
        """
        return cls._paginate(page, search_filter(term))

    @classmethod
    async def get_post(cls, post_id: int) -> Optional[PostRead]:
        """Retrieve a single post by ID, or ``None`` if it does not exist."""
        conn = get_connection()
        try:
            return cls._fetch(conn, post_id)
        finally:
            conn.close()

    @classmethod
    async def create_post(cls, data: PostWrite, user_id: int) -> PostRead:
        """Insert a post owned by ``user_id`` and return it."""
        logger = logging.getLogger(__name__)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO posts (title, body, user_id) VALUES (?, ?, ?)",
                (data.title, data.body, user_id),
            )
            post_id = cursor.lastrowid
            conn.commit()
            logger.info("User %s created post %s", user_id, post_id)
            return cls._fetch(conn, post_id)
        finally:
            conn.close()

    @classmethod
    async def update_post(cls, post_id: int, data: PostWrite) -> Optional[PostRead]:
        """Replace the title and body of a post.

        The owner never changes.  Returns the updated post or ``None``
        if it no longer exists.  Concurrent updates are last-write-wins.
        """
        logger = logging.getLogger(__name__)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                UPDATE posts
                SET title = ?, body = ?, updated_at = CURRENT_TIMESTAMP
                WHERE id = ?
                """,
                (data.title, data.body, post_id),
            )
            if cursor.rowcount == 0:
                return None
            conn.commit()
            logger.info("Updated post %s", post_id)
            return cls._fetch(conn, post_id)
        finally:
            conn.close()

    @classmethod
    async def delete_post(cls, post_id: int) -> bool:
        """Delete a post by ID.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        logger = logging.getLogger(__name__)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM posts WHERE id = ?", (post_id,))
            affected = cursor.rowcount
            conn.commit()
            if affected:
                logger.info("Deleted post %s", post_id)
            return affected > 0
        finally:
            conn.close()

    @classmethod
    def _paginate(cls, page: int, *filters: Filter) -> PostPage:
        where = ""
        params: List[Any] = []
        if filters:
            where = " WHERE " + " AND ".join(clause for clause, _ in filters)
            for _, values in filters:
                params.extend(values)
        conn = get_connection()
        try:
            total = conn.execute(
                "SELECT COUNT(*) AS count FROM posts p" + where, tuple(params)
            ).fetchone()["count"]
            offset = page_offset(page)
            rows: List[sqlite3.Row] = []
            # Pages past the end are empty; their offset may not fit an
            # SQLite integer.
            if offset < total:
                rows = conn.execute(
                    _SELECT_POSTS + where + _NEWEST_FIRST + " LIMIT ? OFFSET ?",
                    (*params, PER_PAGE, offset),
                ).fetchall()
        finally:
            conn.close()
        posts = [cls._row_to_post_read(row) for row in rows]
        return PostPage(posts=posts, pagination=build_window(page, total, len(posts)))

    @classmethod
    def _fetch(cls, conn: sqlite3.Connection, post_id: int) -> Optional[PostRead]:
        row = conn.execute(_SELECT_POSTS + " WHERE p.id = ?", (post_id,)).fetchone()
        if not row:
            return None
        return cls._row_to_post_read(row)

    @staticmethod
    def _row_to_post_read(row: sqlite3.Row) -> PostRead:
        """Convert a joined post/user row to a ``PostRead`` instance."""
        return PostRead(
            id=row["id"],
            title=row["title"],
            body=row["body"],
            user_id=row["user_id"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
            user=PostOwner(id=row["user_id"], name=row["user_name"]),
        )
