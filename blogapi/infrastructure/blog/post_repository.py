"""
Adapter: Post repository.

Implements PostRepository port over the post, author and comment tables.
Both reads are single JOIN statements, so loading N posts or N comments
costs one round trip rather than N + 1.
"""

import logging
from dataclasses import replace
from typing import Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine

from blogapi.domain.blog.entities import Author, Comment, Post
from blogapi.domain.blog.ports import PostRepository

logger = logging.getLogger(__name__)


def _author_from_joined_row(row) -> Author:
    return Author(
        id=row.author_id,
        first_name=row.author_first_name,
        last_name=row.author_last_name,
        email=row.author_email,
    )


def _post_from_joined_row(row) -> Post:
    return Post(
        id=row.id,
        title=row.title,
        content=row.content,
        excerpt=row.excerpt,
        author=_author_from_joined_row(row),
    )


class PostRepositoryAdapter(PostRepository):
    """Reads, inserts and deletes posts.

    Implements the PostRepository port defined in the domain layer.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def find_all_with_authors(self) -> list[Post]:
        """Return every post with its author, in one statement."""
        query = text(
            """
            SELECT p.id, p.title, p.content, p.excerpt,
                   a.id AS author_id,
                   a.first_name AS author_first_name,
                   a.last_name AS author_last_name,
                   a.email AS author_email
            FROM post p
            JOIN author a ON a.id = p.author_id
            ORDER BY p.id
            """
        )

        with self._engine.connect() as conn:
            rows = conn.execute(query).fetchall()

        return [_post_from_joined_row(row) for row in rows]

    def find_by_id_with_comments(self, post_id: int) -> Optional[Post]:
        """Return one post with its author and comments, in one statement.

        The outer join yields one row per comment (or a single row with
        NULL comment columns when there are none).
        """
        query = text(
            """
            SELECT p.id, p.title, p.content, p.excerpt,
                   a.id AS author_id,
                   a.first_name AS author_first_name,
                   a.last_name AS author_last_name,
                   a.email AS author_email,
                   c.id AS comment_id,
                   c.text AS comment_text
            FROM post p
            JOIN author a ON a.id = p.author_id
            LEFT JOIN comment c ON c.post_id = p.id
            WHERE p.id = :id
            ORDER BY c.id
            """
        )

        with self._engine.connect() as conn:
            rows = conn.execute(query, {"id": post_id}).fetchall()

        if not rows:
            return None

        post = _post_from_joined_row(rows[0])
        for row in rows:
            if row.comment_id is not None:
                post.add_comment(Comment(id=row.comment_id, text=row.comment_text))
        return post

    def save(self, post: Post) -> Post:
        query = text(
            """
            INSERT INTO post (title, content, excerpt, author_id)
            VALUES (:title, :content, :excerpt, :author_id)
            RETURNING id
            """
        )

        with self._engine.begin() as conn:
            new_id = conn.execute(
                query,
                {
                    "title": post.title,
                    "content": post.content,
                    "excerpt": post.excerpt,
                    "author_id": post.author.id,
                },
            ).scalar_one()

        logger.debug("Inserted post id=%d.", new_id)
        return replace(post, id=new_id)

    def delete(self, post_id: int) -> bool:
        """Delete the post and its comments in a single transaction."""
        with self._engine.begin() as conn:
            removed_comments = conn.execute(
                text("DELETE FROM comment WHERE post_id = :id"), {"id": post_id}
            ).rowcount
            removed_posts = conn.execute(
                text("DELETE FROM post WHERE id = :id"), {"id": post_id}
            ).rowcount

        logger.info(
            "Deleted post id=%d (%d comments removed).", post_id, removed_comments
        )
        return removed_posts > 0
