"""
Adapter: Comment repository.

Implements CommentRepository port over the comment table.
"""

import logging
from dataclasses import replace

from sqlalchemy import text
from sqlalchemy.engine import Engine

from blogapi.domain.blog.entities import Comment
from blogapi.domain.blog.ports import CommentRepository

logger = logging.getLogger(__name__)


class CommentRepositoryAdapter(CommentRepository):
    """Inserts comments.

    Implements the CommentRepository port defined in the domain layer.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def save(self, comment: Comment) -> Comment:
        query = text(
            """
            INSERT INTO comment (text, post_id)
            VALUES (:text, :post_id)
            RETURNING id
            """
        )

        with self._engine.begin() as conn:
            new_id = conn.execute(
                query, {"text": comment.text, "post_id": comment.post.id}
            ).scalar_one()

        logger.debug("Inserted comment id=%d on post id=%d.", new_id, comment.post.id)
        return replace(comment, id=new_id)
