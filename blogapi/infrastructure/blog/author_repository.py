"""
Adapter: Author repository.

Implements AuthorRepository port over the author table.
"""

import logging
from dataclasses import replace
from typing import Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine

from blogapi.domain.blog.entities import Author
from blogapi.domain.blog.ports import AuthorRepository

logger = logging.getLogger(__name__)


def row_to_author(row) -> Author:
    return Author(
        id=row.id,
        first_name=row.first_name,
        last_name=row.last_name,
        email=row.email,
    )


class AuthorRepositoryAdapter(AuthorRepository):
    """Reads and inserts authors.

    Implements the AuthorRepository port defined in the domain layer.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def find_all(self) -> list[Author]:
        query = text(
            """
            SELECT id, first_name, last_name, email
            FROM author
            ORDER BY id
            """
        )

        with self._engine.connect() as conn:
            rows = conn.execute(query).fetchall()

        return [row_to_author(row) for row in rows]

    def find_by_id(self, author_id: int) -> Optional[Author]:
        query = text(
            """
            SELECT id, first_name, last_name, email
            FROM author
            WHERE id = :id
            """
        )

        with self._engine.connect() as conn:
            row = conn.execute(query, {"id": author_id}).first()

        return row_to_author(row) if row is not None else None

    def save(self, author: Author) -> Author:
        query = text(
            """
            INSERT INTO author (first_name, last_name, email)
            VALUES (:first_name, :last_name, :email)
            RETURNING id
            """
        )

        with self._engine.begin() as conn:
            new_id = conn.execute(
                query,
                {
                    "first_name": author.first_name,
                    "last_name": author.last_name,
                    "email": author.email,
                },
            ).scalar_one()

        logger.debug("Inserted author id=%d.", new_id)
        return replace(author, id=new_id)
