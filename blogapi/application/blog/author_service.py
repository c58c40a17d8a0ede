"""
Service: Author management.

Operations: list all authors, fetch one by id, create one.
Side effects: create inserts one author row.
Failure cases: EntityNotFoundError("Author", id) on lookups by id.
"""

import logging

from blogapi.application.blog.dtos import AuthorResult, CreateAuthorCommand
from blogapi.application.blog.mappers import author_from_command, to_author_result
from blogapi.domain.blog.entities import Author
from blogapi.domain.blog.errors import author_not_found
from blogapi.domain.blog.ports import AuthorRepository

logger = logging.getLogger(__name__)


class AuthorService:
    """Orchestrates author reads and creation.

    Also serves as the author resolver for post creation, so the
    "author must exist" rule lives in one place.
    """

    def __init__(self, author_repo: AuthorRepository) -> None:
        self._author_repo = author_repo

    def list_all(self) -> list[AuthorResult]:
        """Return every author. No pagination."""
        authors = self._author_repo.find_all()
        logger.info("Listing %d authors.", len(authors))
        return [to_author_result(a) for a in authors]

    def get(self, author_id: int) -> Author:
        """Return the author entity with the given id.

        Raises:
            EntityNotFoundError: If no author has this id.
        """
        author = self._author_repo.find_by_id(author_id)
        if author is None:
            raise author_not_found(author_id)
        return author

    def get_by_id(self, author_id: int) -> AuthorResult:
        """Return the mapped author with the given id.

        Raises:
            EntityNotFoundError: If no author has this id.
        """
        return to_author_result(self.get(author_id))

    def create(self, command: CreateAuthorCommand) -> AuthorResult:
        """Persist a new author and return it with its generated id."""
        author = self._author_repo.save(author_from_command(command))
        logger.info("Created author id=%d.", author.id)
        return to_author_result(author)
