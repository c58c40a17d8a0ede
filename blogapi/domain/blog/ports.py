"""
Port interfaces (ABCs) for the blog bounded context.

Ports define the contracts that the domain requires from the persistence store.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from blogapi.domain.blog.entities import Author, Comment, Post


class AuthorRepository(ABC):
    """Port for reading and creating authors."""

    @abstractmethod
    def find_all(self) -> list[Author]:
        """Return every author, ordered by id."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, author_id: int) -> Optional[Author]:
        """Return the author with the given id, or None."""
        raise NotImplementedError

    @abstractmethod
    def save(self, author: Author) -> Author:
        """Insert an author and return it with its generated id."""
        raise NotImplementedError


class PostRepository(ABC):
    """Port for reading, creating and deleting posts.

    Both read operations must fetch the related rows in the same
    statement as the posts themselves, never one query per related row.
    """

    @abstractmethod
    def find_all_with_authors(self) -> list[Post]:
        """Return every post with its author loaded, ordered by id.

        Comments are not loaded; each returned post has an empty list.
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id_with_comments(self, post_id: int) -> Optional[Post]:
        """Return a post with its author and ordered comments, or None."""
        raise NotImplementedError

    @abstractmethod
    def save(self, post: Post) -> Post:
        """Insert a post and return it with its generated id.

        The post's author must already be persisted.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, post_id: int) -> bool:
        """Delete a post together with all of its comments.

        Returns:
            True if a post row was removed, False if none matched.
        """
        raise NotImplementedError


class CommentRepository(ABC):
    """Port for creating comments."""

    @abstractmethod
    def save(self, comment: Comment) -> Comment:
        """Insert a comment and return it with its generated id.

        The comment's post must already be persisted.
        """
        raise NotImplementedError
