"""
Service: Post management.

Operations: list all posts (with authors), fetch one post (with comments),
create a post for an existing author.
Side effects: create inserts one post row.
Failure cases: EntityNotFoundError("Post", id) on lookup,
EntityNotFoundError("Author", id) on create with an unknown author.
"""

import logging

from blogapi.application.blog.author_service import AuthorService
from blogapi.application.blog.dtos import (
    CreatePostCommand,
    PostDetailResult,
    PostResult,
)
from blogapi.application.blog.mappers import (
    post_from_command,
    to_post_detail_result,
    to_post_result,
)
from blogapi.domain.blog.entities import Post
from blogapi.domain.blog.errors import post_not_found
from blogapi.domain.blog.ports import PostRepository

logger = logging.getLogger(__name__)


class PostService:
    """Orchestrates post reads and creation."""

    def __init__(
        self, post_repo: PostRepository, author_service: AuthorService
    ) -> None:
        """Initialize the service.

        Args:
            post_repo: Repository for post persistence.
            author_service: Resolves the author a new post refers to.
        """
        self._post_repo = post_repo
        self._author_service = author_service

    def list_all(self) -> list[PostResult]:
        """Return every post with its author, without comments."""
        posts = self._post_repo.find_all_with_authors()
        logger.info("Listing %d posts.", len(posts))
        return [to_post_result(p) for p in posts]

    def get(self, post_id: int) -> Post:
        """Return the post entity with its comments loaded.

        Raises:
            EntityNotFoundError: If no post has this id.
        """
        post = self._post_repo.find_by_id_with_comments(post_id)
        if post is None:
            raise post_not_found(post_id)
        return post

    def get_by_id(self, post_id: int) -> PostDetailResult:
        """Return the detailed post: listing fields plus ordered comments.

        Raises:
            EntityNotFoundError: If no post has this id.
        """
        return to_post_detail_result(self.get(post_id))

    def create(self, command: CreatePostCommand) -> PostResult:
        """Create a post for an existing author.

        The author is resolved before anything is written, so an unknown
        author id leaves the store untouched.

        Raises:
            EntityNotFoundError: If the referenced author does not exist.
        """
        author = self._author_service.get(command.author_id)
        post = self._post_repo.save(post_from_command(command, author))
        logger.info("Created post id=%d for author id=%d.", post.id, author.id)
        return to_post_result(post)
