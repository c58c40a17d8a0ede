"""
Service: Comment creation.

Input: CreateCommentCommand plus the id of the post being commented on.
Output: CommentResult
Side effects: inserts one comment row.
Failure cases: EntityNotFoundError("Post", id) if the post does not exist.
"""

import logging

from blogapi.application.blog.dtos import CommentResult, CreateCommentCommand
from blogapi.application.blog.mappers import comment_from_command, to_comment_result
from blogapi.application.blog.post_service import PostService
from blogapi.domain.blog.ports import CommentRepository

logger = logging.getLogger(__name__)


class CommentService:
    """Orchestrates adding a comment to an existing post."""

    def __init__(
        self, comment_repo: CommentRepository, post_service: PostService
    ) -> None:
        self._comment_repo = comment_repo
        self._post_service = post_service

    def create(self, command: CreateCommentCommand, post_id: int) -> CommentResult:
        """Attach a new comment to the given post.

        Raises:
            EntityNotFoundError: If no post has this id.
        """
        post = self._post_service.get(post_id)
        comment = self._comment_repo.save(comment_from_command(command, post))
        logger.info("Created comment id=%d on post id=%d.", comment.id, post_id)
        return to_comment_result(comment)
