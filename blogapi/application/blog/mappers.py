"""
Mapping between domain entities and application DTOs.

Pure functions with no side effects. A None input maps to a None output;
nothing else can fail here.
"""

from typing import Optional

from blogapi.application.blog.dtos import (
    AuthorResult,
    CommentResult,
    CreateAuthorCommand,
    CreateCommentCommand,
    CreatePostCommand,
    PostDetailResult,
    PostResult,
)
from blogapi.domain.blog.entities import Author, Comment, Post


def to_author_result(author: Optional[Author]) -> Optional[AuthorResult]:
    if author is None:
        return None
    return AuthorResult(
        id=author.id,
        full_name=author.full_name,
        email=author.email,
    )


def author_from_command(command: Optional[CreateAuthorCommand]) -> Optional[Author]:
    if command is None:
        return None
    return Author(
        first_name=command.first_name,
        last_name=command.last_name,
        email=command.email,
    )


def to_comment_result(comment: Optional[Comment]) -> Optional[CommentResult]:
    if comment is None:
        return None
    return CommentResult(id=comment.id, text=comment.text)


def comment_from_command(
    command: Optional[CreateCommentCommand], post: Optional[Post]
) -> Optional[Comment]:
    if command is None:
        return None
    return Comment(text=command.text, post=post)


def _post_id_text(post: Post) -> Optional[str]:
    return str(post.id) if post.id is not None else None


def to_post_result(post: Optional[Post]) -> Optional[PostResult]:
    """Map a post to its listing shape. Comments are not included."""
    if post is None:
        return None
    return PostResult(
        id=_post_id_text(post),
        title=post.title,
        content=post.content,
        excerpt=post.excerpt,
        author=to_author_result(post.author),
    )


def to_post_detail_result(post: Optional[Post]) -> Optional[PostDetailResult]:
    """Map a post to its detail shape, keeping the comment order."""
    if post is None:
        return None
    return PostDetailResult(
        id=_post_id_text(post),
        title=post.title,
        content=post.content,
        excerpt=post.excerpt,
        author=to_author_result(post.author),
        comments=[to_comment_result(c) for c in post.comments],
    )


def post_from_command(
    command: Optional[CreatePostCommand], author: Optional[Author]
) -> Optional[Post]:
    """Build a new post. The author comes from the resolved entity, not the command."""
    if command is None:
        return None
    return Post(
        title=command.title,
        content=command.content,
        excerpt=command.excerpt,
        author=author,
    )
