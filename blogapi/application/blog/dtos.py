"""
Data Transfer Objects for the blog application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class CreateAuthorCommand:
    """Input DTO for creating an author. Any field may be None.

    Attributes:
        first_name: Author's given name.
        last_name: Author's family name.
        email: Contact address. Not validated or deduplicated.
    """

    first_name: Optional[str]
    last_name: Optional[str]
    email: Optional[str]


@dataclass(frozen=True)
class CreatePostCommand:
    """Input DTO for creating a post.

    Attributes:
        title: Post title.
        content: Full post body.
        excerpt: Short teaser shown in listings.
        author_id: Id of an existing author.
    """

    title: Optional[str]
    content: Optional[str]
    excerpt: Optional[str]
    author_id: int


@dataclass(frozen=True)
class CreateCommentCommand:
    """Input DTO for creating a comment. The post id travels separately."""

    text: Optional[str]


@dataclass(frozen=True)
class AuthorResult:
    """Output DTO for an author.

    Attributes:
        id: Store-generated identifier.
        full_name: First and last name joined by a single space.
        email: Contact address.
    """

    id: int
    full_name: str
    email: Optional[str]


@dataclass(frozen=True)
class CommentResult:
    """Output DTO for a comment. Carries no reference back to its post."""

    id: int
    text: Optional[str]


@dataclass(frozen=True)
class PostResult:
    """Output DTO for a post as shown in listings.

    Attributes:
        id: Store-generated identifier, rendered as text.
        title: Post title.
        content: Full post body.
        excerpt: Short teaser.
        author: The post's author.
    """

    id: str
    title: Optional[str]
    content: Optional[str]
    excerpt: Optional[str]
    author: AuthorResult


@dataclass(frozen=True)
class PostDetailResult(PostResult):
    """Output DTO for a single post: the listing fields plus its comments."""

    comments: list[CommentResult] = field(default_factory=list)
