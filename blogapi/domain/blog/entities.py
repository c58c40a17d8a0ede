"""
Domain entities for the blog bounded context.

Entities represent core business objects with identity and lifecycle.
Identifiers are assigned by the store, so a freshly built entity has
``id=None`` until it has been saved.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Author:
    """A person who writes posts. Never updated or deleted."""

    first_name: Optional[str]
    last_name: Optional[str]
    email: Optional[str]
    id: Optional[int] = None

    @property
    def full_name(self) -> str:
        """First and last name joined by a space; a missing part renders empty."""
        return f"{self.first_name or ''} {self.last_name or ''}"


@dataclass
class Comment:
    """A reader comment attached to exactly one post."""

    text: Optional[str]
    # Back-reference only; kept out of eq/repr so post <-> comment never recurses.
    post: Optional["Post"] = field(default=None, repr=False, compare=False)
    id: Optional[int] = None


@dataclass
class Post:
    """A blog post written by an author.

    The post owns its comments: they are kept in insertion order and
    are removed together with the post.
    """

    title: Optional[str]
    content: Optional[str]
    excerpt: Optional[str]
    author: Author
    comments: list[Comment] = field(default_factory=list)
    id: Optional[int] = None

    def add_comment(self, comment: Comment) -> None:
        """Append a comment and point it back at this post."""
        comment.post = self
        self.comments.append(comment)
