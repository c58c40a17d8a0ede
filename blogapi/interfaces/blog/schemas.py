"""
Pydantic schemas for the blog API request/response contract.

Field names are snake_case in Python and camelCase on the wire
(``firstName``, ``fullName``, ``authorId``).
Text fields are optional: an absent key is stored and returned as null.
Only authorId is required, since it must name an existing author.
No business logic belongs here.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from blogapi.application.blog.dtos import (
    AuthorResult,
    CommentResult,
    PostDetailResult,
    PostResult,
)


class CamelModel(BaseModel):
    """Base schema that reads and writes camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateAuthorRequest(CamelModel):
    """Request schema for creating an author."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None


class CreatePostRequest(CamelModel):
    """Request schema for creating a post.

    Attributes:
        title: Post title.
        content: Full post body.
        excerpt: Short teaser shown in listings.
        author_id: Id of an existing author; unknown ids yield 404.
    """

    title: Optional[str] = None
    content: Optional[str] = None
    excerpt: Optional[str] = None
    author_id: int


class CreateCommentRequest(CamelModel):
    """Request schema for adding a comment to a post."""

    text: Optional[str] = None


class AuthorResponse(CamelModel):
    """An author as returned by the API."""

    id: int
    full_name: str
    email: Optional[str]

    @classmethod
    def from_result(cls, result: AuthorResult) -> "AuthorResponse":
        return cls(id=result.id, full_name=result.full_name, email=result.email)


class CommentResponse(CamelModel):
    """A comment as returned by the API. No link back to the post."""

    id: int
    text: Optional[str]

    @classmethod
    def from_result(cls, result: CommentResult) -> "CommentResponse":
        return cls(id=result.id, text=result.text)


class PostResponse(CamelModel):
    """A post as listed by the API. The id is a string on the wire."""

    id: str
    title: Optional[str]
    content: Optional[str]
    excerpt: Optional[str]
    author: AuthorResponse

    @classmethod
    def from_result(cls, result: PostResult) -> "PostResponse":
        return cls(
            id=result.id,
            title=result.title,
            content=result.content,
            excerpt=result.excerpt,
            author=AuthorResponse.from_result(result.author),
        )


class PostDetailResponse(PostResponse):
    """A single post with its comments in creation order."""

    comments: list[CommentResponse]

    @classmethod
    def from_result(cls, result: PostDetailResult) -> "PostDetailResponse":
        return cls(
            id=result.id,
            title=result.title,
            content=result.content,
            excerpt=result.excerpt,
            author=AuthorResponse.from_result(result.author),
            comments=[CommentResponse.from_result(c) for c in result.comments],
        )
