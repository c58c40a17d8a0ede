"""
Dependency injection for the blog bounded context.

Provides FastAPI dependency functions that wire repository adapters
into services via constructor injection.
These are the composition root for the blog context.
"""

from fastapi import Depends, Request
from sqlalchemy.engine import Engine

from blogapi.application.blog.author_service import AuthorService
from blogapi.application.blog.comment_service import CommentService
from blogapi.application.blog.post_service import PostService
from blogapi.infrastructure.blog.author_repository import AuthorRepositoryAdapter
from blogapi.infrastructure.blog.comment_repository import CommentRepositoryAdapter
from blogapi.infrastructure.blog.post_repository import PostRepositoryAdapter


def get_engine(request: Request) -> Engine:
    """Return the engine created by the application lifespan."""
    return request.app.state.engine


def get_author_service(engine: Engine = Depends(get_engine)) -> AuthorService:
    """Build AuthorService with its repository."""
    return AuthorService(author_repo=AuthorRepositoryAdapter(engine))


def get_post_service(
    engine: Engine = Depends(get_engine),
    author_service: AuthorService = Depends(get_author_service),
) -> PostService:
    """Build PostService with its repository and the author resolver."""
    return PostService(
        post_repo=PostRepositoryAdapter(engine),
        author_service=author_service,
    )


def get_comment_service(
    engine: Engine = Depends(get_engine),
    post_service: PostService = Depends(get_post_service),
) -> CommentService:
    """Build CommentService with its repository and the post resolver."""
    return CommentService(
        comment_repo=CommentRepositoryAdapter(engine),
        post_service=post_service,
    )
