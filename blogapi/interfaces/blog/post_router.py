"""
FastAPI router for posts.

All routes delegate to PostService. No business logic here.
The listing never carries comments; only the single-post route does.
"""

from fastapi import APIRouter, Depends

from blogapi.application.blog.dtos import CreatePostCommand
from blogapi.application.blog.post_service import PostService
from blogapi.interfaces.blog.dependencies import get_post_service
from blogapi.interfaces.blog.schemas import (
    CreatePostRequest,
    PostDetailResponse,
    PostResponse,
)

router = APIRouter(prefix="/api/posts", tags=["posts"])

NOT_FOUND = {"content": {"text/plain": {}}}


@router.get(
    "",
    response_model=list[PostResponse],
    summary="List posts",
    description="All posts with their authors. Comments are not included.",
)
def get_posts(
    service: PostService = Depends(get_post_service),
) -> list[PostResponse]:
    return [PostResponse.from_result(r) for r in service.list_all()]


@router.get(
    "/{post_id}",
    response_model=PostDetailResponse,
    responses={404: {"description": "Post not found", **NOT_FOUND}},
    summary="Get a post with its comments",
)
def get_post(
    post_id: int,
    service: PostService = Depends(get_post_service),
) -> PostDetailResponse:
    return PostDetailResponse.from_result(service.get_by_id(post_id))


@router.post(
    "",
    response_model=PostResponse,
    responses={404: {"description": "Author not found", **NOT_FOUND}},
    summary="Create a post",
)
def create_post(
    request: CreatePostRequest,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    command = CreatePostCommand(
        title=request.title,
        content=request.content,
        excerpt=request.excerpt,
        author_id=request.author_id,
    )
    return PostResponse.from_result(service.create(command))
