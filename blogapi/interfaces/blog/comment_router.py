"""
FastAPI router for comments, nested under their post.

Delegates to CommentService. An unknown post id yields 404.
"""

from fastapi import APIRouter, Depends

from blogapi.application.blog.comment_service import CommentService
from blogapi.application.blog.dtos import CreateCommentCommand
from blogapi.interfaces.blog.dependencies import get_comment_service
from blogapi.interfaces.blog.schemas import CommentResponse, CreateCommentRequest

router = APIRouter(prefix="/api/posts", tags=["comments"])


@router.post(
    "/{post_id}/comments",
    response_model=CommentResponse,
    responses={404: {"description": "Post not found", "content": {"text/plain": {}}}},
    summary="Comment on a post",
)
def create_comment(
    post_id: int,
    request: CreateCommentRequest,
    service: CommentService = Depends(get_comment_service),
) -> CommentResponse:
    command = CreateCommentCommand(text=request.text)
    return CommentResponse.from_result(service.create(command, post_id))
