"""
FastAPI router for authors.

All routes delegate to AuthorService. No business logic here.
Missing authors are mapped to 404 by the centralized error handlers.
"""

from fastapi import APIRouter, Depends

from blogapi.application.blog.author_service import AuthorService
from blogapi.application.blog.dtos import CreateAuthorCommand
from blogapi.interfaces.blog.dependencies import get_author_service
from blogapi.interfaces.blog.schemas import AuthorResponse, CreateAuthorRequest

router = APIRouter(prefix="/api/authors", tags=["authors"])


@router.get(
    "",
    response_model=list[AuthorResponse],
    summary="List authors",
)
def get_authors(
    service: AuthorService = Depends(get_author_service),
) -> list[AuthorResponse]:
    return [AuthorResponse.from_result(r) for r in service.list_all()]


@router.get(
    "/{author_id}",
    response_model=AuthorResponse,
    responses={404: {"description": "Author not found", "content": {"text/plain": {}}}},
    summary="Get an author",
)
def get_author(
    author_id: int,
    service: AuthorService = Depends(get_author_service),
) -> AuthorResponse:
    return AuthorResponse.from_result(service.get_by_id(author_id))


@router.post(
    "",
    response_model=AuthorResponse,
    summary="Create an author",
)
def create_author(
    request: CreateAuthorRequest,
    service: AuthorService = Depends(get_author_service),
) -> AuthorResponse:
    command = CreateAuthorCommand(
        first_name=request.first_name,
        last_name=request.last_name,
        email=request.email,
    )
    return AuthorResponse.from_result(service.create(command))
