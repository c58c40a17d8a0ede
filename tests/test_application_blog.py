"""
Tests for the blog application layer (services).

Tests services with mocked ports. No real infrastructure needed.
Each test verifies orchestration: existence checks happen before writes.
"""

from dataclasses import replace
from unittest.mock import MagicMock

import pytest

from blogapi.application.blog.author_service import AuthorService
from blogapi.application.blog.comment_service import CommentService
from blogapi.application.blog.dtos import (
    AuthorResult,
    CommentResult,
    CreateAuthorCommand,
    CreateCommentCommand,
    CreatePostCommand,
)
from blogapi.application.blog.post_service import PostService
from blogapi.domain.blog.entities import Author, Comment, Post
from blogapi.domain.blog.errors import EntityNotFoundError
from blogapi.domain.blog.ports import (
    AuthorRepository,
    CommentRepository,
    PostRepository,
)

AUTHOR = Author(id=1, first_name="Ada", last_name="Lovelace", email="ada@example.com")


def _saved(entity_id: int):
    """side_effect for repo.save: echo the entity back with an id."""
    return lambda entity: replace(entity, id=entity_id)


@pytest.fixture
def author_repo() -> MagicMock:
    repo = MagicMock(spec=AuthorRepository)
    repo.find_by_id.side_effect = lambda author_id: AUTHOR if author_id == 1 else None
    return repo


@pytest.fixture
def post_repo() -> MagicMock:
    return MagicMock(spec=PostRepository)


@pytest.fixture
def comment_repo() -> MagicMock:
    return MagicMock(spec=CommentRepository)


@pytest.fixture
def author_service(author_repo: MagicMock) -> AuthorService:
    return AuthorService(author_repo=author_repo)


@pytest.fixture
def post_service(post_repo: MagicMock, author_service: AuthorService) -> PostService:
    return PostService(post_repo=post_repo, author_service=author_service)


class TestAuthorService:
    """Tests for the AuthorService."""

    def test_list_all_maps_every_author(
        self, author_service: AuthorService, author_repo: MagicMock
    ) -> None:
        author_repo.find_all.return_value = [
            AUTHOR,
            Author(id=2, first_name="Alan", last_name="Turing", email="alan@example.com"),
        ]

        results = author_service.list_all()

        assert [r.full_name for r in results] == ["Ada Lovelace", "Alan Turing"]

    def test_get_by_id_returns_mapped_author(self, author_service: AuthorService) -> None:
        assert author_service.get_by_id(1) == AuthorResult(
            id=1, full_name="Ada Lovelace", email="ada@example.com"
        )

    def test_get_by_id_missing_raises_not_found(self, author_service: AuthorService) -> None:
        with pytest.raises(EntityNotFoundError, match="^Author not found with id: 404$"):
            author_service.get_by_id(404)

    def test_create_persists_and_maps(
        self, author_service: AuthorService, author_repo: MagicMock
    ) -> None:
        author_repo.save.side_effect = _saved(10)

        result = author_service.create(
            CreateAuthorCommand(first_name="Alan", last_name="Turing", email="alan@example.com")
        )

        assert result == AuthorResult(id=10, full_name="Alan Turing", email="alan@example.com")
        saved = author_repo.save.call_args.args[0]
        assert saved.id is None


class TestPostService:
    """Tests for the PostService."""

    def test_list_all_returns_posts_without_comments(
        self, post_service: PostService, post_repo: MagicMock
    ) -> None:
        post_repo.find_all_with_authors.return_value = [
            Post(id=3, title="t", content="c", excerpt="e", author=AUTHOR)
        ]

        (result,) = post_service.list_all()

        assert result.id == "3"
        assert result.author.full_name == "Ada Lovelace"
        assert not hasattr(result, "comments")

    def test_get_by_id_returns_comments(
        self, post_service: PostService, post_repo: MagicMock
    ) -> None:
        post = Post(id=3, title="t", content="c", excerpt="e", author=AUTHOR)
        post.add_comment(Comment(id=1, text="one"))
        post_repo.find_by_id_with_comments.return_value = post

        result = post_service.get_by_id(3)

        assert result.comments == [CommentResult(id=1, text="one")]
        post_repo.find_by_id_with_comments.assert_called_once_with(3)

    def test_get_by_id_missing_raises_not_found(
        self, post_service: PostService, post_repo: MagicMock
    ) -> None:
        post_repo.find_by_id_with_comments.return_value = None

        with pytest.raises(EntityNotFoundError) as excinfo:
            post_service.get_by_id(8)

        assert excinfo.value.entity == "Post"
        assert excinfo.value.message == "Post not found with id: 8"

    def test_create_attaches_resolved_author(
        self, post_service: PostService, post_repo: MagicMock
    ) -> None:
        post_repo.save.side_effect = _saved(5)

        result = post_service.create(
            CreatePostCommand(title="t", content="c", excerpt="e", author_id=1)
        )

        assert result.id == "5"
        assert result.author == AuthorResult(
            id=1, full_name="Ada Lovelace", email="ada@example.com"
        )
        assert post_repo.save.call_args.args[0].author is AUTHOR

    def test_create_with_unknown_author_writes_nothing(
        self, post_service: PostService, post_repo: MagicMock
    ) -> None:
        with pytest.raises(EntityNotFoundError, match="^Author not found with id: 77$"):
            post_service.create(
                CreatePostCommand(title="t", content="c", excerpt="e", author_id=77)
            )

        post_repo.save.assert_not_called()


class TestCommentService:
    """Tests for the CommentService."""

    def test_create_attaches_comment_to_post(
        self, post_service: PostService, post_repo: MagicMock, comment_repo: MagicMock
    ) -> None:
        post = Post(id=3, title="t", content="c", excerpt="e", author=AUTHOR)
        post_repo.find_by_id_with_comments.return_value = post
        comment_repo.save.side_effect = _saved(21)
        service = CommentService(comment_repo=comment_repo, post_service=post_service)

        result = service.create(CreateCommentCommand(text="great read"), post_id=3)

        assert result == CommentResult(id=21, text="great read")
        assert comment_repo.save.call_args.args[0].post is post

    def test_create_on_unknown_post_writes_nothing(
        self, post_service: PostService, post_repo: MagicMock, comment_repo: MagicMock
    ) -> None:
        post_repo.find_by_id_with_comments.return_value = None
        service = CommentService(comment_repo=comment_repo, post_service=post_service)

        with pytest.raises(EntityNotFoundError, match="^Post not found with id: 13$"):
            service.create(CreateCommentCommand(text="hello?"), post_id=13)

        comment_repo.save.assert_not_called()
