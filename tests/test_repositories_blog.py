"""
Tests for the SQLAlchemy repository adapters.

Runs against an in-memory SQLite database created per test.
Statement counting uses SQLAlchemy cursor events to check that the
eager reads need a single round trip.
"""

from contextlib import contextmanager

import pytest
from sqlalchemy import event, text
from sqlalchemy.exc import IntegrityError

from blogapi.domain.blog.entities import Author, Comment, Post
from blogapi.infrastructure.blog.author_repository import AuthorRepositoryAdapter
from blogapi.infrastructure.blog.comment_repository import CommentRepositoryAdapter
from blogapi.infrastructure.blog.post_repository import PostRepositoryAdapter


@contextmanager
def _capture_statements(engine):
    statements: list[str] = []

    def _record(_conn, _cursor, statement, _params, _context, _executemany):
        statements.append(statement)

    event.listen(engine, "before_cursor_execute", _record)
    try:
        yield statements
    finally:
        event.remove(engine, "before_cursor_execute", _record)


@pytest.fixture
def authors(engine) -> AuthorRepositoryAdapter:
    return AuthorRepositoryAdapter(engine)


@pytest.fixture
def posts(engine) -> PostRepositoryAdapter:
    return PostRepositoryAdapter(engine)


@pytest.fixture
def comments(engine) -> CommentRepositoryAdapter:
    return CommentRepositoryAdapter(engine)


@pytest.fixture
def author(authors: AuthorRepositoryAdapter) -> Author:
    return authors.save(Author(first_name="Ada", last_name="Lovelace", email="ada@example.com"))


def _count(engine, table: str) -> int:
    with engine.connect() as conn:
        return conn.execute(text(f"SELECT COUNT(*) FROM {table}")).scalar_one()


class TestAuthorRepository:
    def test_save_assigns_increasing_ids(self, authors: AuthorRepositoryAdapter) -> None:
        first = authors.save(Author(first_name="A", last_name="One", email="a@x.io"))
        second = authors.save(Author(first_name="B", last_name="Two", email="b@x.io"))

        assert first.id > 0
        assert second.id > first.id

    def test_find_by_id_round_trips_fields(
        self, authors: AuthorRepositoryAdapter, author: Author
    ) -> None:
        assert authors.find_by_id(author.id) == author

    def test_find_by_id_missing_returns_none(self, authors: AuthorRepositoryAdapter) -> None:
        assert authors.find_by_id(12345) is None

    def test_find_all_orders_by_id(self, authors: AuthorRepositoryAdapter) -> None:
        saved = [
            authors.save(Author(first_name=name, last_name="X", email=f"{name}@x.io"))
            for name in ("c", "a", "b")
        ]

        assert authors.find_all() == saved


class TestPostRepository:
    def test_save_and_list_with_authors(
        self, posts: PostRepositoryAdapter, author: Author
    ) -> None:
        saved = posts.save(Post(title="T", content="C", excerpt="E", author=author))

        (listed,) = posts.find_all_with_authors()

        assert listed.id == saved.id
        assert listed.author == author
        assert listed.comments == []

    def test_list_uses_a_single_statement(
        self, engine, posts: PostRepositoryAdapter, author: Author
    ) -> None:
        for i in range(3):
            posts.save(Post(title=f"T{i}", content="C", excerpt="E", author=author))

        with _capture_statements(engine) as statements:
            listed = posts.find_all_with_authors()

        assert len(listed) == 3
        assert len(statements) == 1

    def test_detail_loads_comments_in_creation_order(
        self,
        posts: PostRepositoryAdapter,
        comments: CommentRepositoryAdapter,
        author: Author,
    ) -> None:
        post = posts.save(Post(title="T", content="C", excerpt="E", author=author))
        for text_ in ("first", "second", "third"):
            comments.save(Comment(text=text_, post=post))

        loaded = posts.find_by_id_with_comments(post.id)

        assert [c.text for c in loaded.comments] == ["first", "second", "third"]
        assert all(c.post is loaded for c in loaded.comments)
        assert loaded.author == author

    def test_detail_uses_a_single_statement(
        self,
        engine,
        posts: PostRepositoryAdapter,
        comments: CommentRepositoryAdapter,
        author: Author,
    ) -> None:
        post = posts.save(Post(title="T", content="C", excerpt="E", author=author))
        for i in range(4):
            comments.save(Comment(text=str(i), post=post))

        with _capture_statements(engine) as statements:
            loaded = posts.find_by_id_with_comments(post.id)

        assert len(loaded.comments) == 4
        assert len(statements) == 1

    def test_detail_without_comments(
        self, posts: PostRepositoryAdapter, author: Author
    ) -> None:
        post = posts.save(Post(title="T", content="C", excerpt="E", author=author))

        assert posts.find_by_id_with_comments(post.id).comments == []

    def test_detail_missing_returns_none(self, posts: PostRepositoryAdapter) -> None:
        assert posts.find_by_id_with_comments(999) is None

    def test_save_with_dangling_author_is_rejected_by_store(
        self, posts: PostRepositoryAdapter
    ) -> None:
        ghost = Author(id=999, first_name="No", last_name="Body", email="n@x.io")

        with pytest.raises(IntegrityError):
            posts.save(Post(title="T", content="C", excerpt="E", author=ghost))

    def test_delete_removes_post_and_its_comments(
        self,
        engine,
        posts: PostRepositoryAdapter,
        comments: CommentRepositoryAdapter,
        author: Author,
    ) -> None:
        doomed = posts.save(Post(title="T", content="C", excerpt="E", author=author))
        kept = posts.save(Post(title="K", content="C", excerpt="E", author=author))
        comments.save(Comment(text="x", post=doomed))
        comments.save(Comment(text="y", post=doomed))
        comments.save(Comment(text="z", post=kept))

        assert posts.delete(doomed.id) is True

        assert posts.find_by_id_with_comments(doomed.id) is None
        assert _count(engine, "comment") == 1
        assert _count(engine, "author") == 1

    def test_delete_missing_returns_false(self, posts: PostRepositoryAdapter) -> None:
        assert posts.delete(4242) is False


class TestCommentRepository:
    def test_save_assigns_id(
        self,
        posts: PostRepositoryAdapter,
        comments: CommentRepositoryAdapter,
        author: Author,
    ) -> None:
        post = posts.save(Post(title="T", content="C", excerpt="E", author=author))

        saved = comments.save(Comment(text="hello", post=post))

        assert saved.id > 0
        assert saved.text == "hello"
