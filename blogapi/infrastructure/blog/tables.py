"""
Relational layout of the blog store.

author(id, first_name, last_name, email)
post(id, title, content, excerpt, author_id -> author.id)
comment(id, text, post_id -> post.id, removed with its post)
"""

from sqlalchemy import Column, ForeignKey, Integer, MetaData, Table, Text

metadata = MetaData()

author_table = Table(
    "author",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("first_name", Text),
    Column("last_name", Text),
    Column("email", Text),
)

post_table = Table(
    "post",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", Text),
    Column("content", Text),
    Column("excerpt", Text),
    Column("author_id", Integer, ForeignKey("author.id"), nullable=False, index=True),
)

comment_table = Table(
    "comment",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("text", Text),
    Column(
        "post_id",
        Integer,
        ForeignKey("post.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
)
