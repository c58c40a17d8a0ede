"""
Domain-specific errors for the blog bounded context.

There is a single failure kind: a lookup by id that matched no row.
It is mapped to an HTTP response at the interface layer.
No framework imports allowed.
"""

AUTHOR = "Author"
POST = "Post"


class BlogDomainError(Exception):
    """Base error for all blog domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class EntityNotFoundError(BlogDomainError):
    """Raised when an entity lookup by id finds nothing.

    The ``entity`` attribute tags which kind of entity was missing,
    so callers never need to distinguish subclasses.
    """

    def __init__(self, entity: str, entity_id: int) -> None:
        super().__init__(f"{entity} not found with id: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


def author_not_found(author_id: int) -> EntityNotFoundError:
    return EntityNotFoundError(AUTHOR, author_id)


def post_not_found(post_id: int) -> EntityNotFoundError:
    return EntityNotFoundError(POST, post_id)
