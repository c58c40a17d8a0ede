"""
Infrastructure adapters for the blog bounded context.

Each repository implements a domain port (ABC) on top of a SQLAlchemy engine.
"""
