"""
Application layer for the blog bounded context.

Services check that referenced entities exist, call the repositories,
and map entities to result DTOs. No framework or infrastructure imports allowed.
"""
