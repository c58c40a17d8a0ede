"""
Shared module package.

Contains cross-cutting concerns used by every router:
- Error handling and mapping
- Security headers and rate limiting
- Logging configuration
"""
