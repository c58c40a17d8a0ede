"""HTTP hardening: secure response headers and request rate limiting."""
