"""
WSGI compatibility layer.

Exposes the ASGI application to hosts that only speak WSGI
(gunicorn sync workers, waitress, mod_wsgi). Prefer ASGI deployment.
"""

from blogapi.main import app, build_wsgi_app

application = build_wsgi_app(app)
