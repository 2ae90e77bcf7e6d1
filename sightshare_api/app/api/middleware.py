"""
ASGI middleware for the API routes.

The static file mount at ``/`` matches every path the routers do not,
so Starlette never gets to redirect ``/api/guests/`` to ``/api/guests``.
Clients written against the old Express server send both forms, so a
trailing slash under ``/api/`` is dropped before routing.
"""

from starlette.types import ASGIApp, Receive, Scope, Send


class TrailingSlashMiddleware:
    """Strip trailing slashes from request paths below ``prefix``."""

    def __init__(self, app: ASGIApp, prefix: str = "/api/") -> None:
        self.app = app
        self.prefix = prefix

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            path = scope["path"]
            if path.startswith(self.prefix) and path.endswith("/"):
                stripped = path.rstrip("/")
                if len(stripped) >= len(self.prefix.rstrip("/")):
                    scope = dict(scope, path=stripped)
        await self.app(scope, receive, send)
