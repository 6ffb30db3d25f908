"""Starlette middleware carrying the session over an HTTP cookie."""

from typing import Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from infrastructure.logging.context import bind_request_context
from infrastructure.sessions.context import bind_session
from infrastructure.sessions.models import USER_ID_KEY
from infrastructure.sessions.service import SessionService

SessionFactory = Callable[..., SessionService]


class SessionMiddleware(BaseHTTPMiddleware):
    """Starts a session per request and writes back its regenerated identifier.

    The session is available as ``request.state.session`` and through
    ``current_session()`` while the request is handled. The cookie is
    HTTP-only, SameSite as configured, and secure when the request used TLS.
    """

    def __init__(
        self,
        app,
        session_factory: Optional[SessionFactory] = None,
        cookie_name: Optional[str] = None,
    ):
        super().__init__(app)
        if session_factory is None or cookie_name is None:
            # Import here to avoid circular dependency
            from infrastructure.services.providers import (
                create_session_service,
                get_settings,
            )

            session_factory = session_factory or create_session_service
            cookie_name = cookie_name or get_settings().get(
                "session.cookie_name", "session_id"
            )
        self.session_factory = session_factory
        self.cookie_name = cookie_name

    async def dispatch(self, request: Request, call_next):
        session = self.session_factory(
            request.cookies.get(self.cookie_name),
            secure=request.url.scheme == "https",
        )
        request.state.session = session

        with bind_session(session):
            session.start()
            with bind_request_context(
                user_id=session.get(USER_ID_KEY),
                request_path=request.url.path,
                request_method=request.method,
            ):
                response = await call_next(request)

        policy = session.cookie_policy
        if session.session_id:
            response.set_cookie(
                key=policy.name,
                value=session.session_id,
                httponly=policy.http_only,
                secure=policy.secure,
                samesite=policy.same_site,
            )
        else:
            response.delete_cookie(key=policy.name)
        return response
