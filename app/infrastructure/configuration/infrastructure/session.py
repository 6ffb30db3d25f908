"""Session lifecycle infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class SessionSettings(InfrastructureSettings):
    """Session lifecycle configuration.

    Environment Variables:
        SESSION_TIMEOUT: Idle seconds before a session is invalidated (default: 1800)
        SESSION_COOKIE_NAME: Cookie carrying the session identifier (default: session_id)
        SESSION_COOKIE_SAMESITE: SameSite attribute of the session cookie (default: lax)

    Example:
        ```python
        from infrastructure.services import get_settings

        timeout = get_settings().session.SESSION_TIMEOUT
        ```
    """

    SESSION_TIMEOUT: int = Field(default=1800, alias="SESSION_TIMEOUT", ge=1)
    SESSION_COOKIE_NAME: str = Field(
        default="session_id", alias="SESSION_COOKIE_NAME"
    )
    SESSION_COOKIE_SAMESITE: str = Field(
        default="lax", alias="SESSION_COOKIE_SAMESITE"
    )
