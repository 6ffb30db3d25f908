"""Error display infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ErrorHandlingSettings(InfrastructureSettings):
    """Controls how much error detail reaches the client.

    Environment Variables:
        DISPLAY_ERRORS: Surface detailed error messages instead of a generic one (default: False)
        GENERIC_ERROR_MESSAGE: Message shown when details are hidden
    """

    DISPLAY_ERRORS: bool = Field(default=False, alias="DISPLAY_ERRORS")
    GENERIC_ERROR_MESSAGE: str = Field(
        default="An unexpected error occurred. Please try again later.",
        alias="GENERIC_ERROR_MESSAGE",
    )
