"""
Errors
======
Failure taxonomy for the builds board.

Every stage raises a subclass of BuildsBoardError at the point the failure is
detected. The request handler is the only place these are caught; it logs
them and collapses all of them into one 500 response.
"""
from typing import Optional


class BuildsBoardError(Exception):
    """Base class for every failure the builds board reports."""


class ConfigurationError(BuildsBoardError):
    """Required process configuration is missing or invalid."""


class TransportError(BuildsBoardError):
    """The upstream build API could not be reached or answered with an error status."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(BuildsBoardError):
    """The upstream body is not a JSON array of builds."""


class TemplateLoadError(BuildsBoardError):
    """The page template is missing or malformed."""


class RenderError(BuildsBoardError):
    """The page template failed while executing against its context."""
