"""
Error taxonomy for the export pipeline.
Every stage raises one of these; the CLI reports them and exits non-zero.
"""

from typing import Any, Optional


class ExportError(Exception):
    """Base class for all handled pipeline failures."""


class ConfigurationError(ExportError):
    """Required settings are missing or invalid. Raised before the pipeline starts."""


class RemoteQueryError(ExportError):
    """
    The Jira search request failed (transport, auth or server error).

    Attributes:
        status (Optional[int]): HTTP status code, or None for network failures.
        payload (Any): Remote-provided diagnostic body when present, else the transport message.
    """

    def __init__(self, message: str, status: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.status = status
        self.payload = payload


class PersistenceError(ExportError):
    """Creating the output directory or writing the document failed."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
