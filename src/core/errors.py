from enum import Enum
from typing import Optional


class ProbeErrorKind(str, Enum):
    TRANSPORT = "transport"
    UNEXPECTED_STATUS = "unexpected_status"
    PARSE = "parse"


class ProbeError(Exception):
    """
    A single failed probe of a mirror backend.

    The kind tells callers whether the request never completed (transport),
    completed with a status the freshness probe does not accept, or returned
    a Last-Modified header that could not be read.
    """

    def __init__(
        self,
        kind: ProbeErrorKind,
        message: str,
        backend: str,
        url: str,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.backend = backend
        self.url = url
        self.status_code = status_code


class ConfigError(Exception):
    """Raised when the exporter cannot start with the given configuration."""
