"""
Exceptions raised by lambdog
"""
from typing import Any, Dict, Optional


class LambdogError(Exception):
    """Base class for every error raised by this package."""


class FunctionError(LambdogError):
    """Raised when a function responds with a non-success status.

    The message is exactly the response body text. The status code, headers
    and raw response are attached for callers that need more than the text.
    """

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        headers: Dict[str, str] = None,
        response: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.headers = headers or {}
        self.response = response

    def __str__(self) -> str:
        return self.message


class MissingParamError(LambdogError):
    """Raised when a `:name` placeholder has no matching parameter."""

    def __init__(self, name: str, path: str):
        super().__init__(f"Missing value for path parameter '{name}' in '{path}'")
        self.name = name
        self.path = path


class ConfigError(LambdogError):
    pass
