from typing import Any, Dict

import httpx


class LambdogResponse:
    def __init__(
        self,
        status: int,
        status_text: str = '',
        headers: Dict[str, str] = None,
        data: Any = None,
        response: httpx.Response = None,
    ):
        """Initialize a LambdogResponse with the normalized result of a function call."""
        self.status = status
        self.status_text = status_text
        self.headers = headers or {}
        self.data = data
        self.response = response

    @property
    def content_type(self) -> str:
        """Content type the function responded with, empty if it sent none."""
        return self.headers.get('content-type', '')

    def __repr__(self) -> str:
        return f"LambdogResponse(status={self.status}, status_text={self.status_text!r}, data={self.data!r})"
