"""
Small async client for calling Netlify functions.

    from lambdog import invoke

    user = await invoke.get("users/:id", params={"id": 42})
"""

from .client import Lambdog, invoke
from .errors import ConfigError, FunctionError, LambdogError, MissingParamError
from .logging_setup import configure_logging
from .response import LambdogResponse
from .transport import HttpxTransport, default_fetch
from .url_builder import build_url

__all__ = [
    "Lambdog",
    "invoke",
    "build_url",
    "LambdogResponse",
    "HttpxTransport",
    "default_fetch",
    "configure_logging",
    "LambdogError",
    "FunctionError",
    "MissingParamError",
    "ConfigError",
]
