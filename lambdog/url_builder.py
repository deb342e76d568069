"""
Turns a function path template plus parameters into a request path.

Placeholders (`:name` segments) are filled from the parameters, whatever
is left over becomes the query string.
"""
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union
from urllib.parse import quote

from .errors import MissingParamError

# Characters encodeURIComponent leaves alone besides alphanumerics
_SAFE_CHARS = "-_.!~*'()"

ParamPairs = List[Tuple[str, Any]]
Params = Union[Mapping[str, Any], Iterable[Tuple[str, Any]], None]


def encode_component(value: Any) -> str:
    """Percent-encode a value the way encodeURIComponent(String(value)) does."""
    return quote(_to_string(value), safe=_SAFE_CHARS)


def _to_string(value: Any) -> str:
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)


def _to_pairs(query: Params) -> ParamPairs:
    """Flatten a mapping or a sequence of pairs into an ordered list of pairs."""
    if not query:
        return []
    items = query.items() if isinstance(query, Mapping) else query

    pairs = []
    for key, value in items:
        if isinstance(value, (list, tuple)):
            pairs.extend((key, item) for item in value)
        else:
            pairs.append((key, value))
    return pairs


def _pop_param(pairs: ParamPairs, name: str) -> Tuple[bool, Any]:
    for idx, (key, value) in enumerate(pairs):
        if key == name:
            del pairs[idx]
            return True, value
    return False, None


def build_query(pairs: ParamPairs) -> str:
    """Build `?k=v&k2=v2` from pairs, or an empty string if there are none."""
    if not pairs:
        return ""
    return "?" + "&".join(
        f"{encode_component(key)}={encode_component(value)}" for key, value in pairs
    )


def build_url(path: str, query: Optional[Params] = None) -> str:
    """Resolve `:name` placeholders in `path` and append leftover params.

    Args:
        path: Function path such as ``users/:id``.
        query: Mapping or sequence of ``(name, value)`` pairs. Never mutated.

    Returns:
        The relative path plus query string, e.g. ``users/42?expand=true``.

    Raises:
        MissingParamError: A placeholder has no matching parameter.
    """
    remaining = _to_pairs(query)

    segments = []
    for segment in path.split("/"):
        if segment.startswith(":"):
            name = segment[1:]
            found, value = _pop_param(remaining, name)
            if not found:
                raise MissingParamError(name, path)
            segment = encode_component(value)
        segments.append(segment)

    return "/".join(segments) + build_query(remaining)
