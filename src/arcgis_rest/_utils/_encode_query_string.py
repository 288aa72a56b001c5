from enum import Enum
from typing import Any, Iterator, Mapping, Tuple
from urllib.parse import quote


def _encode_component(value: str) -> str:
    # Same character set as JavaScript's encodeURIComponent
    return quote(value, safe="-_.!~*'()")


def stringify_scalar(value: Any) -> str:
    """Render a scalar parameter value the way the REST API expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return stringify_scalar(value.value)
    return str(value)


def _flatten(key: str, value: Any) -> Iterator[Tuple[str, str]]:
    if value is None:
        return
    if isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(
            f"Parameter '{key}' holds binary data, which cannot be sent in a "
            "query string. Use a POST request instead."
        )
    if isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            yield from _flatten(f"{key}[{sub_key}]", sub_value)
    elif isinstance(value, (list, tuple, set, frozenset)):
        for item in value:
            yield from _flatten(key, item)
    else:
        yield key, stringify_scalar(value)


def encode_query_string(params: Mapping[str, Any]) -> str:
    """Encode parameters as a URL query string (without the leading ``?``).

    Keys and values are percent-encoded. Sequence values expand into one
    ``key=value`` pair per item and mappings expand into ``key[sub]=value``
    pairs, so nothing is serialized as a single blob. ``None`` values are
    skipped.

    Args:
        params: The parameters to encode.

    Returns:
        str: ``key=value`` pairs joined with ``&``.

    Raises:
        TypeError: If a value is binary.
    """
    return "&".join(
        f"{_encode_component(key)}={_encode_component(value)}"
        for name, raw in params.items()
        for key, value in _flatten(str(name), raw)
    )
