"""
Key-case conversion and query encoding at the wire boundary.

In memory, attribute names are camelCase (``revokeAllGrants``); on the wire
they are snake_case (``revoke_all_grants``). Conversion is recursive over
nested mappings and lists and leaves values untouched.
"""

import re
from typing import Any, Mapping
from urllib.parse import urlencode

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def to_snake_case(key: str) -> str:
    return _CAMEL_BOUNDARY.sub(r"_\1", key).lower()


def to_camel_case(key: str) -> str:
    head, *rest = key.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _convert_keys(value: Any, convert) -> Any:
    if isinstance(value, Mapping):
        return {
            (convert(k) if isinstance(k, str) else k): _convert_keys(v, convert)
            for k, v in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [_convert_keys(v, convert) for v in value]
    return value


def snake_case_keys(value: Any) -> Any:
    """Outbound: camelCase keys → snake_case."""
    return _convert_keys(value, to_snake_case)


def camel_case_keys(value: Any) -> Any:
    """Inbound: snake_case keys → camelCase."""
    return _convert_keys(value, to_camel_case)


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_query(params: Mapping[str, Any]) -> str:
    """
    URL-encode ``params`` with snake_case keys, or return "" when empty.

    ``None`` values are dropped; booleans serialize as ``true``/``false``.
    """
    pairs = [
        (to_snake_case(key), _query_value(value))
        for key, value in params.items()
        if value is not None
    ]
    return urlencode(pairs)
