"""Query parameter builder for the remote APIs."""

from __future__ import annotations

from typing import Any


def build_query_params(**kwargs: Any) -> list[tuple[str, str]]:
    """Build a list of query parameter tuples from keyword arguments.

    None values are dropped, booleans become ``true``/``false`` and list or
    tuple values repeat the key once per item.

    Returns:
        List of (key, value) tuples suitable for httpx params.
    """
    params: list[tuple[str, str]] = []
    for key, value in kwargs.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            params.extend((key, _format_value(item)) for item in value)
        else:
            params.append((key, _format_value(value)))
    return params


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
