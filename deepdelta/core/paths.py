"""Path construction for difference addressing."""

from __future__ import annotations


def join_key(path: str, key: str) -> str:
    if not path:
        return key
    return f"{path}.{key}"


def join_index(path: str, index: int) -> str:
    return f"{path}[{index}]"
