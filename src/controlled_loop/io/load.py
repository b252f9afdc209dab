from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Union

TextLike = Union[str, Path, bytes, bytearray]


class LoadError(ValueError):
    pass


def _load_text(inp: TextLike) -> str:
    if isinstance(inp, (bytes, bytearray)):
        return bytes(inp).decode("utf-8")
    p = Path(str(inp))
    try:
        return p.read_text(encoding="utf-8")
    except OSError as e:
        raise LoadError(f"cannot read {p}: {e}") from e


def load_collection(inp: TextLike) -> Union[list, dict]:
    """
    Read a JSON array or object to traverse.
    Scalars and malformed JSON raise LoadError.
    """
    text = _load_text(inp)
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as e:
        raise LoadError(f"invalid JSON at line {e.lineno} col {e.colno}: {e.msg}") from e
    if not isinstance(data, (list, Mapping)):
        raise LoadError(f"expected a JSON array or object, got {type(data).__name__}")
    return data
