from __future__ import annotations
from collections.abc import Mapping, Sequence
from typing import Any, List, Optional


def derive_keys(source: Any, explicit: Optional[List[Any]] = None) -> List[Any]:
    """
    Ordered key sequence for a source collection.
    Explicit keys win; mappings give their own key order, sequences their
    indices. Anything else (including None) yields no keys.
    """
    if explicit:
        return list(explicit)
    if isinstance(source, Mapping):
        return list(source.keys())
    if isinstance(source, Sequence):
        return list(range(len(source)))
    return []


def lookup(source: Any, key: Any) -> Any:
    """source[key], or None when the key is not present."""
    if isinstance(key, str) and key.isdigit() and isinstance(source, Sequence):
        key = int(key)
    try:
        return source[key]
    except (KeyError, IndexError, TypeError):
        return None


def keys_match(a: Any, b: Any) -> bool:
    # "1" and 1 name the same key
    if a == b:
        return True
    if isinstance(a, (str, int)) and isinstance(b, (str, int)):
        return str(a) == str(b)
    return False
