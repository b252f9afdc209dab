from __future__ import annotations
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Options that may change after construction
UPDATABLE = ("increment", "start_at", "apply", "controller")


def _magnitude(v: Any, fallback: int) -> int:
    try:
        n = abs(int(v))
    except (TypeError, ValueError):
        return fallback
    return n


class CursorOptions(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        arbitrary_types_allowed=True,
        extra="ignore",
    )

    increment: int = 1
    start_at: int = Field(0, alias="startAt")
    keys: Optional[List[Any]] = None
    reverse: bool = False
    apply: Any = None
    controller: Any = None

    @field_validator("increment", mode="before")
    @classmethod
    def _increment_magnitude(cls, v):
        # zero would never move
        return _magnitude(v, 1) or 1

    @field_validator("start_at", mode="before")
    @classmethod
    def _start_magnitude(cls, v):
        return _magnitude(v, 0)

    @field_validator("reverse", mode="before")
    @classmethod
    def _truthy(cls, v):
        return bool(v)

    @field_validator("keys", mode="before")
    @classmethod
    def _keys_list(cls, v):
        if v is None or isinstance(v, (str, bytes)):
            return None
        try:
            return list(v)
        except TypeError:
            return None
