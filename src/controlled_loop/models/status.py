from __future__ import annotations
from typing import Any, List
from pydantic import BaseModel, Field

class CursorStatus(BaseModel):
    position: int
    end: int
    done: bool
    donep: bool
    increment: int = Field(..., ge=1)
    values: List[Any] = Field(default_factory=list)
    keys: List[Any] = Field(default_factory=list)
    reversed: bool = False
    paused: bool = True
    applied: Any = None
