from __future__ import annotations
from enum import Enum
from typing import Any
from pydantic import BaseModel

class ReceiverKind(str, Enum):
    NONE = "none"
    SOURCE = "source"
    VALUE = "value"

class StepResult(BaseModel):
    value: Any = None
    key: Any = None
    done: bool = False
    donep: bool = False

    @classmethod
    def exhausted(cls, *, done: bool, donep: bool) -> "StepResult":
        """Result for a move that could not happen (out of range or unknown key)."""
        return cls(value=None, key=None, done=done, donep=donep)
