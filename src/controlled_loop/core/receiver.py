from __future__ import annotations
import inspect
from types import FunctionType, MethodType
from typing import Any, Callable
from pydantic import BaseModel, ConfigDict

from ..models.common import ReceiverKind


class Receiver(BaseModel):
    """Object a controller is bound to when it is invoked."""
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    kind: ReceiverKind = ReceiverKind.NONE
    target: Any = None

    @classmethod
    def from_option(cls, apply: Any) -> "Receiver":
        if apply is True:
            return cls(kind=ReceiverKind.SOURCE)
        if not apply:
            return cls(kind=ReceiverKind.NONE)
        return cls(kind=ReceiverKind.VALUE, target=apply)

    def resolve(self, source: Any) -> Any:
        if self.kind is ReceiverKind.SOURCE:
            return source
        if self.kind is ReceiverKind.VALUE:
            return self.target
        return None

    def invoke(self, controller: Callable[..., Any], source: Any, *args: Any) -> Any:
        if self.kind is ReceiverKind.NONE or not wants_receiver(controller):
            return controller(*args)
        return MethodType(controller, self.resolve(source))(*args)


def wants_receiver(controller: Any) -> bool:
    """Plain functions written like methods (first parameter ``self``) get the receiver bound."""
    if not isinstance(controller, FunctionType):
        return False
    try:
        params = list(inspect.signature(controller).parameters.values())
    except (TypeError, ValueError):
        return False
    return bool(params) and params[0].name == "self" and params[0].kind in (
        inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
