from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Optional, Union

from ..models.common import StepResult
from ..models.options import UPDATABLE, CursorOptions
from ..models.status import CursorStatus
from .keys import derive_keys, keys_match, lookup
from .receiver import Receiver

log = logging.getLogger(__name__)

OptionsLike = Union[CursorOptions, Mapping, None]

_UNSET = object()


def identity(value: Any, *args: Any) -> Any:
    """Default controller: echo the visited value."""
    return value


def _as_options(options: OptionsLike, **overrides: Any) -> CursorOptions:
    if isinstance(options, CursorOptions):
        data: Dict[str, Any] = {
            name: getattr(options, name) for name in CursorOptions.model_fields
        }
    elif isinstance(options, Mapping):
        data = dict(options)
    else:
        data = {}
    data.update(overrides)
    return CursorOptions.model_validate(data)


class Cursor:
    """
    Stateful cursor over the keys of a sequence or mapping.

    Every visit calls the controller with ``(value, key, cursor, *params)``
    and records its return value by position. ``next``/``previous`` take a
    single step while paused; once unpaused (see ``run``/``run_back``) they
    keep stepping until a boundary, a pause or the run counter stops them.
    """

    def __init__(
        self,
        source: Any = None,
        controller: Union[Callable[..., Any], OptionsLike] = None,
        options: OptionsLike = None,
        **overrides: Any,
    ):
        if callable(controller):
            opts = _as_options(options, **overrides)
            opts.controller = controller
        else:
            # (source, options) form
            opts = _as_options(controller if controller is not None else options, **overrides)
        if opts.controller is None:
            opts.controller = identity

        self._source = source if source is not None else []
        self._options = opts
        self._keys = derive_keys(self._source, opts.keys)
        self._last = len(self._keys) - 1
        self._receiver = Receiver.from_option(opts.apply)

        self._current = 0
        self._reversed = False
        self._paused = True
        self._counter = 0
        self._values: List[Any] = []
        self._done = False
        self._donep = True

        if opts.reverse:
            self.reverse()
        self.reset()
        self._last_return = StepResult(done=self._done, donep=self._donep)

    def __repr__(self) -> str:
        return (f"Cursor(position={self._current}, end={self._last}, "
                f"reversed={self._reversed}, paused={self._paused})")

    # ---- movement ----

    def next(self, *params: Any):
        return self._walk(1, params)

    def previous(self, *params: Any):
        return self._walk(-1, params)

    def repeat(self, *params: Any) -> StepResult:
        return self._step(0, params)

    def run(self, count: Optional[int] = None, *params: Any):
        self._arm(count)
        log.debug("run forward from %d (counter=%d)", self._current, self._counter)
        return self.next(*params)

    def run_back(self, count: Optional[int] = None, *params: Any):
        self._arm(count)
        log.debug("run backward from %d (counter=%d)", self._current, self._counter)
        return self.previous(*params)

    def skip(self, steps: int, execute: bool = False, *params: Any):
        if self._reversed:
            steps = -steps
        self._current += steps
        if self._current > self._last:
            self._current = self._last
        elif self._current < 0:
            self._current = 0
        self._refresh_done()
        return self.repeat(*params) if execute else self

    def goto_key(self, key: Any, execute: bool = False, *params: Any):
        # the final index is never a goto target
        for x in range(self._last):
            if keys_match(self._keys[x], key):
                self._current = x
                break
        else:
            log.debug("goto_key: %r not found", key)
            return StepResult.exhausted(done=self._done, donep=self._donep)
        self._refresh_done()
        return self.repeat(*params) if execute else self

    # ---- direction / position ----

    def reverse(self, opts: Optional[Mapping] = None, *, reset: Optional[bool] = None,
                clear: bool = False, position: Optional[int] = None) -> "Cursor":
        if opts:
            reset = opts.get("reset", reset)
            clear = opts.get("clear", clear)
            position = opts.get("position", position)
        if reset is None:
            reset = position is not None and 0 <= position <= self._last
        self._reversed = not self._reversed
        log.debug("reversed=%s", self._reversed)
        if reset:
            self.reset(clear, position)
        elif clear:
            self.clear_values()
        return self

    def reset(self, clear: bool = False, position: Optional[int] = None) -> "Cursor":
        if position is not None and 0 <= position <= self._last:
            start = position
        else:
            start = self._options.start_at
        inc = self._options.increment
        # one step before the first key to visit
        self._current = self._last - start + inc if self._reversed else start - inc
        if clear:
            self.clear_values()
        self._refresh_done()
        log.debug("reset to %d (start=%d, reversed=%s)", self._current, start, self._reversed)
        return self

    def pause(self, state: Optional[bool] = None) -> "Cursor":
        self._paused = state if isinstance(state, bool) else not self._paused
        return self

    def is_complete(self, previous: bool = False) -> bool:
        inc = self._signed_increment
        nxt = self._current - inc if previous else self._current + inc
        return nxt < 0 or nxt > self._last

    # ---- options ----

    def set_options(self, opt: Union[str, Mapping, CursorOptions], value: Any = _UNSET) -> "Cursor":
        if isinstance(opt, str):
            updates = {} if value is _UNSET else {opt: value}
        elif isinstance(opt, CursorOptions):
            updates = {name: getattr(opt, name) for name in opt.model_fields_set}
        elif isinstance(opt, Mapping):
            updates = dict(opt)
        else:
            updates = {}
        if "startAt" in updates:
            updates.setdefault("start_at", updates.pop("startAt"))
        for name in UPDATABLE:
            if name in updates and updates[name] is not None:
                setattr(self._options, name, updates[name])
        if updates.get("apply", _UNSET) is None:
            self._options.apply = None
        self._receiver = Receiver.from_option(self._options.apply)
        return self

    # ---- inspection ----

    def get_values(self, as_mapping: bool = False) -> Union[List[Any], Dict[Any, Any]]:
        if as_mapping:
            return {k: self._recorded(i) for i, k in enumerate(self._keys)}
        return list(self._values)

    def get_value(self, key: Any, as_mapping: bool = False) -> Any:
        for i, k in enumerate(self._keys):
            if keys_match(k, key):
                value = self._recorded(i)
                return {k: value} if as_mapping else value
        return None

    def clear_values(self) -> "Cursor":
        self._values.clear()
        return self

    def status(self) -> CursorStatus:
        return CursorStatus(
            position=self._current,
            end=self._last,
            done=self._done,
            donep=self._donep,
            increment=self._options.increment,
            values=list(self._values),
            keys=list(self._keys),
            reversed=self._reversed,
            paused=self._paused,
            applied=self._receiver.resolve(self._source),
        )

    def get_last_return(self) -> StepResult:
        return self._last_return

    def defer(self) -> Callable[[Any], StepResult]:
        """
        Capture the current position for a result that arrives later.

        The returned function stores its argument at the captured position
        and returns the matching result record. The done flags are the ones
        in effect when ``defer`` was called.
        """
        position = self._current
        in_range = 0 <= position <= self._last
        key = self._keys[position] if in_range else None
        done, donep = self.is_complete(), self.is_complete(True)

        def record(value: Any) -> StepResult:
            if in_range:
                self._store(position, value)
            return StepResult(value=value, key=key, done=done, donep=donep)

        return record

    # ---- internals ----

    @property
    def _signed_increment(self) -> int:
        inc = self._options.increment
        return -inc if self._reversed else inc

    def _arm(self, count: Optional[int]) -> None:
        if count and count > 0:
            self._counter = abs(count)
        self._paused = False

    def _refresh_done(self) -> None:
        self._done = self.is_complete()
        self._donep = self.is_complete(True)

    def _recorded(self, position: int) -> Any:
        return self._values[position] if position < len(self._values) else None

    def _store(self, position: int, value: Any) -> None:
        if position >= len(self._values):
            self._values.extend([None] * (position + 1 - len(self._values)))
        self._values[position] = value

    def _walk(self, direction: int, params: tuple):
        was_running = not self._paused
        boundary = "done" if direction == 1 else "donep"
        while True:
            result = self._step(direction, params)
            if getattr(result, boundary):
                self._counter = 0
                self._paused = True
            elif self._counter > 0:
                self._counter -= 1
                if self._counter == 0:
                    self._paused = True
            if self._paused:
                return self if was_running else result
            was_running = True

    def _step(self, direction: int, params: tuple) -> StepResult:
        nxt = self._current + self._signed_increment * direction
        if nxt < 0 or nxt > self._last:
            log.debug("no move from %d (direction %d, end %d)", self._current, direction, self._last)
            return StepResult.exhausted(
                done=direction == 1 or (direction == 0 and self._done),
                donep=direction == -1 or (direction == 0 and self._donep),
            )
        self._current = nxt
        key = self._keys[nxt]
        ret = self._receiver.invoke(
            self._options.controller, self._source,
            lookup(self._source, key), key, self, *params,
        )
        self._store(nxt, ret)
        self._refresh_done()
        self._last_return = StepResult(value=ret, key=key, done=self._done, donep=self._donep)
        return self._last_return


def create_cursor(
    source: Any = None,
    controller: Union[Callable[..., Any], OptionsLike] = None,
    options: OptionsLike = None,
    **overrides: Any,
) -> Cursor:
    """Build a cursor; ``controller`` may be omitted or replaced by the options."""
    return Cursor(source, controller, options, **overrides)
