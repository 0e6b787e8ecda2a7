"""Span timing for service calls.

Off by default. ``--verbose`` turns it on; every ``@traced`` service method
then records a span tree, logs it, and attaches it to
``ServiceResult.meta["telemetry"]``. Query phases open child spans with
:func:`trace_span`.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from rosterq.services.result import ServiceResult

log = structlog.get_logger("rosterq.telemetry")

_enabled: ContextVar[bool] = ContextVar("rosterq_telemetry_enabled", default=False)
_active: ContextVar[Span | None] = ContextVar("rosterq_active_span", default=None)

_P = ParamSpec("_P")
_R = TypeVar("_R")


@dataclass
class Span:
    """One timed region; children are the phases nested inside it."""

    name: str
    parent: Span | None = None
    children: list[Span] = field(default_factory=list)
    annotations: dict[str, Any] = field(default_factory=dict)
    start_time: float = field(default_factory=time.perf_counter)
    end_time: float | None = None

    @property
    def duration_ms(self) -> float:
        if self.end_time is None:
            return 0.0
        return (self.end_time - self.start_time) * 1000

    def child(self, name: str) -> Span:
        span = Span(name=name, parent=self)
        self.children.append(span)
        return span

    def end(self) -> None:
        self.end_time = time.perf_counter()

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        tree: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 2)}
        if self.annotations:
            tree["annotations"] = dict(self.annotations)
        if self.children:
            tree["children"] = [c.to_dict() for c in self.children]
        return tree


@contextmanager
def _activate(span: Span) -> Iterator[Span]:
    token = _active.set(span)
    try:
        yield span
    finally:
        span.end()
        _active.reset(token)


@contextmanager
def trace_span(name: str) -> Iterator[Span | None]:
    """Time a phase as a child of the active span.

    Yields None when telemetry is off or no traced call is running, so
    callers guard annotations with ``if span is not None``.
    """
    parent = _active.get() if _enabled.get() else None
    if parent is None:
        yield None
        return
    with _activate(parent.child(name)) as span:
        yield span


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:
    """Time a service method; attach the span tree to the ServiceResult it returns."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)

        root = Span(name=func.__qualname__)
        outcome = "error"
        try:
            with _activate(root):
                result = func(*args, **kwargs)
            if isinstance(result, ServiceResult):
                outcome = "ok" if result.ok else "failed"
                meta = {**(result.meta or {}), "telemetry": root.to_dict()}
                result = result.model_copy(update={"meta": meta})  # type: ignore[assignment]
            else:
                outcome = "ok"
            return result
        finally:
            log.debug(
                "service.timed",
                call=root.name,
                elapsed_ms=round(root.duration_ms, 2),
                outcome=outcome,
                phases=[c.name for c in root.children],
            )

    return wrapper


def enable_telemetry() -> None:
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)
