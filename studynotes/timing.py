"""Timing a call, timing a block, repeating a call, and one-instance classes."""

from __future__ import annotations

import enum
import sys
import threading
import time
from typing import Any, Callable, TextIO, TypeVar

_C = TypeVar("_C", bound=type)


class TimeUnit(enum.Enum):
    """A unit for reporting elapsed time: label and ticks per second."""

    MICRO = ("us", 1_000_000)
    MILLI = ("ms", 1_000)
    SECOND = ("s", 1)

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def per_second(self) -> int:
        return self.value[1]

    def convert(self, seconds: float) -> float:
        return seconds * self.per_second


def elapsed_time(unit: TimeUnit, func: Callable[..., Any], *args: Any, **kwargs: Any) -> tuple[Any, float]:
    """Call ``func``, report the elapsed time, and return (result, elapsed in ``unit``)."""
    start = time.perf_counter()
    result = func(*args, **kwargs)
    elapsed = unit.convert(time.perf_counter() - start)
    code = hash(func) & 0xFFFFFFFFFFFFFFFF
    print(f"Function HashCode:{code} , elapsed time:{elapsed:.9f} {unit.label} ")
    return result, elapsed


class RunTimer:
    """Context manager that reports how long its block took."""

    def __init__(self, unit: TimeUnit = TimeUnit.MILLI, stream: TextIO | None = None) -> None:
        self.unit = unit
        self.stream = stream
        self.elapsed: float | None = None
        self._start = 0.0

    def __enter__(self) -> RunTimer:
        self._start = time.perf_counter()
        return self

    def __exit__(self, *args: Any) -> None:
        self.elapsed = self.unit.convert(time.perf_counter() - self._start)
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(f"elapsed time:{self.elapsed:.9f} {self.unit.label} \n")


class FuncCallTimer:
    """Calls a function repeatedly on a background thread until stopped."""

    def __init__(self) -> None:
        self._stop_event = threading.Event()
        self._stop_event.set()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return not self._stop_event.is_set()

    def start_timer(self, msec: int, func: Callable[..., Any], *args: Any) -> None:
        """Call ``func(*args)`` now and then every ``msec`` milliseconds."""
        self.stop()
        stop_event = threading.Event()
        self._stop_event = stop_event

        def run() -> None:
            while not stop_event.is_set():
                func(*args)
                stop_event.wait(msec / 1000.0)

        self._thread = threading.Thread(target=run, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        self._stop_event.set()


def singleton(cls: _C) -> _C:
    """Give ``cls`` an ``instance()`` class method returning one shared, lazily made object."""
    lock = threading.Lock()
    holder: list[Any] = []

    def instance(klass: type) -> Any:
        with lock:
            if not holder:
                holder.append(cls())
        return holder[0]

    cls.instance = classmethod(instance)  # type: ignore[attr-defined]
    return cls