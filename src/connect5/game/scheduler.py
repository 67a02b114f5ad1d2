from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Callable, List, Optional, Protocol

Callback = Callable[[], None]


class Handle(Protocol):
    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callback) -> Handle:
        ...


@dataclass(slots=True)
class _Pending:
    delay: float
    callback: Callback
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """
    Queue of delayed callbacks that the host runs explicitly.

    The delay is recorded but not waited on; a front-end can show its own
    "thinking" effect for `next_delay` seconds and then call run_pending().
    """

    def __init__(self) -> None:
        self._queue: List[_Pending] = []

    def call_later(self, delay: float, callback: Callback) -> _Pending:
        item = _Pending(delay=delay, callback=callback)
        self._queue.append(item)
        return item

    @property
    def pending(self) -> int:
        return sum(1 for p in self._queue if not p.cancelled)

    @property
    def next_delay(self) -> Optional[float]:
        for p in self._queue:
            if not p.cancelled:
                return p.delay
        return None

    def run_pending(self) -> int:
        """Run the callbacks queued so far; ones they schedule wait for the next call."""
        batch, self._queue = self._queue, []
        ran = 0
        for p in batch:
            if p.cancelled:
                continue
            p.cancelled = True
            p.callback()
            ran += 1
        return ran


class AsyncioScheduler:
    """call_later on an asyncio loop; the returned TimerHandle is cancellable."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    def call_later(self, delay: float, callback: Callback) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)
