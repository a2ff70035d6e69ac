"""Frame schedulers.

A scheduler accepts a no-argument callback and runs it at some later point,
returning a handle that can cancel it. Production code binds to a figure
canvas timer; tests use the synchronous schedulers.
"""

from collections import deque
from typing import Any, Callable, Optional, Protocol


FrameCallback = Callable[[], None]


class FrameHandle:
    """Handle to a scheduled frame. Cancelling prevents the callback from running."""

    def __init__(self, on_cancel: Optional[Callable[[], None]] = None):
        self._cancelled = False
        self._on_cancel = on_cancel

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        if self._on_cancel is not None:
            self._on_cancel()


class Scheduler(Protocol):
    def schedule(self, callback: FrameCallback) -> FrameHandle: ...


class ImmediateScheduler:
    """Run callbacks synchronously, in order.

    Callbacks scheduled from inside a running callback are queued and run once
    it returns, so a long animation does not grow the call stack.
    """

    def __init__(self):
        self._queue: deque[tuple[FrameCallback, FrameHandle]] = deque()
        self._draining = False
        self.calls = 0

    def schedule(self, callback: FrameCallback) -> FrameHandle:
        handle = FrameHandle()
        self._queue.append((callback, handle))
        if not self._draining:
            self._drain()
        return handle

    def _drain(self) -> None:
        self._draining = True
        try:
            while self._queue:
                callback, handle = self._queue.popleft()
                if handle.cancelled:
                    continue
                self.calls += 1
                callback()
        finally:
            self._draining = False


class ManualScheduler:
    """Queue callbacks until the test advances the clock."""

    def __init__(self):
        self._pending: deque[tuple[FrameCallback, FrameHandle]] = deque()

    @property
    def pending(self) -> int:
        return sum(1 for _, handle in self._pending if not handle.cancelled)

    def schedule(self, callback: FrameCallback) -> FrameHandle:
        handle = FrameHandle()
        self._pending.append((callback, handle))
        return handle

    def step(self) -> bool:
        """Run the next pending callback.

        Returns:
            bool: False if nothing was pending
        """
        while self._pending:
            callback, handle = self._pending.popleft()
            if handle.cancelled:
                continue
            callback()
            return True
        return False

    def run_pending(self, limit: Optional[int] = None) -> int:
        """Run callbacks until the queue is empty or ``limit`` is reached.

        Returns:
            int: Number of callbacks run
        """
        count = 0
        while (limit is None or count < limit) and self.step():
            count += 1
        return count


class MatplotlibScheduler:
    """Schedule frames on a matplotlib canvas timer.

    Each frame gets its own single-shot timer, so stopping the timer is all
    cancellation has to do.
    """

    def __init__(self, canvas: Any, interval_ms: int = 16):
        """Initialize scheduler.

        Args:
            canvas: Figure canvas providing ``new_timer``
            interval_ms: Delay before each frame runs
        """
        self.canvas = canvas
        self.interval_ms = interval_ms

    def schedule(self, callback: FrameCallback) -> FrameHandle:
        timer = self.canvas.new_timer(interval=self.interval_ms)
        timer.single_shot = True
        handle = FrameHandle(on_cancel=timer.stop)

        def fire():
            if not handle.cancelled:
                callback()

        timer.add_callback(fire)
        timer.start()
        return handle
