# brewprint_backend/app/services/brewing/timer.py
from __future__ import annotations

import threading
from typing import Any, Callable, Optional, Protocol

from brewprint_backend.app.config.manifest import TICK_INTERVAL_S
from brewprint_backend.app.utils.logs import get_logger

log = get_logger("timer")

__all__ = ["Scheduler", "ScheduledTick", "ThreadingScheduler", "ElapsedTimer"]


class ScheduledTick(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Tick source: run `callback` once after `delay_s` unless cancelled."""
    def schedule(self, delay_s: float, callback: Callable[[], None]) -> ScheduledTick: ...


class ThreadingScheduler:
    """Wall-clock scheduler backed by daemon threading.Timer instances."""

    def schedule(self, delay_s: float, callback: Callable[[], None]) -> ScheduledTick:
        t = threading.Timer(delay_s, callback)
        t.daemon = True
        t.start()
        return t


class ElapsedTimer:
    """
    Free-running stopwatch with whole-second resolution.

    Every tick is scheduled one interval after the previous one (or after
    start/resume). A tick carries the generation it was scheduled under;
    pause() and reset() bump the generation and cancel the pending handle,
    so a tick that fires late, or races a pause, changes nothing.
    """

    def __init__(self, scheduler: Optional[Scheduler] = None, interval_s: float = TICK_INTERVAL_S) -> None:
        self._scheduler: Scheduler = scheduler or ThreadingScheduler()
        self._interval_s = float(interval_s)
        self._lock = threading.RLock()
        self._elapsed = 0
        self._running = False
        self._generation = 0
        self._pending: Optional[Any] = None

    # -------- queries --------
    @property
    def elapsed_seconds(self) -> int:
        with self._lock:
            return self._elapsed

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self._running

    # -------- commands --------
    def start(self) -> None:
        with self._lock:
            if self._running:
                return
            self._running = True
            self._generation += 1
            self._schedule_next(self._generation)
            log.debug(f"[timer] started at {self._elapsed}s")

    def pause(self) -> None:
        with self._lock:
            if not self._running:
                return
            self._running = False
            self._cancel_pending()
            log.debug(f"[timer] paused at {self._elapsed}s")

    def reset(self) -> None:
        with self._lock:
            self._running = False
            self._cancel_pending()
            self._elapsed = 0

    # -------- internals --------
    def _schedule_next(self, generation: int) -> None:
        self._pending = self._scheduler.schedule(self._interval_s, lambda: self._tick(generation))

    def _cancel_pending(self) -> None:
        self._generation += 1
        pending, self._pending = self._pending, None
        if pending is not None:
            pending.cancel()

    def _tick(self, generation: int) -> None:
        with self._lock:
            if not self._running or generation != self._generation:
                return
            self._elapsed += 1
            self._schedule_next(generation)
