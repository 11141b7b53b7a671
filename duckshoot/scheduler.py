"""
Duck Shoot Scheduler

A single virtual clock that drives every timed behaviour in a game session.

Entities never own private timers. They register one-shot timers and
per-tick update callbacks against themselves as *owner*; destroying the
entity calls `cancel_owner()`, which synchronously drops everything the
entity registered. A cancelled callback never runs.

Usage:
    scheduler = Scheduler()

    def flap():
        duck.toggle_wings()
        scheduler.call_later(duck, 175, flap)

    scheduler.call_later(duck, 175, flap)

    # Game loop
    scheduler.tick(clock.tick(60))

    # Entity destroyed
    scheduler.cancel_owner(duck)
"""

import heapq
import itertools
from typing import Any, Callable, Dict, List, Optional, Tuple

from duckshoot.logging import get_logger

log = get_logger('scheduler')

TickCallback = Callable[[float], None]


class TimerHandle:
    """Handle for a scheduled one-shot callback.

    Attributes:
        owner: Entity the timer was registered against
        due_ms: Virtual time at which the callback fires
        callback: Zero-argument callable to run
    """

    __slots__ = ('owner', 'due_ms', 'callback', '_cancelled', '_fired')

    def __init__(self, owner: Any, due_ms: float, callback: Callable[[], None]):
        self.owner = owner
        self.due_ms = due_ms
        self.callback = callback
        self._cancelled = False
        self._fired = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def fired(self) -> bool:
        return self._fired

    @property
    def active(self) -> bool:
        """True while the timer can still fire."""
        return not (self._cancelled or self._fired)

    def __repr__(self) -> str:
        status = 'active' if self.active else ('fired' if self._fired else 'cancelled')
        return f"TimerHandle(due={self.due_ms:.1f}ms, owner={self.owner!r}, {status})"


class TickerHandle:
    """Handle for a per-tick update callback."""

    __slots__ = ('owner', 'callback', '_cancelled')

    def __init__(self, owner: Any, callback: TickCallback):
        self.owner = owner
        self.callback = callback
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def active(self) -> bool:
        return not self._cancelled

    def __repr__(self) -> str:
        return f"TickerHandle(owner={self.owner!r}, active={self.active})"


class Scheduler:
    """Virtual millisecond clock with owner-scoped timers and tickers.

    Time only advances through `tick()`. Within one tick, due timers fire in
    due-time order (ties in registration order) and `now_ms` is set to each
    timer's due time while it runs, so one large step behaves like many
    small ones. Tickers run once per tick, after the timers, with the full
    delta.

    Attributes:
        now_ms: Current virtual time in milliseconds

    Examples:
        >>> scheduler = Scheduler()
        >>> fired = []
        >>> _ = scheduler.call_later('owner', 100, lambda: fired.append(scheduler.now_ms))
        >>> scheduler.tick(250)
        >>> fired
        [100.0]
        >>> scheduler.now_ms
        250.0
    """

    def __init__(self):
        self._now_ms = 0.0
        self._queue: List[Tuple[float, int, TimerHandle]] = []
        self._seq = itertools.count()
        self._timers: Dict[int, List[TimerHandle]] = {}
        self._tickers: Dict[int, List[TickerHandle]] = {}
        self._owners: Dict[int, Any] = {}

    @property
    def now_ms(self) -> float:
        return self._now_ms

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def _track(self, owner: Any) -> int:
        key = id(owner)
        self._owners[key] = owner
        return key

    def call_later(self, owner: Any, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        """Schedule a one-shot callback owned by `owner`.

        Args:
            owner: Entity the timer belongs to
            delay_ms: Delay from the current virtual time (>= 0)
            callback: Zero-argument callable

        Returns:
            TimerHandle that can be passed to cancel()

        Raises:
            ValueError: If delay_ms is negative
        """
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be non-negative, got {delay_ms}")

        handle = TimerHandle(owner, self._now_ms + delay_ms, callback)
        key = self._track(owner)
        self._timers.setdefault(key, []).append(handle)
        heapq.heappush(self._queue, (handle.due_ms, next(self._seq), handle))
        log.trace("call_later %r in %.1fms", owner, delay_ms)
        return handle

    def add_ticker(self, owner: Any, callback: TickCallback) -> TickerHandle:
        """Register a callback run on every tick with the elapsed delta.

        Args:
            owner: Entity the ticker belongs to
            callback: Callable receiving delta_ms

        Returns:
            TickerHandle that can be passed to cancel()
        """
        handle = TickerHandle(owner, callback)
        key = self._track(owner)
        self._tickers.setdefault(key, []).append(handle)
        return handle

    # ------------------------------------------------------------------
    # Cancellation
    # ------------------------------------------------------------------

    def cancel(self, handle: Optional[Any]) -> bool:
        """Cancel a single timer or ticker.

        Args:
            handle: TimerHandle or TickerHandle (None is accepted and ignored)

        Returns:
            True if the handle was active and is now cancelled
        """
        if handle is None or not handle.active:
            return False

        handle._cancelled = True
        key = id(handle.owner)
        registry = self._timers if isinstance(handle, TimerHandle) else self._tickers
        handles = registry.get(key)
        if handles is not None:
            try:
                handles.remove(handle)
            except ValueError:
                pass
            if not handles:
                del registry[key]
        self._forget_if_idle(key)
        return True

    def cancel_owner(self, owner: Any) -> int:
        """Cancel every timer and ticker registered against `owner`.

        Args:
            owner: Entity whose callbacks should be dropped

        Returns:
            Number of registrations cancelled
        """
        key = id(owner)
        count = 0
        for handle in self._timers.pop(key, []):
            if handle.active:
                handle._cancelled = True
                count += 1
        for ticker in self._tickers.pop(key, []):
            if ticker.active:
                ticker._cancelled = True
                count += 1
        self._owners.pop(key, None)
        if count:
            log.debug("Cancelled %d callbacks for %r", count, owner)
        return count

    def clear(self) -> int:
        """Cancel everything. Returns the number of registrations cancelled."""
        count = 0
        for owner in list(self._owners.values()):
            count += self.cancel_owner(owner)
        self._queue.clear()
        return count

    def _forget_if_idle(self, key: int) -> None:
        if key not in self._timers and key not in self._tickers:
            self._owners.pop(key, None)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def pending(self, owner: Any) -> int:
        """Number of active timers and tickers registered against `owner`."""
        key = id(owner)
        timers = sum(1 for h in self._timers.get(key, []) if h.active)
        tickers = sum(1 for t in self._tickers.get(key, []) if t.active)
        return timers + tickers

    @property
    def pending_total(self) -> int:
        """Number of active registrations across all owners."""
        return sum(self.pending(owner) for owner in self._owners.values())

    def has_owner(self, owner: Any) -> bool:
        return self.pending(owner) > 0

    # ------------------------------------------------------------------
    # Advancing time
    # ------------------------------------------------------------------

    def tick(self, delta_ms: float) -> None:
        """Advance the clock by `delta_ms`, firing due timers and tickers.

        Args:
            delta_ms: Elapsed milliseconds since the previous tick (>= 0)

        Raises:
            ValueError: If delta_ms is negative
        """
        if delta_ms < 0:
            raise ValueError(f"delta_ms must be non-negative, got {delta_ms}")

        target = self._now_ms + delta_ms

        while self._queue and self._queue[0][0] <= target:
            due_ms, _, handle = heapq.heappop(self._queue)
            if not handle.active:
                continue
            self._now_ms = max(self._now_ms, due_ms)
            handle._fired = True
            self._discard_timer(handle)
            handle.callback()

        self._now_ms = target

        for key in list(self._tickers):
            for ticker in list(self._tickers.get(key, [])):
                # A previous ticker may have cancelled this one
                if ticker.active:
                    ticker.callback(delta_ms)

    def _discard_timer(self, handle: TimerHandle) -> None:
        key = id(handle.owner)
        handles = self._timers.get(key)
        if handles is None:
            return
        try:
            handles.remove(handle)
        except ValueError:
            return
        if not handles:
            del self._timers[key]
        self._forget_if_idle(key)
