# player.py
"""Cooperative playback: timer schedulers, cancellable handles and players.

Everything here runs on one thread. A scheduler only decides *when* a
callback fires; PlaybackHandle decides *whether* it still may. Every queued
tick re-checks its handle on entry, so once cancel() returns nothing from
that run is observed again, even if the backend timer already fired.
"""
import heapq
import itertools
import logging

from PyQt5.QtCore import QTimer, Qt

from config import SPEED_MIN_MS, SPEED_MAX_MS
from pacing import clamp_speed
from states import PlaybackState

log = logging.getLogger(__name__)


# ----------------- Schedulers -----------------

class _LoopTimer:
    __slots__ = ('due', 'callback', 'cancelled')

    def __init__(self, due, callback):
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class LoopScheduler:
    """Timer queue pumped explicitly, from a pygame loop or from tests.

    Time is virtual milliseconds. A callback fired by run_until() sees `now`
    equal to its own due time, so delays chain exactly however coarse the
    pumping is.
    """

    def __init__(self, now=0.0):
        self.now = now
        self._queue = []
        self._seq = itertools.count()

    def call_later(self, delay_ms, callback):
        if delay_ms < 0:
            raise ValueError(f"delay must be >= 0, got {delay_ms}")
        timer = _LoopTimer(self.now + delay_ms, callback)
        heapq.heappush(self._queue, (timer.due, next(self._seq), timer))
        return timer

    def run_until(self, now_ms, limit=None):
        """Fire timers due at or before now_ms in due order. Returns the number fired.

        With `limit`, stop after that many callbacks and leave the rest queued."""
        fired = 0
        while self._queue and self._queue[0][0] <= now_ms:
            if limit is not None and fired >= limit:
                return fired
            due, _, timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self.now = max(self.now, due)
            timer.callback()
            fired += 1
        self.now = max(self.now, now_ms)
        return fired

    def advance(self, ms, limit=None):
        return self.run_until(self.now + ms, limit)

    def pending(self):
        return sum(1 for _, _, t in self._queue if not t.cancelled)


class _QtTimer:
    __slots__ = ('callback', 'cancelled')

    def __init__(self, delay_ms, callback):
        self.callback = callback
        self.cancelled = False
        # Qt owns the single-shot timer; the lambda keeps this object alive
        # until it fires. Sub-millisecond delays become "next event loop pass".
        QTimer.singleShot(max(0, int(round(delay_ms))), Qt.PreciseTimer,
                          lambda: self._fire())

    def _fire(self):
        if not self.cancelled:
            self.callback()

    def cancel(self):
        self.cancelled = True


class QtScheduler:
    """Scheduler on the Qt event loop (needs a running QApplication)."""

    def call_later(self, delay_ms, callback):
        if delay_ms < 0:
            raise ValueError(f"delay must be >= 0, got {delay_ms}")
        return _QtTimer(delay_ms, callback)


# ----------------- Handles -----------------

class PlaybackHandle:
    """One run of a player. Owns the pending timer and the liveness state."""

    def __init__(self, scheduler, name='playback'):
        self.scheduler = scheduler
        self.name = name
        self.state = PlaybackState.RUNNING
        self.index = 0
        self._timer = None
        self._pending = None

    @property
    def alive(self):
        return self.state in (PlaybackState.RUNNING, PlaybackState.PAUSED)

    def schedule(self, delay_ms, fn):
        """Queue fn after delay_ms. While paused the tick is parked for resume()."""
        if not self.alive:
            return
        self._pending = (delay_ms, fn)
        if self.state is PlaybackState.PAUSED:
            return

        def fire():
            self._timer = None
            if self.state is PlaybackState.RUNNING:
                self._pending = None
                fn()

        self._timer = self.scheduler.call_later(delay_ms, fire)

    def pause(self):
        if self.state is not PlaybackState.RUNNING:
            return False
        self.state = PlaybackState.PAUSED
        self._drop_timer()
        log.debug("%s paused at index %d", self.name, self.index)
        return True

    def resume(self):
        if self.state is not PlaybackState.PAUSED:
            return False
        self.state = PlaybackState.RUNNING
        if self._pending is not None:
            delay, fn = self._pending
            self.schedule(delay, fn)
        log.debug("%s resumed at index %d", self.name, self.index)
        return True

    def cancel(self):
        if not self.alive:
            return False
        self.state = PlaybackState.CANCELLED
        self._drop_timer()
        self._pending = None
        log.debug("%s cancelled at index %d", self.name, self.index)
        return True

    def finish(self):
        self.state = PlaybackState.DONE
        self._drop_timer()
        self._pending = None

    def _drop_timer(self):
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None


# ----------------- Players -----------------

class Ticker:
    """Endless repeating timer: tick(), then wait interval() ms, forever.

    interval is a callable so speed changes apply from the next tick on.
    Starting again cancels the previous run first.
    """

    def __init__(self, scheduler, name='ticker'):
        self.scheduler = scheduler
        self.name = name
        self.handle = None

    @property
    def running(self):
        return self.handle is not None and self.handle.alive

    def start(self, tick, interval, first_delay=0):
        self.cancel()
        handle = PlaybackHandle(self.scheduler, self.name)

        def run():
            tick()
            handle.index += 1
            handle.schedule(interval(), run)

        handle.schedule(first_delay, run)
        self.handle = handle
        return handle

    def cancel(self):
        if self.handle is not None:
            self.handle.cancel()


class StepPlayer:
    """Plays a finite sequence one element per tick.

    States: IDLE -> RUNNING -> (PAUSED <-> RUNNING) -> DONE, or -> CANCELLED.
    Only one run is live per player; start() cancels the previous one.
    """

    def __init__(self, scheduler, min_interval=SPEED_MIN_MS, max_interval=SPEED_MAX_MS,
                 name='step-player'):
        self.scheduler = scheduler
        self.min_interval = min_interval
        self.max_interval = max_interval
        self.name = name
        self.handle = None
        self.sequence = ()
        self.interval = min_interval

    @property
    def state(self):
        return self.handle.state if self.handle is not None else PlaybackState.IDLE

    @property
    def index(self):
        return self.handle.index if self.handle is not None else 0

    @property
    def current_step(self):
        """Last element delivered to on_step, or None before the first tick."""
        i = self.index
        return self.sequence[i - 1] if 0 < i <= len(self.sequence) else None

    def set_interval(self, interval_ms):
        self.interval = clamp_speed(interval_ms, self.min_interval, self.max_interval)

    def start(self, sequence, interval_ms, on_step, on_done=None):
        self.cancel()
        self.set_interval(interval_ms)
        seq = tuple(sequence)
        self.sequence = seq
        handle = PlaybackHandle(self.scheduler, self.name)

        def tick():
            if handle.index < len(seq):
                i = handle.index
                handle.index = i + 1
                on_step(seq[i], i)
                handle.schedule(self.interval, tick)
            else:
                handle.finish()
                log.debug("%s done after %d steps", self.name, len(seq))
                if on_done is not None:
                    on_done()

        self.handle = handle
        log.debug("%s starting %d steps every %s ms", self.name, len(seq), self.interval)
        handle.schedule(0, tick)
        return handle

    def pause(self):
        return self.handle is not None and self.handle.pause()

    def resume(self):
        return self.handle is not None and self.handle.resume()

    def cancel(self):
        return self.handle is not None and self.handle.cancel()
