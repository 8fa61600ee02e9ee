"""Frames-per-second measurement over a ring of recent frame timestamps."""

from __future__ import annotations

import threading
import time
from typing import Callable, Optional

_RING_SIZE = 16
_MIN_ELAPSED = 0.001

Clock = Callable[[], float]
FpsCallback = Callable[[float], None]


class FpsRecorder:
    """Keeps the timestamps of the last 16 frames and derives the frame rate."""

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._clock: Clock = clock or time.monotonic
        now = self._clock()
        self._frames = [now] * _RING_SIZE
        self._tail = 0

    def record(self) -> None:
        """Store the current time as a new frame."""
        self._frames[self._tail] = self._clock()
        self._tail = (self._tail + 1) % _RING_SIZE

    def fps(self) -> float:
        """Frames per second over the recorded window."""
        newest = self._frames[self._tail - 1]
        oldest = self._frames[self._tail]
        elapsed = max(newest - oldest, _MIN_ELAPSED)
        return (_RING_SIZE - 1) / elapsed


class _Slot(threading.local):
    recorder: Optional[FpsRecorder] = None
    on_update: Optional[FpsCallback] = None


_slot = _Slot()


def init_fps_recorder(
    clock: Optional[Clock] = None, on_update: Optional[FpsCallback] = None
) -> None:
    """Install a fresh recorder for this thread.

    ``on_update`` is called with the new rate every time a frame is recorded.
    """
    _slot.recorder = FpsRecorder(clock)
    _slot.on_update = on_update


def record_frame() -> None:
    """Record a frame on this thread's recorder, if one is installed."""
    recorder = _slot.recorder
    if recorder is None:
        return
    recorder.record()
    if _slot.on_update is not None:
        _slot.on_update(recorder.fps())


def current_fps() -> float:
    """The current rate, or 0.0 when no recorder is installed."""
    recorder = _slot.recorder
    return 0.0 if recorder is None else recorder.fps()