# scheduler.py
from __future__ import annotations

import logging
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)


def monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


class TickScheduler:
    """
    Turns a stream of frame timestamps (ms) into simulation ticks.

    A tick is due once `speed` ms have passed since the last one. The caller
    asks on every frame; at most one tick is granted per call, however late
    the frame is.
    """

    def __init__(self, last_tick_time: int = 0):
        self.last_tick_time = last_tick_time

    def due(self, timestamp: int, speed: int) -> bool:
        return timestamp - self.last_tick_time >= speed

    def poll(self, timestamp: int, speed: int) -> bool:
        if not self.due(timestamp, speed):
            return False
        self.last_tick_time = timestamp
        return True

    def restart(self, timestamp: int) -> None:
        self.last_tick_time = timestamp


class FrameLoop:
    """
    Cancellable frame loop: calls `on_frame(now_ms)` once per frame on the
    calling thread until stop() is called.
    """

    def __init__(
        self,
        on_frame: Callable[[int], None],
        clock: Optional[Callable[[], int]] = None,
        sleep: Optional[Callable[[float], None]] = None,
        fps: int = 60,
    ):
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.on_frame = on_frame
        self.clock = clock or monotonic_ms
        self.sleep = sleep or time.sleep
        self.frame_ms = 1000.0 / fps
        self.frames = 0
        self._running = False
        self._last_ts: Optional[int] = None

    @property
    def running(self) -> bool:
        return self._running

    def start(self, max_frames: Optional[int] = None) -> int:
        """Run until stopped (or `max_frames` frames). Returns frames run by this call."""
        if self._running:
            raise RuntimeError("frame loop is already running")
        self._running = True
        ran = 0
        logger.debug("Frame loop started at %.1f ms/frame", self.frame_ms)
        try:
            while self._running:
                if max_frames is not None and ran >= max_frames:
                    break
                began = self._now()
                self.on_frame(began)
                self.frames += 1
                ran += 1
                if not self._running:
                    break
                spent = self._now() - began
                remaining = self.frame_ms - spent
                if remaining > 0:
                    self.sleep(remaining / 1000.0)
        finally:
            self._running = False
            logger.debug("Frame loop stopped after %d frames", ran)
        return ran

    def stop(self) -> None:
        self._running = False

    def _now(self) -> int:
        # timestamps handed to on_frame never decrease
        ts = int(self.clock())
        if self._last_ts is not None and ts < self._last_ts:
            ts = self._last_ts
        self._last_ts = ts
        return ts
