"""
base.py — Sort Algorithm Contract
==================================
Every sorting algorithm is a subclass of SortAlgorithm and implements a
single coroutine, `_sort(lines, delay, token)`.  Everything else a run
needs lives here and is shared:

    • run flags            – is_running / is_completing, read by the UI every frame
    • cancellation         – one CancelToken per run, polled at every step
    • pacing               – `await token.sleep(delay)` once per visualised step
    • swapping             – list slots and screen points exchanged together
    • completion animation – the green fill that ends every successful sort
    • stop protocol        – cancel + color reset, refused while completing

Lifecycle of one run:

    sort()  →  is_running = True
            →  _sort()                       (mutates lines, suspends per step)
            →  fill_lines_animation()        (is_completing = True … False)
            →  is_running = False

    stop_sort() at any point before the animation:
            →  token cancelled, colors reset, is_running = False
            →  the suspended _sort() wakes, raises SortCancelled, unwinds

Concurrency:
  Runs are asyncio coroutines.  A line swap and its color reset happen
  between two awaits, so any reader scheduled on the same event loop
  sees either the state before the swap or after it, never half of it.
  CancelToken is not thread-safe; cancel it from the loop's own thread
  (engine.runner does this for you).
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from lines import Line, Palette, DEFAULT_PALETTE


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Cancellation
# ---------------------------------------------------------------------------
class SortCancelled(Exception):
    """Raised inside a run once its CancelToken has been cancelled."""


class CancelToken:
    """
    Single-use cancellation handle for one run.

    A fresh token is issued every time a run starts, so cancelling a
    stale token can never stop a newer run.
    """

    def __init__(self):
        self._cancelled: bool = False
        self._event:     Optional[asyncio.Event] = None

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True
        if self._event is not None:
            self._event.set()

    def raise_if_cancelled(self) -> None:
        if self._cancelled:
            raise SortCancelled()

    async def sleep(self, delay_ms: float) -> None:
        """
        Suspend for `delay_ms` milliseconds, waking early if cancelled.

        A delay of 0 (or less) does not suspend at all; it only checks
        the token.
        """
        self.raise_if_cancelled()
        if delay_ms <= 0:
            return
        if self._event is None:
            self._event = asyncio.Event()
        try:
            await asyncio.wait_for(self._event.wait(), timeout=delay_ms / 1000)
        except asyncio.TimeoutError:
            pass
        # a stop may land after the timeout fired but before this task resumed
        self.raise_if_cancelled()


# ---------------------------------------------------------------------------
# SortAlgorithm
# ---------------------------------------------------------------------------
class SortAlgorithm(ABC):
    """
    Attributes:
        name           : Display identifier, e.g. "BUBBLE_SORT".
        palette        : Colors used for highlight / fill / reset.
        fill_step_ms   : Pause between lines during the completion fill.
        fill_hold_ms   : How long the filled state is held before reset.
        is_running     : True from sort() entry until the run is over.
        is_completing  : True only while the completion fill plays.
        cancel_token   : Token of the current (or last) run.
        comparisons    : Comparisons made by the current run.
        swaps          : Swaps made by the current run.
    """

    name: str = ""
    animates_completion: bool = True

    def __init__(
        self,
        palette: Palette = DEFAULT_PALETTE,
        fill_step_ms: float = 1,
        fill_hold_ms: float = 1000,
    ):
        self.palette:       Palette     = palette
        self.fill_step_ms:  float       = fill_step_ms
        self.fill_hold_ms:  float       = fill_hold_ms
        self.is_running:    bool        = False
        self.is_completing: bool        = False
        self.cancel_token:  CancelToken = CancelToken()
        self.comparisons:   int         = 0
        self.swaps:         int         = 0

    # ------------------------------------------------------------------
    # Public contract
    # ------------------------------------------------------------------
    def new_token(self) -> CancelToken:
        """Issue a fresh token and make it the one stop_sort() signals."""
        self.cancel_token = CancelToken()
        return self.cancel_token

    async def sort(self, lines: List[Line], delay: float = 0, token: Optional[CancelToken] = None) -> bool:
        """
        Sort `lines` in place, pausing `delay` ms per visualised step.

        Returns True when the run finished (completion fill included),
        False when it was cancelled.
        """
        if token is None:
            token = self.new_token()
        else:
            self.cancel_token = token

        self.is_running  = True
        self.comparisons = 0
        self.swaps       = 0
        logger.debug("%s: start (%d lines, delay=%sms)", self.name, len(lines), delay)

        try:
            token.raise_if_cancelled()
            await self._sort(lines, delay, token)
        except SortCancelled:
            logger.debug("%s: cancelled after %d comparisons / %d swaps", self.name, self.comparisons, self.swaps)
            if token is self.cancel_token:
                self._reset(lines)
            return False
        except Exception:
            logger.exception("%s: run failed", self.name)
            if token is self.cancel_token:
                self._reset(lines)
            raise

        if self.animates_completion:
            await self.fill_lines_animation(lines)
        else:
            self.is_running = False
        return True

    def stop_sort(self, lines: List[Line]) -> bool:
        """
        Cancel the current run and reset every line to the default color.

        Refused (returns False) while the completion fill is playing.
        Calling it again on a stopped algorithm changes nothing.
        """
        if self.is_completing:
            logger.info("%s: stop ignored, completion animation in progress", self.name)
            return False
        self.cancel_token.cancel()
        self._reset(lines)
        return True

    def swap_points(self, line1: Line, line2: Line) -> None:
        """Exchange screen positions only.  Height and color stay put."""
        line1.point, line2.point = line2.point, line1.point

    async def fill_lines_animation(self, lines: List[Line]) -> None:
        """Paint every line with the animation color, hold, then reset."""
        self.is_completing = True
        try:
            for line in lines:
                line.color = self.palette.animation
                await asyncio.sleep(self.fill_step_ms / 1000)
            await asyncio.sleep(self.fill_hold_ms / 1000)
        finally:
            for line in lines:
                line.color = self.palette.default
            self.is_completing = False
            self.is_running    = False
        logger.debug("%s: finished with %d comparisons / %d swaps", self.name, self.comparisons, self.swaps)

    # ------------------------------------------------------------------
    # Subclass hook
    # ------------------------------------------------------------------
    @abstractmethod
    async def _sort(self, lines: List[Line], delay: float, token: CancelToken) -> None:
        """Algorithm body.  Raise SortCancelled (via the token) to abort."""

    # ------------------------------------------------------------------
    # Step helpers for subclasses
    # ------------------------------------------------------------------
    def _greater(self, a: Line, b: Line) -> bool:
        self.comparisons += 1
        return a.height > b.height

    def _swap(self, lines: List[Line], i: int, j: int) -> None:
        """Swap list slots i and j together with their screen points."""
        if i == j:
            return
        lines[i], lines[j] = lines[j], lines[i]
        self.swap_points(lines[i], lines[j])
        self.swaps += 1

    def _highlight(self, *items: Line) -> None:
        for line in items:
            line.color = self.palette.swap

    def _unhighlight(self, *items: Line) -> None:
        for line in items:
            line.color = self.palette.default

    def _reset(self, lines: List[Line]) -> None:
        for line in lines:
            line.color = self.palette.default
        self.is_running = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(running={self.is_running}, completing={self.is_completing})"
