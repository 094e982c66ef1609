"""
runner.py — Sort Run Controller
================================
The SortRunner is the ONLY object the web layer talks to.  It owns the
line container, the currently selected algorithm and a private asyncio
event loop running on a daemon thread.

Every public method hops onto that loop and waits for the answer, so
the sort coroutine, stop requests and snapshot reads are all serialised
on one thread.  A snapshot is therefore always taken between two steps
of the algorithm, never in the middle of a swap.

State machine (derived from the algorithm's flags):
    IDLE        →  start()                 →  SORTING
    SORTING     →  stop()                  →  IDLE
    SORTING     →  (sort finished)         →  COMPLETING
    COMPLETING  →  (fill animation done)   →  IDLE
    COMPLETING  →  stop()                  →  COMPLETING   (refused)

Policy:
  start / select / shuffle / configure are refused (return False) while
  a run is active.  start is also refused once the container has been
  sorted, until it is shuffled, stopped or rebuilt.
"""

import asyncio
import concurrent.futures
import logging
import threading
from dataclasses import asdict, replace
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple

from lines import Container
from algorithms import AlgoInfo, CancelToken, SortAlgorithm, RandomizeShuffle, get_algorithm, create_algorithm
from engine.recorder import Recorder, RunMetrics
from engine.settings import Settings


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class RunnerState(Enum):
    IDLE       = "idle"
    SORTING    = "sorting"
    COMPLETING = "completing"


# ---------------------------------------------------------------------------
# SortRunner
# ---------------------------------------------------------------------------
class SortRunner:
    """
    Attributes:
        settings     : Current (validated) Settings.
        container    : The line container being sorted and drawn.
        algo_info    : Registry card of the selected algorithm.
        algorithm    : The selected algorithm instance (its run flags live here).
        recorder     : Recorder of the current / last run.
        last_metrics : Metrics of the last run that ended.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings:  Settings  = (settings or Settings()).validated()
        self.container: Container = Container(
            self.settings.resolution,
            self.settings.screen_margin,
            self.settings.lines_count,
            self.settings.lines_margin,
        )
        self.container.load()

        info = get_algorithm(self.settings.algorithm)
        if info is None or not info.is_sort:
            logger.warning("Unknown algorithm %r in settings, falling back to bubble", self.settings.algorithm)
            info = get_algorithm("bubble")
        self.algo_info:    AlgoInfo             = info
        self.algorithm:    SortAlgorithm        = self._build(info)
        self.recorder:     Recorder             = Recorder()
        self.last_metrics: Optional[RunMetrics] = None

        self._shuffler = RandomizeShuffle()
        self._task:      Optional[asyncio.Task]              = None
        self._run_token: Optional[CancelToken]               = None
        self._loop:      Optional[asyncio.AbstractEventLoop] = None
        self._thread:    Optional[threading.Thread]          = None
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def shutdown(self) -> None:
        """Cancel any run and stop the background loop."""
        with self._lock:
            loop, thread = self._loop, self._thread
            if loop is None:
                return
            asyncio.run_coroutine_threadsafe(self._cancel_task(), loop).result()
            loop.call_soon_threadsafe(loop.stop)
            thread.join(timeout=5)
            loop.close()
            self._loop = self._thread = None
        logger.debug("Runner loop shut down")

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the current run (if any) has ended.  False on timeout."""
        if self._loop is None:
            return True
        future = asyncio.run_coroutine_threadsafe(self._wait_idle(), self._loop)
        try:
            future.result(timeout)
            return True
        except concurrent.futures.TimeoutError:
            future.cancel()
            return False

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def select(self, key: str) -> bool:
        info = get_algorithm(key)
        if info is None or not info.is_sort:
            raise ValueError(f"Unknown algorithm: {key}")
        return self._call(self._select, info)

    def start(self, delay: Optional[float] = None) -> bool:
        return self._call(self._start, delay)

    def stop(self) -> bool:
        return self._call(self._stop)

    def shuffle(self) -> bool:
        return self._await(self._shuffle())

    def configure(
        self,
        lines_count: Optional[int] = None,
        lines_margin: Optional[int] = None,
        delay: Optional[int] = None,
        resolution: Optional[Tuple[int, int]] = None,
    ) -> bool:
        return self._call(self._configure, lines_count, lines_margin, delay, resolution)

    def snapshot(self) -> Dict[str, Any]:
        return self._call(self._snapshot)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def state(self) -> RunnerState:
        if self.algorithm.is_completing:
            return RunnerState.COMPLETING
        if self.is_busy:
            return RunnerState.SORTING
        return RunnerState.IDLE

    @property
    def is_busy(self) -> bool:
        if self.algorithm.is_running or self.algorithm.is_completing:
            return True
        # started but not yet scheduled; a stopped run that is still unwinding does not count
        return (
            self._task is not None
            and not self._task.done()
            and self._run_token is not None
            and not self._run_token.cancelled
        )

    # ------------------------------------------------------------------
    # Loop-side implementations
    # ------------------------------------------------------------------
    def _select(self, info: AlgoInfo) -> bool:
        if self.is_busy:
            logger.info("Select %s refused: %s is running", info.key, self.algo_info.key)
            return False
        self.algo_info = info
        self.algorithm = self._build(info)
        self.settings  = replace(self.settings, algorithm=info.key)
        return True

    def _start(self, delay: Optional[float]) -> bool:
        if self.is_busy:
            logger.info("Start refused: %s is already running", self.algo_info.key)
            return False
        if self.container.is_sorted:
            logger.info("Start refused: lines are already sorted, shuffle first")
            return False

        delay = self.settings.algorithm_delay if delay is None else max(0, delay)
        token = self.algorithm.new_token()
        self._run_token = token
        self.container.is_sorted = True
        self.recorder = Recorder()

        self._task = self._loop.create_task(
            self.recorder.record(self.algo_info, self.algorithm, self.container.lines, delay, token)
        )
        self._task.add_done_callback(self._on_done)
        logger.info("Started %s on %d lines (delay=%sms)", self.algo_info.label, len(self.container), delay)
        return True

    def _stop(self) -> bool:
        stopped = self.algorithm.stop_sort(self.container.lines)
        if stopped:
            self.container.is_sorted = False
            self.recorder.stop()
        return stopped

    async def _shuffle(self) -> bool:
        if self.is_busy:
            logger.info("Shuffle refused: %s is running", self.algo_info.key)
            return False
        await self._shuffler.sort(self.container.lines, 0)
        self.container.is_sorted = False
        return True

    def _configure(
        self,
        lines_count: Optional[int],
        lines_margin: Optional[int],
        delay: Optional[int],
        resolution: Optional[Tuple[int, int]],
    ) -> bool:
        if self.is_busy:
            logger.info("Configure refused: %s is running", self.algo_info.key)
            return False

        changes: Dict[str, Any] = {}
        if lines_count is not None:
            changes["lines_count"] = lines_count
        if lines_margin is not None:
            changes["lines_margin"] = lines_margin
        if delay is not None:
            changes["algorithm_delay"] = delay
        if resolution is not None:
            changes["screen_width"], changes["screen_height"] = resolution
        self.settings = replace(self.settings, **changes).validated()

        if {"lines_count", "lines_margin", "screen_width"} & changes.keys():
            self.container.update(self.settings.resolution, self.settings.lines_count, self.settings.lines_margin)
        return True

    def _snapshot(self) -> Dict[str, Any]:
        return {
            "state":         self.state.value,
            "is_running":    self.algorithm.is_running,
            "is_completing": self.algorithm.is_completing,
            "algorithm": {
                "key":   self.algo_info.key,
                "label": self.algo_info.label,
                "name":  self.algorithm.name,
            },
            "delay":         self.settings.algorithm_delay,
            "container":     self.container.to_dict(),
            "timer":         self.recorder.export(),
            "last_metrics":  asdict(self.last_metrics) if self.last_metrics else None,
        }

    async def _wait_idle(self) -> None:
        task = self._task
        if task is not None and not task.done():
            await asyncio.wait({task})

    async def _cancel_task(self) -> None:
        task = self._task
        if task is not None and not task.done():
            task.cancel()
            await asyncio.wait({task})

    def _on_done(self, task: asyncio.Task) -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Run of %s failed: %r", self.algo_info.key, exc)
            if task is self._task:
                self.container.is_sorted = False
            return
        metrics = task.result()
        if task is self._task:
            self.last_metrics = metrics
        logger.info(
            "%s %s: %d comparisons, %d swaps, %.0f ms",
            metrics.algo_label,
            "finished" if metrics.completed else "cancelled",
            metrics.comparisons,
            metrics.swaps,
            metrics.wall_time_ms,
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _build(self, info: AlgoInfo) -> SortAlgorithm:
        return create_algorithm(
            info.key,
            fill_step_ms=self.settings.fill_step_ms,
            fill_hold_ms=self.settings.fill_hold_ms,
        )

    def _ensure_loop(self) -> asyncio.AbstractEventLoop:
        with self._lock:
            if self._loop is None:
                self._loop = asyncio.new_event_loop()
                self._thread = threading.Thread(target=self._loop.run_forever, name="sort-engine", daemon=True)
                self._thread.start()
            return self._loop

    def _call(self, fn: Callable, *args) -> Any:
        """Run a plain function on the loop thread and return its result."""
        async def invoke():
            return fn(*args)
        return self._await(invoke())

    def _await(self, coro) -> Any:
        loop = self._ensure_loop()
        return asyncio.run_coroutine_threadsafe(coro, loop).result()
