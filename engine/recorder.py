"""
recorder.py — Run Recorder & Timer
====================================
Wraps one algorithm run, times it, and turns the algorithm's counters
into the analytics card the UI shows next to the bars.

Usage:
    rec = Recorder()
    metrics = await rec.record(info, algorithm, lines, delay=20, token=token)
    rec.elapsed_ms          # live while the run is going, frozen after
    rec.export()            # JSON-ready snapshot

The timer runs from the start of the run until the completion fill
finishes, or until stop() is called, whichever comes first.
"""

import time
from dataclasses import dataclass, asdict
from typing import Optional, List, Dict, Any

from lines import Line
from algorithms import AlgoInfo, SortAlgorithm, CancelToken


# ---------------------------------------------------------------------------
# Metrics dataclass: what the analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:     str   = ""
    algo_label:   str   = ""
    lines_count:  int   = 0
    delay_ms:     float = 0.0
    comparisons:  int   = 0
    swaps:        int   = 0
    wall_time_ms: float = 0.0     # includes the completion fill
    completed:    bool  = False
    cancelled:    bool  = False


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        metrics : RunMetrics of the last finished run (None before any).
    """

    def __init__(self):
        self.metrics:     Optional[RunMetrics] = None
        self._start_time: Optional[float]      = None
        self._stop_time:  Optional[float]      = None

    async def record(
        self,
        info: AlgoInfo,
        algorithm: SortAlgorithm,
        lines: List[Line],
        delay: float = 0,
        token: Optional[CancelToken] = None,
    ) -> RunMetrics:
        """Run `algorithm` over `lines` to completion or cancellation."""
        self.metrics     = None
        self._start_time = time.monotonic()
        self._stop_time  = None

        completed = await algorithm.sort(lines, delay, token)
        self.stop()

        self.metrics = RunMetrics(
            algo_key=info.key,
            algo_label=info.label,
            lines_count=len(lines),
            delay_ms=delay,
            comparisons=algorithm.comparisons,
            swaps=algorithm.swaps,
            wall_time_ms=round(self.elapsed_ms, 2),
            completed=completed,
            cancelled=not completed,
        )
        return self.metrics

    # ------------------------------------------------------------------
    # Timer
    # ------------------------------------------------------------------
    def stop(self) -> None:
        """Freeze the timer.  No-op if it is not running."""
        if self._start_time is not None and self._stop_time is None:
            self._stop_time = time.monotonic()

    @property
    def elapsed_ms(self) -> float:
        if self._start_time is None:
            return 0.0
        end = self._stop_time if self._stop_time is not None else time.monotonic()
        return (end - self._start_time) * 1000

    @property
    def is_timing(self) -> bool:
        return self._start_time is not None and self._stop_time is None

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "elapsed_ms": round(self.elapsed_ms, 2),
            "timing":     self.is_timing,
            "metrics":    asdict(self.metrics) if self.metrics else {},
        }


def format_elapsed(ms: float) -> str:
    """mm:ss.fff, as shown on the timer label."""
    total_seconds, millis = divmod(int(ms), 1000)
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes:02d}:{seconds:02d}.{millis:03d}"
