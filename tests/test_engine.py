"""
Tests for the Engine Layer
============================
Covers:
- Settings validation, dict conversion, file persistence
- Recorder timing and metrics
- SortRunner commands, refusal policy and snapshots
"""
import asyncio
import json
import time

import pytest

from algorithms import get_algorithm, create_algorithm
from engine import (
    Settings,
    load_settings,
    save_settings,
    settings_path,
    Recorder,
    RunMetrics,
    format_elapsed,
    SortRunner,
    RunnerState,
)
from tests.conftest import make_lines


# =============================================================================
# Settings
# =============================================================================

class TestSettings:

    def test_defaults(self):
        s = Settings()
        assert (s.screen_width, s.screen_height) == (800, 600)
        assert s.lines_count == 50
        assert s.algorithm_delay == 20
        assert s.resolution == (800, 600)

    def test_validated_clamps(self):
        s = Settings(lines_count=-4, lines_margin=-1, algorithm_delay=99_999, fill_hold_ms=-1).validated()
        assert s.lines_count == 0
        assert s.lines_margin == 0
        assert s.algorithm_delay == 5000
        assert s.fill_hold_ms == 0.0
        assert Settings(lines_count=10_000).validated().lines_count == 500

    def test_from_dict_ignores_unknown_keys(self):
        s = Settings.from_dict({"lines_count": "12", "colour": "red"})
        assert s.lines_count == 12
        assert not hasattr(s, "colour")

    def test_path_follows_env_var(self, settings_home):
        assert settings_path() == settings_home / "settings.json"

    def test_first_load_writes_defaults(self, settings_home):
        s = load_settings()
        assert s == Settings()
        assert json.loads((settings_home / "settings.json").read_text())["lines_count"] == 50

    def test_save_then_load(self, settings_home):
        assert save_settings(Settings(lines_count=77, algorithm="quick")) is True
        loaded = load_settings()
        assert loaded.lines_count == 77
        assert loaded.algorithm == "quick"

    def test_corrupt_file_falls_back_to_defaults(self, settings_home):
        path = settings_home / "settings.json"
        path.write_text("{not json")
        assert load_settings() == Settings()
        assert path.read_text() == "{not json"

    def test_non_object_file_falls_back_to_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("[1, 2, 3]")
        assert load_settings(path) == Settings()


# =============================================================================
# Recorder
# =============================================================================

class TestRecorder:

    @pytest.mark.asyncio
    async def test_record_completed_run(self):
        info = get_algorithm("bubble")
        algo = create_algorithm("bubble", fill_step_ms=0, fill_hold_ms=0)
        lines = make_lines([3, 1, 2])
        rec = Recorder()

        metrics = await rec.record(info, algo, lines, delay=0)

        assert isinstance(metrics, RunMetrics)
        assert metrics.algo_key == "bubble"
        assert metrics.lines_count == 3
        assert metrics.swaps == 2
        assert metrics.completed and not metrics.cancelled
        assert rec.is_timing is False
        assert rec.export()["metrics"]["swaps"] == 2

    def test_stop_freezes_timer(self):
        rec = Recorder()
        assert rec.elapsed_ms == 0.0
        rec._start_time = time.monotonic() - 0.5
        rec.stop()
        frozen = rec.elapsed_ms
        time.sleep(0.01)
        assert rec.elapsed_ms == frozen
        assert frozen >= 500

    def test_format_elapsed(self):
        assert format_elapsed(0) == "00:00.000"
        assert format_elapsed(61_234.9) == "01:01.234"


# =============================================================================
# SortRunner
# =============================================================================

@pytest.fixture
def runner(fast_settings):
    r = SortRunner(fast_settings)
    yield r
    r.shutdown()


@pytest.fixture
def slow_runner():
    r = SortRunner(Settings(lines_count=40, algorithm_delay=20, fill_step_ms=0, fill_hold_ms=0))
    r.shuffle()
    yield r
    r.shutdown()


class TestSortRunner:

    def test_initial_state(self, runner):
        snap = runner.snapshot()
        assert snap["state"] == "idle"
        assert snap["algorithm"] == {"key": "bubble", "label": "Bubble Sort", "name": "BUBBLE_SORT"}
        assert len(snap["container"]["lines"]) == 20
        assert snap["last_metrics"] is None
        assert runner.state is RunnerState.IDLE

    def test_unknown_algorithm_in_settings_falls_back(self):
        r = SortRunner(Settings(algorithm="bogo"))
        try:
            assert r.algo_info.key == "bubble"
        finally:
            r.shutdown()

    def test_shuffle_then_sort(self, runner):
        assert runner.shuffle() is True
        assert runner.container.is_sorted is False

        assert runner.start() is True
        assert runner.wait(5)

        assert runner.container.is_ordered()
        metrics = runner.last_metrics
        assert metrics.completed
        assert metrics.lines_count == 20
        assert runner.snapshot()["state"] == "idle"

    def test_restart_refused_until_shuffled(self, runner):
        runner.shuffle()
        runner.start()
        runner.wait(5)

        assert runner.start() is False
        runner.shuffle()
        assert runner.start() is True
        runner.wait(5)

    def test_select(self, runner):
        assert runner.select("heap") is True
        assert runner.algorithm.name == "HEAP_SORT"
        assert runner.settings.algorithm == "heap"
        with pytest.raises(ValueError):
            runner.select("bogo")
        with pytest.raises(ValueError):
            runner.select("shuffle")

    def test_stop_mid_run(self, slow_runner):
        assert slow_runner.start() is True
        time.sleep(0.05)
        assert slow_runner.snapshot()["state"] == "sorting"

        assert slow_runner.stop() is True
        assert slow_runner.wait(2)

        snap = slow_runner.snapshot()
        assert snap["state"] == "idle"
        assert snap["container"]["is_sorted"] is False
        assert snap["last_metrics"]["cancelled"] is True
        assert {line["color"] for line in snap["container"]["lines"]} == {"#ffffff"}
        assert len(set(slow_runner.container.heights())) == 40

    def test_commands_refused_while_sorting(self, slow_runner):
        slow_runner.start()
        try:
            assert slow_runner.start() is False
            assert slow_runner.select("merge") is False
            assert slow_runner.shuffle() is False
            assert slow_runner.configure(lines_count=5) is False
            assert slow_runner.algo_info.key == "bubble"
        finally:
            slow_runner.stop()
            slow_runner.wait(2)

    def test_start_right_after_stop(self, slow_runner):
        slow_runner.start()
        time.sleep(0.03)
        slow_runner.stop()

        assert slow_runner.start(delay=0) is True
        assert slow_runner.wait(5)
        assert slow_runner.container.is_ordered()

    def test_configure_rebuilds_lines(self, runner):
        assert runner.configure(lines_count=7, lines_margin=0, delay=3) is True
        assert len(runner.container) == 7
        assert runner.settings.algorithm_delay == 3
        assert runner.snapshot()["delay"] == 3

    def test_configure_clamps(self, runner):
        runner.configure(lines_count=9999, delay=-10)
        assert len(runner.container) == 500
        assert runner.settings.algorithm_delay == 0

    def test_failed_run_only_clears_sorted_flag_when_current(self, runner):
        async def failing():
            raise RuntimeError("step failed")

        loop = asyncio.new_event_loop()
        try:
            task = loop.create_task(failing())
            loop.run_until_complete(asyncio.wait({task}))
        finally:
            loop.close()

        runner.container.is_sorted = True
        runner._on_done(task)
        assert runner.container.is_sorted is True

        runner._task = task
        runner._on_done(task)
        assert runner.container.is_sorted is False
        runner._task = None
