"""
Tests for the SVG canvas and control panels.
"""
from lines import Container
from engine import RunMetrics, Settings
from algorithms import list_algorithms, get_algorithm
from ui import (
    render_canvas,
    playback_controls,
    algorithm_selector,
    settings_panel,
    info_panel,
    analytics_panel,
    pseudocode_viewer,
)


def snapshot(count=5):
    container = Container((200, 100), 10, count, 2)
    container.load()
    return container.to_dict()


class TestCanvas:

    def test_one_rect_per_line(self):
        svg = render_canvas(snapshot(7))
        assert svg.startswith("<svg")
        assert svg.count('class="line"') == 7

    def test_bar_top_is_baseline_minus_height(self):
        svg = render_canvas(snapshot(1))
        # single line: height 80, baseline 90
        assert 'y="10.00"' in svg
        assert 'height="80.00"' in svg

    def test_banner_is_escaped(self):
        svg = render_canvas(snapshot(0), banner="<done>")
        assert "&lt;done&gt;" in svg
        assert 'class="line"' not in svg


class TestControls:

    def test_playback_idle(self):
        html = playback_controls("idle", is_sorted=False)
        assert 'id="btn-stop" title="[S] Stop" disabled' in html
        assert 'id="btn-sort" title="[E] Sort" >' in html

    def test_playback_sorted_disables_sort(self):
        html = playback_controls("idle", is_sorted=True)
        assert 'id="btn-sort" title="[E] Sort" disabled' in html

    def test_playback_sorting(self):
        html = playback_controls("sorting")
        assert 'id="btn-shuffle" title="[SPACE] Randomize" disabled' in html
        assert 'id="btn-stop" title="[S] Stop" >' in html

    def test_algorithm_selector(self):
        html = algorithm_selector(list_algorithms(sorts_only=True), "heap")
        assert html.count("<option") == 9
        assert '<option value="heap" selected>' in html

    def test_settings_panel(self):
        html = settings_panel(Settings(lines_count=42), disabled=True)
        assert 'value="42"' in html
        assert html.count("disabled") == 4

    def test_info_panel_timer(self):
        html = info_panel("QUICK_SORT", "sorting", 1500)
        assert "QUICK_SORT" in html
        assert "TIMER:</span> 00:01.500" in html

    def test_analytics_panel(self):
        assert "Run a sort" in analytics_panel(None)
        html = analytics_panel(RunMetrics(algo_label="Heap Sort", comparisons=12, swaps=3, cancelled=True))
        assert "Heap Sort" in html
        assert "<strong>12</strong>" in html
        assert "Stopped" in html

    def test_pseudocode_is_escaped(self):
        html = pseudocode_viewer(get_algorithm("selection").pseudocode, "Selection Sort")
        assert "a[j] &lt; a[min]" in html
        assert "Select an algorithm" in pseudocode_viewer([])
