"""
Tests for the Flask App
=========================
Covers:
- Page and JSON endpoints
- 400 on bad input, 409 when the run state refuses a command
- Settings persistence through /api/config
"""
import json

import pytest

from main import create_app
from engine import Settings, SortRunner, load_settings


@pytest.fixture
def runner(fast_settings):
    r = SortRunner(fast_settings)
    yield r
    r.shutdown()


@pytest.fixture
def client(runner):
    app = create_app(runner=runner)
    app.config["TESTING"] = True
    return app.test_client()


def post(client, url, body=None):
    return client.post(url, data=json.dumps(body or {}), content_type="application/json")


class TestPages:

    def test_index(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        html = resp.get_data(as_text=True)
        assert 'id="algo-selector"' in html
        assert 'id="btn-sort"' in html
        assert "TIMER:" in html

    def test_state(self, client):
        data = client.get("/api/state").get_json()
        assert data["state"] == "idle"
        assert data["algorithm"]["name"] == "BUBBLE_SORT"
        assert len(data["lines"]) == 20
        assert data["svg"].count('class="line"') == 20

    def test_algorithms(self, client):
        data = client.get("/api/algorithms").get_json()
        keys = [a["key"] for a in data]
        assert len(keys) == 9
        assert "shuffle" not in keys
        assert keys[0] == "bubble"


class TestCommands:

    def test_select_algorithm(self, client, runner):
        resp = post(client, "/api/algorithm", {"algo_key": "merge"})
        assert resp.status_code == 200
        assert runner.algo_info.key == "merge"
        assert "merge_sort" in resp.get_json()["pseudocode"]

    def test_select_unknown_algorithm(self, client):
        assert post(client, "/api/algorithm", {"algo_key": "bogo"}).status_code == 400
        assert post(client, "/api/algorithm").status_code == 400

    def test_shuffle_run_and_refused_rerun(self, client, runner):
        assert post(client, "/api/shuffle").status_code == 200
        assert post(client, "/api/run").status_code == 200
        assert runner.wait(5)

        assert runner.container.is_ordered()
        state = client.get("/api/state").get_json()
        assert state["is_sorted"] is True
        assert "Comparisons" in state["analytics"]

        assert post(client, "/api/run").status_code == 409

    def test_run_with_bad_delay(self, client):
        assert post(client, "/api/run", {"delay": "fast"}).status_code == 400

    def test_stop_when_idle(self, client):
        assert post(client, "/api/stop").status_code == 200

    def test_busy_run_refuses_changes(self, client, runner):
        post(client, "/api/shuffle")
        assert post(client, "/api/run", {"delay": 50}).status_code == 200
        try:
            assert post(client, "/api/algorithm", {"algo_key": "quick"}).status_code == 409
            assert post(client, "/api/shuffle").status_code == 409
            assert post(client, "/api/config", {"lines_count": 5}).status_code == 409
            assert client.get("/api/state").get_json()["state"] == "sorting"
        finally:
            assert post(client, "/api/stop").status_code == 200
            runner.wait(2)

        assert client.get("/api/state").get_json()["state"] == "idle"

    def test_config(self, client, runner):
        resp = post(client, "/api/config", {"lines_count": 30, "delay": 7})
        assert resp.status_code == 200
        data = resp.get_json()
        assert len(data["lines"]) == 30
        assert data["settings"]["algorithm_delay"] == 7
        assert len(runner.container) == 30

    def test_config_rejects_non_integers(self, client):
        assert post(client, "/api/config", {"lines_count": "many"}).status_code == 400


class TestPersistence:

    def test_config_is_saved_when_persisting(self, settings_home):
        runner = SortRunner(Settings(fill_step_ms=0, fill_hold_ms=0))
        try:
            client = create_app(runner=runner, persist=True).test_client()
            post(client, "/api/config", {"lines_count": 33})
            post(client, "/api/algorithm", {"algo_key": "comb"})
        finally:
            runner.shutdown()

        saved = load_settings()
        assert saved.lines_count == 33
        assert saved.algorithm == "comb"

    def test_injected_runner_does_not_persist(self, client, settings_home):
        post(client, "/api/config", {"lines_count": 12})
        assert not (settings_home / "settings.json").exists()
