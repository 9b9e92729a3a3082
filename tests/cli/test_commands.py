"""End-to-end tests for the CLI commands."""

import json
import logging

import pytest
from typer.testing import CliRunner

from lineage_insight import __version__
from lineage_insight.cli import app
from lineage_insight.cli._common import bar, format_number, percent, sparkline, truncate

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LINEAGE_DEFAULT_GROUP_BY", raising=False)


def run_json(*args):
    result = runner.invoke(app, [*args, "--format", "json"])
    assert result.exit_code == 0, result.output
    return json.loads(result.stdout)


class TestJsonOutput:
    def test_dashboard(self, snapshot_file):
        data = run_json("dashboard", str(snapshot_file))
        assert data["analytics"]["total_features"] == 1
        assert data["change_types"] == [{"change_type": "new_feature", "count": 3, "share": 1.0}]
        assert [w["week"] for w in data["velocity"]] == ["2024-W03"]

    def test_patterns(self, snapshot_file):
        data = run_json("patterns", str(snapshot_file))
        assert data["couplings"] == [{"file_a": "x.ts", "file_b": "y.ts", "count": 3}]
        assert data["profile"]["total_commits"] == 3
        assert sum(data["day_counts"]) == 3

    def test_intent(self, snapshot_file):
        data = run_json("intent", str(snapshot_file))
        assert data["total_prompts"] == 2
        assert data["outcomes"] == ["completed", "abandoned"]
        assert data["outcome_counts"] == {"completed": 1, "abandoned": 1}
        assert data["completion_rate"] == 0.5
        assert data["completion_rate_source"] == "sessions"
        assert data["reprompt_count"] == 0
        assert data["avg_tool_calls"] == 2.0

    def test_prompts(self, snapshot_file):
        groups = run_json("prompts", str(snapshot_file), "--group-by", "day")
        assert len(groups) == 2
        assert groups[0]["sessions"][0]["session_id"] == "s1"

    def test_timeline_filters(self, snapshot_file):
        commits = run_json("timeline", str(snapshot_file), "--assistant-only")
        assert [c["hash"] for c in commits] == ["a", "c"]

    def test_timeline_type_filter(self, snapshot_file):
        assert run_json("timeline", str(snapshot_file), "--type", "bug_fix") == []

    def test_features(self, snapshot_file):
        features = run_json("features", str(snapshot_file))
        assert features == [
            {
                "cluster_id": 1,
                "title": "Runner",
                "dominant_change_type": "new_feature",
                "commits": 3,
                "lines_added": 10,
                "lines_removed": 3,
            }
        ]

    def test_functions(self, snapshot_file):
        assert run_json("functions", str(snapshot_file)) == {"x.ts": ["run"], "y.ts": []}

    def test_directory_argument(self, snapshot_file):
        data = run_json("functions", str(snapshot_file.parent))
        assert "x.ts" in data


class TestRichOutput:
    def test_dashboard_renders(self, snapshot_file):
        result = runner.invoke(app, ["dashboard", str(snapshot_file)])
        assert result.exit_code == 0
        assert "LINEAGE INSIGHT" in result.output
        assert "Change Types" in result.output

    def test_patterns_renders(self, snapshot_file):
        result = runner.invoke(app, ["patterns", str(snapshot_file)])
        assert result.exit_code == 0
        assert "Developer Profile" in result.output
        assert "3x" in result.output

    def test_prompts_summary_line(self, snapshot_file):
        result = runner.invoke(app, ["prompts", str(snapshot_file)])
        assert result.exit_code == 0
        assert "2 prompts across 2 sessions" in result.output
        assert "0 files written · 0 files read" in result.output

    def test_timeline_count(self, snapshot_file):
        result = runner.invoke(app, ["timeline", str(snapshot_file), "--author", "alice"])
        assert result.exit_code == 0
        assert "3 commits" in result.output

    def test_empty_project_messages(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text(json.dumps({"repository": {"path": "/repo/empty"}}), encoding="utf-8")
        prompts = runner.invoke(app, ["prompts", str(path)])
        features = runner.invoke(app, ["features", str(path)])
        functions = runner.invoke(app, ["functions", str(path)])
        patterns = runner.invoke(app, ["patterns", str(path)])
        assert "No prompts detected." in prompts.output
        assert "No features detected yet." in features.output
        assert "No function data available." in functions.output
        assert "No significant file couplings detected." in patterns.output


class TestErrors:
    def test_missing_snapshot(self, tmp_path):
        result = runner.invoke(app, ["dashboard", str(tmp_path / "absent.json")])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_invalid_grouping(self, snapshot_file):
        result = runner.invoke(app, ["prompts", str(snapshot_file), "--group-by", "year"])
        assert result.exit_code == 2
        assert "Unsupported grouping" in result.output

    def test_invalid_config_file(self, tmp_path, snapshot_file):
        config = tmp_path / "bad.toml"
        config.write_text("max_couplings = 0\n", encoding="utf-8")
        result = runner.invoke(app, ["--config", str(config), "dashboard", str(snapshot_file)])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_config_file_sets_log_level(self, tmp_path, snapshot_file):
        config = tmp_path / "verbose.toml"
        config.write_text('verbosity = "verbose"\n', encoding="utf-8")
        result = runner.invoke(
            app, ["--config", str(config), "functions", str(snapshot_file), "--format", "json"]
        )
        assert result.exit_code == 0
        assert logging.getLogger("lineage_insight").level == logging.DEBUG

    def test_log_file_option(self, tmp_path):
        log_path = tmp_path / "run.log"
        result = runner.invoke(
            app, ["--log-file", str(log_path), "dashboard", str(tmp_path / "absent.json")]
        )
        assert result.exit_code == 1
        assert "Scan failed" in log_path.read_text(encoding="utf-8")

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestFormatting:
    def test_truncate(self):
        assert truncate("short", 10) == "short"
        assert truncate("abcdefghij", 4) == "abcd..."

    @pytest.mark.parametrize("n,expected", [(0, "0"), (999, "999"), (1000, "1.0k"), (1234, "1.2k")])
    def test_format_number(self, n, expected):
        assert format_number(n) == expected

    def test_percent(self):
        assert percent(0.66) == "66%"

    def test_bar_is_clamped(self):
        assert bar(2.0, width=4) == "████"
        assert bar(0.0, width=4) == "····"

    def test_sparkline(self):
        assert sparkline([]) == ""
        assert sparkline([1, 1]) == "▄▄"
        assert sparkline([0, 8]) == " █"
