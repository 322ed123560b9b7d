"""
Tests for the spinner-schedule CLI
"""
import json

import pytest
from click.testing import CliRunner

from cli.main import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.mark.unit
class TestSpinnerScheduleCli:
    """Tests für das spinner-schedule Kommando"""

    def test_table_output(self, runner):
        result = runner.invoke(main, [])

        assert result.exit_code == 0
        assert "Spinner Schedule" in result.output
        assert "1298" in result.output
        assert "30 x 30 at (3, 3)" in result.output

    def test_json_output(self, runner):
        result = runner.invoke(main, ["--json"])

        assert result.exit_code == 0
        report = json.loads(result.output)
        assert report["schedule"]["phase4"] == 1298
        assert report["geometry"]["arc_size"] == [30.0, 30.0]
        assert report["config"]["stroke_width"] == 6.0
        assert report["frames"] == []

    def test_corrected_angles(self, runner):
        result = runner.invoke(main, ["--min-angle", "400", "--max-angle", "50", "--json"])

        report = json.loads(result.output)
        assert report["config"]["min_angle"] == 0.0
        assert report["config"]["max_angle"] == 50.0

    def test_corrected_angles_are_flagged_in_table(self, runner):
        result = runner.invoke(main, ["--min-angle", "-5"])

        assert result.exit_code == 0
        assert "(given -5°" in result.output

    def test_samples_cover_one_cycle(self, runner):
        result = runner.invoke(main, ["--samples", "3", "--json"])

        frames = json.loads(result.output)["frames"]
        assert [f["elapsed_millis"] for f in frames] == [0.0, 650.0, 1300.0]
        assert frames[0]["start_angle"] == 0.0
        assert frames[0]["sweep_angle"] == 3.0
        assert frames[-1]["start_angle"] == 360.0
        assert frames[-1]["sweep_angle"] == 3.0

    def test_samples_in_table(self, runner):
        result = runner.invoke(main, ["--samples", "2"])

        assert result.exit_code == 0
        assert "extra°" in result.output

    def test_zero_sweep_time_fails(self, runner):
        result = runner.invoke(main, ["--sweep-time", "0"])

        assert result.exit_code == 1

    def test_multiplier_one_reports_infinite_period(self, runner):
        result = runner.invoke(main, ["--rotation-multiplier", "1", "--json"])

        assert result.exit_code == 0
        report = json.loads(result.output)
        assert report["extra_rotation"]["duration_millis"] == float("inf")
