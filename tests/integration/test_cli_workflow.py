"""Integration tests for end-to-end CLI workflows."""

import json
import os

import pytest
from click.testing import CliRunner

from oilfire.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


class TestDesignCommand:
    def test_defaults(self, runner):
        result = runner.invoke(cli, ["design"])
        assert result.exit_code == 0, result.output
        assert "Engine Design Results" in result.output
        assert "279" in result.output

    def test_quantity_with_units(self, runner):
        result = runner.invoke(cli, ["design", "--thrust", "889.64 N", "--pc", "34.47 bar"])
        assert result.exit_code == 0, result.output

    def test_bad_quantity(self, runner):
        result = runner.invoke(cli, ["design", "--pc", "12 kg"])
        assert result.exit_code != 0

    def test_zero_holes_rejected(self, runner):
        result = runner.invoke(cli, ["design", "--fuel-holes", "0"])
        assert result.exit_code == 1
        assert "fuel_holes" in result.output

    def test_unknown_fuel_defaults(self, runner):
        result = runner.invoke(cli, ["design", "--fuel", "kerosene"])
        assert result.exit_code == 0, result.output
        assert "unknown fuel" in result.output

    def test_saves_text_record(self, runner, tmp_path):
        result = runner.invoke(cli, ["design", "-o", str(tmp_path)])
        assert result.exit_code == 0, result.output
        assert (tmp_path / "gasoline_200_500_2.5_60_3_results.txt").exists()

    def test_alcohol_default_mixture_ratio(self, runner, tmp_path):
        result = runner.invoke(cli, ["design", "--fuel", "alcohol", "-o", str(tmp_path)])
        assert result.exit_code == 0, result.output
        assert (tmp_path / "alcohol_200_500_1.2_60_3_results.txt").exists()


class TestDesignToInfoPipeline:
    def test_json_record_then_info(self, runner, tmp_path):
        result = runner.invoke(cli, ["design", "-o", str(tmp_path), "--format", "json"])
        assert result.exit_code == 0, result.output

        path = tmp_path / "gasoline_200_500_2.5_60_3_results.json"
        with open(path) as f:
            data = json.load(f)
        assert data["result"]["specific_impulse"]["value"] == 279.0

        result = runner.invoke(cli, ["info", "record", str(path)])
        assert result.exit_code == 0, result.output
        assert "throat_diameter" in result.output


class TestSweepCommand:
    def test_grid(self, runner, tmp_path):
        result = runner.invoke(
            cli,
            ["sweep", "--thrust", "100", "--thrust", "200", "--pc", "300", "--pc", "500",
             "-o", str(tmp_path)],
        )
        assert result.exit_code == 0, result.output
        assert len(os.listdir(tmp_path)) == 4

    def test_all_invalid_fails(self, runner):
        result = runner.invoke(cli, ["sweep", "--thrust", "0", "--pc", "500"])
        assert result.exit_code == 1


class TestInfoCommand:
    def test_fuels(self, runner):
        result = runner.invoke(cli, ["info", "fuels"])
        assert result.exit_code == 0, result.output
        assert "ethanol" in result.output
        assert "alcohol" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output
