"""Tests for the easeloom CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from easeloom.cli import main as cli
from easeloom.cli.main import main, parse_param


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> list[dict]:
    """Record logging configuration instead of touching the root logger."""
    calls: list[dict] = []
    monkeypatch.setattr(cli, "configure_logging", lambda **kwargs: calls.append(kwargs))
    monkeypatch.chdir(tmp_path)
    return calls


def read_json_output(capsys: pytest.CaptureFixture[str]) -> dict:
    return json.loads(capsys.readouterr().out)


class TestParseParam:
    """Tests for parse_param."""

    def test_valid(self) -> None:
        """key=value pairs parse to floats."""
        assert parse_param("damping=0.8") == ("damping", 0.8)
        assert parse_param(" intensity = 1 ") == ("intensity", 1.0)

    @pytest.mark.parametrize("raw", ["damping", "=0.5", "damping=soft"])
    def test_invalid(self, raw: str) -> None:
        """Malformed pairs raise ValueError."""
        with pytest.raises(ValueError):
            parse_param(raw)


class TestCommands:
    """Tests for CLI subcommands."""

    def test_curves(self, capsys: pytest.CaptureFixture[str]) -> None:
        """curves lists the catalog."""
        assert main(["curves"]) == 0
        out = capsys.readouterr().out
        assert "linear" in out
        assert "bounce_out" in out
        assert "css_ease_in_out" in out

    def test_sample_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        """sample prints evenly spaced points."""
        assert main(["sample", "linear", "--samples", "3", "--json"]) == 0
        payload = read_json_output(capsys)
        assert payload["curve"] == "linear"
        assert payload["samples"] == [
            {"t": 0.0, "v": 0.0},
            {"t": 0.5, "v": 0.5},
            {"t": 1.0, "v": 1.0},
        ]

    def test_sample_with_modifier(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Modifiers are applied to the sampled curve."""
        argv = ["sample", "ease_in_quad", "--modifier", "reverse", "--samples", "2", "--json"]
        assert main(argv) == 0
        values = [s["v"] for s in read_json_output(capsys)["samples"]]
        assert values == pytest.approx([1.0, 0.0])

    def test_sample_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Without --json a table is printed."""
        assert main(["sample", "ease_out_quad", "--samples", "3"]) == 0
        out = capsys.readouterr().out
        assert "0.500" in out
        assert "0.7500" in out

    def test_sample_unknown_curve(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Unknown curves exit with status 1."""
        assert main(["sample", "wobble"]) == 1
        assert "not registered" in capsys.readouterr().out

    def test_family(self, capsys: pytest.CaptureFixture[str]) -> None:
        """family builds a curve from --param values."""
        argv = ["family", "polynomial", "--param", "intensity=1", "--param", "symmetry=1"]
        assert main([*argv, "--samples", "3", "--json"]) == 0
        values = [s["v"] for s in read_json_output(capsys)["samples"]]
        assert values == pytest.approx([0.0, 0.5, 1.0])

    def test_family_bad_param(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Malformed parameters exit with status 1."""
        assert main(["family", "spring", "--param", "damping"]) == 1
        assert "ERROR" in capsys.readouterr().out

    def test_family_unknown_param(self) -> None:
        """Unknown parameter names exit with status 1."""
        assert main(["family", "spring", "--param", "wobble=1"]) == 1

    def test_profile(self, capsys: pytest.CaptureFixture[str]) -> None:
        """profile samples the synthesized curve."""
        assert main(["profile", "playful", "--samples", "5", "--json"]) == 0
        payload = read_json_output(capsys)
        assert payload["curve"] == "Playful"
        assert payload["samples"][0]["v"] == 0.0
        assert payload["samples"][-1]["v"] == 1.0

    def test_profile_shows_selection(self, capsys: pytest.CaptureFixture[str]) -> None:
        """The table view names the blended curves."""
        assert main(["profile", "natural", "--samples", "2"]) == 0
        assert "ease_in_out_sine" in capsys.readouterr().out

    def test_unknown_profile(self) -> None:
        """Unknown profiles exit with status 1."""
        assert main(["profile", "sleepy"]) == 1

    def test_bezier(self, capsys: pytest.CaptureFixture[str]) -> None:
        """bezier samples a cubic-bezier timing function."""
        assert main(["bezier", "0", "0", "1", "1", "--samples", "5", "--json"]) == 0
        samples = read_json_output(capsys)["samples"]
        assert [s["v"] for s in samples] == pytest.approx([s["t"] for s in samples], abs=1e-6)


class TestConfigIntegration:
    """Tests for --config and --log-level."""

    def test_missing_config(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """An explicit config that does not exist exits with status 1."""
        assert main(["--config", str(tmp_path / "missing.yaml"), "curves"]) == 1
        assert "Could not load config" in capsys.readouterr().out

    def test_config_presets_and_profiles(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Configured family presets and profiles are usable by name."""
        path = tmp_path / "easeloom.yaml"
        path.write_text(
            "default_samples: 4\n"
            "families:\n"
            "  soft_spring:\n"
            "    family: spring\n"
            "    params: {damping: 0.9}\n"
            "profiles:\n"
            "  underwater:\n"
            "    name: Underwater\n"
            "    characteristics: {fluidity: 0.9, weight: 0.8}\n",
            encoding="utf-8",
        )

        assert main(["--config", str(path), "sample", "soft_spring", "--json"]) == 0
        samples = read_json_output(capsys)["samples"]
        assert len(samples) == 4
        assert samples[0]["v"] == 0.0
        assert samples[-1]["v"] == 1.0

        assert main(["--config", str(path), "profile", "underwater", "--json"]) == 0
        assert read_json_output(capsys)["curve"] == "Underwater"

    def test_default_config_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """easeloom.yaml in the working directory is picked up."""
        (tmp_path / "easeloom.yaml").write_text("default_samples: 2\n", encoding="utf-8")
        assert main(["sample", "linear", "--json"]) == 0
        assert len(read_json_output(capsys)["samples"]) == 2

    def test_log_level_override(self, no_logging_setup: list[dict]) -> None:
        """--log-level wins over the configured level."""
        assert main(["--log-level", "DEBUG", "curves"]) == 0
        assert no_logging_setup[-1]["level"] == "DEBUG"

    def test_configured_logging(self, tmp_path: Path, no_logging_setup: list[dict]) -> None:
        """Logging settings come from the config file."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"logging": {"level": "WARNING", "structured": True}}))
        assert main(["--config", str(path), "curves"]) == 0
        assert no_logging_setup[-1] == {"level": "WARNING", "filename": None, "structured": True}
