import json
import logging

import pytest

from colorlens import classify_from_hsv, classify_from_rgb
from colorlens.demo import main
from colorlens.detection import orchestrator
from colorlens.detection.color.model import ModelNotLoadedError


class RedModel:
    def predict(self, features):
        return [0.8, 0.2]


def test_smoke():
    assert classify_from_rgb(255, 0, 0).name == "Red"
    assert classify_from_hsv(120, 1, 1).name == "Green"


# ── orchestrator ──────────────────────────────────────────────────────────────
def test_analyze_sample_default_method(monkeypatch):
    monkeypatch.delenv("COLORLENS_METHOD", raising=False)
    out = orchestrator.analyze_sample((128, 128, 128))
    assert out["name"] == "Gray"
    assert out["method"] == "hsv"
    assert "candidates" not in out


def test_analyze_sample_with_candidates():
    out = orchestrator.analyze_sample((0, 255, 0), method="hsv", rank=2)
    assert [c["name"] for c in out["candidates"]] == ["Green", "Lime"]


def test_analyze_sample_ai_method():
    out = orchestrator.analyze_sample((250, 10, 10), method="ai", model=RedModel(), labels=("Red", "Blue"))
    assert out["name"] == "Red"
    assert out["method"] == "AI"
    assert out["confidence"] == pytest.approx(0.8)


def test_analyze_sample_env_method_and_errors(monkeypatch):
    monkeypatch.setenv("COLORLENS_METHOD", "ai")
    with pytest.raises(ModelNotLoadedError):
        orchestrator.analyze_sample((1, 2, 3), labels=("Red",))
    with pytest.raises(ValueError):
        orchestrator.analyze_sample((1, 2, 3), method="lab")


def test_analyze_hsv_uses_reference_gray():
    out = orchestrator.analyze_hsv(0, 0, 0.5)
    assert out["name"] == "Gray"
    assert out["rgb"] == [128, 128, 128]
    assert out["hex"] == "#808080"


# ── CLI ───────────────────────────────────────────────────────────────────────
def _run_cli(capsys, *argv):
    main(list(argv))
    return json.loads(capsys.readouterr().out)


def test_cli_rgb_hsv_hex(capsys):
    assert _run_cli(capsys, "rgb", "255", "0", "0")["hex"] == "#ff0000"
    assert _run_cli(capsys, "hsv", "120", "1", "1")["name"] == "Green"
    assert _run_cli(capsys, "hex", "#808080")["name"] == "Gray"


def test_cli_rank_and_colors(capsys):
    out = _run_cli(capsys, "--rank", "3", "rgb", "0", "255", "0")
    assert [c["name"] for c in out["candidates"]][:2] == ["Green", "Lime"]
    colors = _run_cli(capsys, "colors")
    assert len(colors) == 20
    assert colors[0] == {"name": "Red", "hex": "#ff0000", "rgb": [255, 0, 0]}


def test_cli_random_is_seeded(capsys):
    a = _run_cli(capsys, "random", "--seed", "7")
    b = _run_cli(capsys, "random", "--seed", "7")
    assert a == b


def test_cli_error_exits_nonzero(capsys):
    with pytest.raises(SystemExit) as info:
        main(["hex", "not-a-color"])
    assert info.value.code == 1
    assert "Error:" in capsys.readouterr().err


def test_cli_debug_prints_topics(capsys, monkeypatch):
    log = pytest.importorskip("colorlens.detection.general.utils.log")
    monkeypatch.setattr(log, "_DEBUG_TOPICS", set())
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)
    main(["--debug", "rgb", "10", "10", "10"])
    captured = capsys.readouterr()
    assert json.loads(captured.out)["name"] == "Black"
    assert "[classify][DEBUG]" in captured.err
