# tests/test_color_model.py
import json

import pytest

# Public facade
import colorlens.detection.color.model as model

# Impl module (pour patcher load_model_labels et autres détails internes)
from colorlens.detection.color.model import model_adapter as model_impl
from colorlens.detection.general.utils import ConfigTypeError, temp_data_dir

LABELS = model_impl.DEFAULT_MODEL_LABELS


# ── Dummies ───────────────────────────────────────────────────────────────────
class DummyModel:
    def __init__(self, scores):
        self.scores = scores
        self.calls = []
    def predict(self, features):
        self.calls.append(list(features))
        return self.scores


class BrokenModel:
    def predict(self, features):
        raise RuntimeError("interpreter exploded")


def one_hot(label, labels=LABELS, hi=0.9):
    rest = (1 - hi) / (len(labels) - 1)
    return [hi if name == label else rest for name in labels]


# ── Tests ─────────────────────────────────────────────────────────────────────
def test_case_01_dummy_model_satisfies_protocol():
    assert isinstance(DummyModel([]), model.ColorModelProtocol)
    assert not isinstance(object(), model.ColorModelProtocol)


def test_case_02_model_features_normalize_hue():
    assert model.model_features(255, 0, 0) == (0.0, 1.0, 1.0)
    h, s, v = model.model_features(0, 0, 255)
    assert h == pytest.approx(240 / 360) and s == 1.0 and v == 1.0


def test_case_03_decode_predictions_argmax_first_on_tie():
    assert model.decode_predictions(one_hot("Violet")) == ("Violet", pytest.approx(0.9))
    tie = [0.5, 0.5] + [0.0] * (len(LABELS) - 2)
    assert model.decode_predictions(tie)[0] == "Red"


def test_case_04_decode_predictions_shape_errors():
    with pytest.raises(model.ModelOutputError):
        model.decode_predictions([])
    with pytest.raises(model.ModelOutputError):
        model.decode_predictions([0.1, 0.9], LABELS)
    # also a ValueError for callers treating it as bad data
    with pytest.raises(ValueError):
        model.decode_predictions([1.0], ("A", "B"))


def test_case_05_detect_color_with_model_rounds_sample():
    dummy = DummyModel(one_hot("Red"))
    res = model.detect_color_with_model((200.4, 30.6, 40.5), dummy, labels=LABELS)
    assert res.name == "Red"
    assert res.rgb == (200, 31, 41)
    assert res.hex == "#c81f29"
    assert res.method == "AI"
    assert res.confidence == pytest.approx(0.9)
    assert len(dummy.calls) == 1 and len(dummy.calls[0]) == 3
    assert dummy.calls[0][0] == pytest.approx(res.hsv.h / 360)


def test_case_06_detect_color_without_model_raises():
    with pytest.raises(model.ModelNotLoadedError):
        model.detect_color_with_model((10, 10, 10), None, labels=LABELS)


def test_case_07_model_failures_are_wrapped_not_swallowed():
    with pytest.raises(model.ModelError) as info:
        model.detect_color_with_model((10, 200, 10), BrokenModel(), labels=LABELS)
    assert isinstance(info.value.__cause__, RuntimeError)


def test_case_08_detect_rejects_out_of_range_sample():
    with pytest.raises(ValueError):
        model.detect_color_with_model((256, 0, 0), DummyModel(one_hot("Red")), labels=LABELS)


def test_case_09_result_to_dict_shape():
    res = model.detect_color_with_model((255, 0, 0), DummyModel(one_hot("Red")), labels=LABELS)
    out = res.to_dict()
    assert set(out) == {"name", "hex", "rgb", "hsv", "confidence", "method"}
    assert out["rgb"] == [255, 0, 0]
    assert out["hsv"] == {"h": 0.0, "s": 1.0, "v": 1.0}


def test_case_10_load_model_labels_from_data_dir(tmp_path):
    (tmp_path / "color_model_labels.json").write_text(json.dumps(["Cyan", "Amber"]), encoding="utf-8")
    assert model.load_model_labels(base_dir=tmp_path) == ("Cyan", "Amber")


def test_case_11_load_model_labels_defaults_when_missing(tmp_path):
    assert model.load_model_labels(base_dir=tmp_path) == LABELS
    with temp_data_dir(tmp_path):
        assert model.load_model_labels() == LABELS


@pytest.mark.parametrize("payload", [[], ["Red", "Red"], {"labels": ["Red"]}, ["Red", 3]])
def test_case_12_load_model_labels_rejects_bad_files(tmp_path, payload):
    (tmp_path / "color_model_labels.json").write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(ConfigTypeError):
        model.load_model_labels(base_dir=tmp_path)


def test_case_13_detect_uses_labels_from_env_data_dir(tmp_path):
    (tmp_path / "color_model_labels.json").write_text(json.dumps(["Warm", "Cool"]), encoding="utf-8")
    with temp_data_dir(tmp_path):
        res = model.detect_color_with_model((0, 0, 255), DummyModel([0.2, 0.8]))
    assert res.name == "Cool"


def test_case_14_describe_model():
    info = model.describe_model(None, labels=LABELS)
    assert info == {"loaded": False, "input_size": 3, "labels": list(LABELS)}
    assert model.describe_model(DummyModel([]), labels=LABELS)["loaded"] is True


def test_case_15_self_test_feeds_pure_red():
    dummy = DummyModel(one_hot("Red"))
    report = model.self_test_model(dummy, labels=LABELS)
    assert dummy.calls == [[0.0, 1.0, 1.0]]
    assert report["detected"] == "Red"
    assert report["labels"] == list(LABELS)
    assert len(report["scores"]) == len(LABELS)


def test_case_16_self_test_without_model_raises():
    with pytest.raises(model.ModelNotLoadedError):
        model.self_test_model(None, labels=LABELS)
