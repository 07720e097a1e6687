import pytest

from image_tools.config import Cam2ImageConfig


def test_defaults():
    cfg = Cam2ImageConfig.from_parameters(lambda name: None)
    assert cfg.device == "/dev/video0"
    assert cfg.topic == "image"
    assert (cfg.width, cfg.height) == (640, 480)
    assert cfg.freq == 30.0
    assert cfg.burger_mode is False
    assert cfg.show_camera is False
    assert (cfg.history, cfg.depth, cfg.reliability) == ("keep_last", 10, "reliable")


def test_parameter_names():
    assert list(Cam2ImageConfig.defaults()) == [
        "device", "topic", "width", "height", "freq",
        "burger_mode", "show_camera", "history", "depth", "reliability",
    ]


def test_overrides_are_coerced():
    params = {"width": 320, "height": 240, "freq": 10, "reliability": "BEST_EFFORT",
              "history": "keep_all", "burger_mode": True}
    cfg = Cam2ImageConfig.from_parameters(params.get)

    assert (cfg.width, cfg.height) == (320, 240)
    assert isinstance(cfg.freq, float) and cfg.freq == 10.0
    assert cfg.reliability == "best_effort"
    assert cfg.history == "keep_all"
    assert cfg.burger_mode is True


@pytest.mark.parametrize("params", [
    {"width": 0},
    {"height": -1},
    {"freq": 0.0},
    {"history": "keep_some"},
    {"reliability": "maybe"},
    {"depth": -1},
])
def test_invalid_values(params):
    with pytest.raises(ValueError):
        Cam2ImageConfig.from_parameters(params.get)
