#!/usr/bin/env python3
"""
config.py

Defaults and parsing for the cam2image parameters.

Parameters
----------
device       string  default /dev/video0   # capture device
topic        string  default image         # output topic
width        int     default 640           # requested capture width
height       int     default 480           # requested capture height
freq         double  default 30.0          # publish rate [Hz]
burger_mode  bool    default False         # synthetic frames instead of a camera
show_camera  bool    default False         # OpenCV preview window
history      string  default keep_last     # keep_last | keep_all
depth        int     default 10            # history depth (keep_last only)
reliability  string  default reliable      # reliable | best_effort
"""

from dataclasses import dataclass, fields

# ========================= CONFIGURATION =========================
NODE_NAME = "cam2image"
FLIP_TOPIC = "flip_image"
WINDOW_NAME = "cam2image"

DEFAULT_DEVICE = "/dev/video0"
DEFAULT_TOPIC = "image"
DEFAULT_WIDTH = 640
DEFAULT_HEIGHT = 480
DEFAULT_FREQ = 30.0

# middleware default profile
DEFAULT_HISTORY = "keep_last"
DEFAULT_DEPTH = 10
DEFAULT_RELIABILITY = "reliable"

HISTORY_POLICIES = ("keep_last", "keep_all")
RELIABILITY_POLICIES = ("reliable", "best_effort")
# =================================================================


@dataclass
class Cam2ImageConfig:
    device: str = DEFAULT_DEVICE
    topic: str = DEFAULT_TOPIC
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    freq: float = DEFAULT_FREQ
    burger_mode: bool = False
    show_camera: bool = False
    history: str = DEFAULT_HISTORY
    depth: int = DEFAULT_DEPTH
    reliability: str = DEFAULT_RELIABILITY

    @classmethod
    def defaults(cls) -> dict:
        """Parameter name -> default value, in declaration order."""
        return {f.name: f.default for f in fields(cls)}

    @classmethod
    def from_parameters(cls, get_value) -> "Cam2ImageConfig":
        """
        Build a config from a lookup callable (name -> value).
        A lookup returning None keeps the default.
        """
        values = {}
        for name, default in cls.defaults().items():
            value = get_value(name)
            values[name] = default if value is None else value

        cfg = cls(
            device=str(values["device"]),
            topic=str(values["topic"]),
            width=int(values["width"]),
            height=int(values["height"]),
            freq=float(values["freq"]),
            burger_mode=bool(values["burger_mode"]),
            show_camera=bool(values["show_camera"]),
            history=str(values["history"]).lower(),
            depth=int(values["depth"]),
            reliability=str(values["reliability"]).lower(),
        )
        cfg.validate()
        return cfg

    def validate(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"width/height must be positive, got {self.width}x{self.height}")
        if self.freq <= 0.0:
            raise ValueError(f"freq must be positive, got {self.freq}")
        if self.history not in HISTORY_POLICIES:
            raise ValueError(f"history must be one of {HISTORY_POLICIES}, got '{self.history}'")
        if self.reliability not in RELIABILITY_POLICIES:
            raise ValueError(
                f"reliability must be one of {RELIABILITY_POLICIES}, got '{self.reliability}'"
            )
        if self.depth < 0:
            raise ValueError(f"depth must be non-negative, got {self.depth}")
