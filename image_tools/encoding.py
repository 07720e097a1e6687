#!/usr/bin/env python3
"""
encoding.py

Maps a raw pixel buffer (numpy array from OpenCV) to the encoding string
carried in sensor_msgs/Image.

  channels x depth   signed   encoding
  ----------------   ------   --------
  1 x 8 bit          u        mono8
  1 x 16 bit         s        mono16
  3 x 8 bit          u        bgr8
  4 x 8 bit          u        rgba8
"""

from typing import Tuple

import numpy as np


class UnsupportedEncoding(RuntimeError):
    """Pixel buffer format has no sensor_msgs/Image encoding."""


# (channels, bits per element, signed) -> encoding
ENCODINGS = {
    (1, 8,  False): "mono8",
    (1, 16, True):  "mono16",
    (3, 8,  False): "bgr8",
    (4, 8,  False): "rgba8",
}


def encoding_for(channels: int, depth: int, signed: bool) -> str:
    try:
        return ENCODINGS[(int(channels), int(depth), bool(signed))]
    except KeyError:
        raise UnsupportedEncoding(
            f"Unsupported encoding type: {channels} channel(s), "
            f"{depth}-bit {'signed' if signed else 'unsigned'}"
        ) from None


def describe(frame: np.ndarray) -> Tuple[int, int, bool]:
    """Return (channels, bits per element, signed) for an image array."""
    if frame.ndim == 2:
        channels = 1
    elif frame.ndim == 3:
        channels = frame.shape[2]
    else:
        raise UnsupportedEncoding(f"Unsupported image shape {frame.shape}")

    kind = frame.dtype.kind
    if kind not in ("u", "i"):
        raise UnsupportedEncoding(f"Unsupported element type {frame.dtype}")

    return channels, frame.dtype.itemsize * 8, kind == "i"


def mat_type2encoding(frame: np.ndarray) -> str:
    return encoding_for(*describe(frame))
