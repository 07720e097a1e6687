#!/usr/bin/env python3
"""
capture.py

Thin wrapper over cv2.VideoCapture (V4L2 backend).
"""

from typing import Optional

import cv2
import numpy as np


class CaptureOpenFailure(RuntimeError):
    """The video device could not be opened."""


class CaptureSource:
    def __init__(self, logger=None, api_preference: int = cv2.CAP_V4L2):
        self.logger = logger
        self.api_preference = api_preference
        self.cap = None

    def open(self, device: str, width: int, height: int) -> bool:
        self.cap = cv2.VideoCapture(device, self.api_preference)

        # Request capture resolution
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH,  float(width))
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, float(height))

        if not self.is_open():
            return False

        if self.logger is not None:
            actual_w = int(self.cap.get(cv2.CAP_PROP_FRAME_WIDTH))
            actual_h = int(self.cap.get(cv2.CAP_PROP_FRAME_HEIGHT))
            self.logger.info(
                f"Camera opened at {actual_w}x{actual_h} on {device} "
                f"(requested {width}x{height})"
            )
        return True

    def is_open(self) -> bool:
        return self.cap is not None and self.cap.isOpened()

    def grab(self) -> Optional[np.ndarray]:
        """Block for the next frame. None means nothing was read this tick."""
        if not self.is_open():
            return None
        ok, frame = self.cap.read()
        if not ok or frame is None or frame.size == 0:
            return None
        return frame

    def next_frame(self, width: int, height: int) -> Optional[np.ndarray]:
        # geometry was fixed at open()
        return self.grab()

    def release(self):
        if self.cap is not None:
            self.cap.release()
            self.cap = None
