#!/usr/bin/env python3
"""
encoder.py

Fills a sensor_msgs/Image from an OpenCV frame.
"""

from array import array

import cv2
import numpy as np

from image_tools.encoding import mat_type2encoding


def convert_frame_to_message(frame: np.ndarray, frame_id: int, msg):
    """
    Copy an OpenCV image into an Image message.

    Args:
        frame:    H x W or H x W x C array (mono8, mono16, bgr8 or rgba8 layout).
        frame_id: written to header.frame_id as a decimal string.
        msg:      the message to fill (sensor_msgs.msg.Image).

    Returns:
        msg, for convenience.

    Raises:
        UnsupportedEncoding: the frame layout has no Image encoding.
          msg is left untouched.
    """
    encoding = mat_type2encoding(frame)

    # rows must be laid out back to back for step * height to hold
    frame = np.ascontiguousarray(frame)
    height, width = frame.shape[:2]
    step = frame.strides[0]

    data = array("B")
    data.frombytes(frame.tobytes())   # copy; never alias the capture buffer

    msg.height = height
    msg.width = width
    msg.encoding = encoding
    msg.is_bigendian = False
    msg.step = step
    msg.data = data
    msg.header.frame_id = str(frame_id)
    return msg


def flip_frame(frame: np.ndarray) -> np.ndarray:
    """Mirror about the vertical axis (new array)."""
    return cv2.flip(frame, 1)
