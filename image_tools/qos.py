#!/usr/bin/env python3
"""
qos.py

QoS profiles for the image publisher and the flip_image subscription.
"""

from rclpy.qos import (
    HistoryPolicy,
    QoSProfile,
    ReliabilityPolicy,
    qos_profile_sensor_data,
)

from image_tools.config import DEFAULT_DEPTH, DEFAULT_HISTORY, DEFAULT_RELIABILITY

HISTORY = {
    "keep_last": HistoryPolicy.KEEP_LAST,
    "keep_all":  HistoryPolicy.KEEP_ALL,
}

RELIABILITY = {
    "reliable":    ReliabilityPolicy.RELIABLE,
    "best_effort": ReliabilityPolicy.BEST_EFFORT,
}

# flip_image: best effort, shallow keep-last
FLIP_QOS = qos_profile_sensor_data


def build_qos(history: str = DEFAULT_HISTORY,
              depth: int = DEFAULT_DEPTH,
              reliability: str = DEFAULT_RELIABILITY) -> QoSProfile:
    """
    KEEP_ALL keeps every message until taken (up to resource limits), so
    depth only applies to KEEP_LAST.
    """
    try:
        history_policy = HISTORY[history]
        reliability_policy = RELIABILITY[reliability]
    except KeyError as ex:
        raise ValueError(f"Unknown QoS policy {ex}") from None

    if history_policy == HistoryPolicy.KEEP_ALL:
        return QoSProfile(history=history_policy, reliability=reliability_policy)

    return QoSProfile(
        history=history_policy,
        depth=int(depth),
        reliability=reliability_policy,
    )
