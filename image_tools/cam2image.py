#!/usr/bin/env python3
"""
cam2image.py

Grabs frames from a V4L2 camera with OpenCV (or renders synthetic burgers)
and publishes them as sensor_msgs/Image on `topic`. Publishing
`std_msgs/Bool` on /flip_image mirrors the image about the vertical axis.

Parameters (see image_tools/config.py)
--------------------------------------
device  topic  width  height  freq
burger_mode  show_camera  history  depth  reliability

Run:
  ros2 run image_tools cam2image
  ros2 run image_tools cam2image --ros-args -p burger_mode:=true -p freq:=10.0
  ros2 topic pub --once /flip_image std_msgs/msg/Bool "{data: true}"
"""

import sys

import rclpy
from rclpy.logging import get_logger
from rclpy.node import Node
from sensor_msgs.msg import Image
from std_msgs.msg import Bool

from image_tools.burger import Burger
from image_tools.capture import CaptureOpenFailure, CaptureSource
from image_tools.config import FLIP_TOPIC, NODE_NAME, WINDOW_NAME, Cam2ImageConfig
from image_tools.encoding import UnsupportedEncoding
from image_tools.flip import FlipToggle
from image_tools.producer import FrameProducer
from image_tools.qos import FLIP_QOS, build_qos


class Cam2Image(Node):
    def __init__(self, **kwargs):
        super().__init__(NODE_NAME, **kwargs)

        # ---- Parameters ----
        for name, default in Cam2ImageConfig.defaults().items():
            self.declare_parameter(name, default)
        self.cfg = Cam2ImageConfig.from_parameters(
            lambda name: self.get_parameter(name).value
        )
        cfg = self.cfg

        # ---- Publisher / flip subscription ----
        qos = build_qos(cfg.history, cfg.depth, cfg.reliability)
        self.get_logger().info(f"Publishing data on topic '{cfg.topic}'")
        self.image_pub = self.create_publisher(Image, cfg.topic, qos)

        self.flip = FlipToggle(self.get_logger())
        self.flip_sub = self.create_subscription(
            Bool, FLIP_TOPIC, self.flip.on_toggle, FLIP_QOS
        )

        # ---- Frame source ----
        if cfg.burger_mode:
            self.source = Burger()
            self.get_logger().info(f"Burger mode: rendering {cfg.width}x{cfg.height}")
        else:
            self.source = CaptureSource(self.get_logger())
            if not self.source.open(cfg.device, cfg.width, cfg.height):
                raise CaptureOpenFailure(f"Could not open video stream {cfg.device}")

        self.producer = FrameProducer(
            source=self.source,
            flip=self.flip,
            publisher=self.image_pub,
            msg_factory=Image,
            width=cfg.width,
            height=cfg.height,
            logger=self.get_logger(),
            show_camera=cfg.show_camera,
            window_name=WINDOW_NAME,
        )

        # ---- Timer at freq Hz ----
        self.timer = self.create_timer(1.0 / cfg.freq, self.producer.produce)

        self.get_logger().info(
            f"{NODE_NAME} started: {cfg.width}x{cfg.height} @ {cfg.freq:.1f} Hz, "
            f"qos={cfg.history}/{cfg.depth}/{cfg.reliability}, "
            f"preview: {'ON' if cfg.show_camera else 'OFF'}"
        )

    def destroy_node(self):
        producer = getattr(self, "producer", None)
        if producer is not None:
            producer.close()
        source = getattr(self, "source", None)
        release = getattr(source, "release", None)
        if release is not None:
            release()
        super().destroy_node()


# ============================== MAIN ===============================
def main(args=None):
    # unbuffered stdout so output interleaves under ros2 launch
    sys.stdout.reconfigure(line_buffering=True, write_through=True)

    rclpy.init(args=args)
    node = None
    status = 0
    try:
        node = Cam2Image()
        rclpy.spin(node)
    except KeyboardInterrupt:
        pass
    except (CaptureOpenFailure, UnsupportedEncoding, ValueError) as e:
        logger = node.get_logger() if node is not None else get_logger(NODE_NAME)
        logger.error(str(e))
        status = 1
    finally:
        if node is not None:
            node.destroy_node()
        rclpy.try_shutdown()
    return status


if __name__ == "__main__":
    sys.exit(main())
