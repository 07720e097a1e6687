#!/usr/bin/env python3
"""
producer.py

Frame production for cam2image, one call per timer tick:

  grab/render -> (flip) -> Image -> publish

The node drives produce() from an rclpy timer on the same single-threaded
executor as the flip_image subscription, so a toggle handled between two
ticks takes effect from the next frame on.
"""

import cv2

from image_tools.encoder import convert_frame_to_message, flip_frame


class FrameProducer:
    def __init__(self, source, flip, publisher, msg_factory, width, height,
                 logger, show_camera=False, window_name="cam2image"):
        self.source = source
        self.flip = flip
        self.publisher = publisher
        self.msg_factory = msg_factory
        self.width = int(width)
        self.height = int(height)
        self.logger = logger
        self.show_camera = show_camera
        self.window_name = window_name

        self.frame_id = 1

    def produce(self) -> bool:
        """Acquire, encode and publish one frame. True if a frame went out."""
        msg = self.msg_factory()

        frame = self.source.next_frame(self.width, self.height)
        if frame is None:
            self.logger.debug("Empty frame - skipping")
            return False

        # single read per frame
        if self.flip.read():
            convert_frame_to_message(flip_frame(frame), self.frame_id, msg)
        else:
            convert_frame_to_message(frame, self.frame_id, msg)

        if self.show_camera:
            cv2.imshow(self.window_name, frame)
            cv2.waitKey(1)

        try:
            self.publisher.publish(msg)
        except Exception as e:
            self.logger.error(f"Failed to publish image #{self.frame_id}: {e}")
            return False

        self.frame_id += 1
        return True

    def close(self):
        if self.show_camera:
            cv2.destroyWindow(self.window_name)
