#!/usr/bin/env python3
"""
flip.py

Holds the flip_image state. Updated from the std_msgs/Bool subscription,
read once per frame by the producer. Both run on the executor thread, so
there is no lock.
"""


class FlipToggle:
    def __init__(self, logger, initial: bool = False):
        self.logger = logger
        self._flipped = bool(initial)

    def on_toggle(self, msg):
        self._flipped = bool(msg.data)
        self.logger.info(f"Set flip mode to: {'on' if self._flipped else 'off'}")

    def read(self) -> bool:
        return self._flipped
