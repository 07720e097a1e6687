#!/usr/bin/env python3
"""
burger.py

Synthetic frame source used when no camera is available (burger_mode).
Draws a handful of burgers bouncing around a dark background. Sprite start
positions and velocities come from a seeded generator, so two Burger
instances with the same seed produce the same frame sequence.
"""

import cv2
import numpy as np

# ========================= SPRITE =========================
SPRITE_W = 100
SPRITE_H = 80
NUM_BURGERS = 5
DEFAULT_SEED = 0

BUN_COLOR    = (60, 150, 230)    # BGR
PATTY_COLOR  = (30, 50, 90)
LETTUCE_COLOR = (40, 200, 60)
CHEESE_COLOR = (30, 210, 250)
SEED_COLOR   = (200, 230, 250)
BACKGROUND   = (20, 20, 20)
# ==========================================================


def _draw_sprite() -> np.ndarray:
    """Build a single burger image (uint8 BGR) and return it."""
    img = np.zeros((SPRITE_H, SPRITE_W, 3), dtype=np.uint8)
    cx = SPRITE_W // 2

    # top bun
    cv2.ellipse(img, (cx, 30), (45, 25), 0, 180, 360, BUN_COLOR, -1)
    for sx, sy in ((30, 18), (50, 12), (70, 18), (40, 24), (60, 24)):
        cv2.ellipse(img, (sx, sy), (3, 2), 0, 0, 360, SEED_COLOR, -1)
    # fillings
    cv2.rectangle(img, (6, 32), (94, 38), LETTUCE_COLOR, -1)
    cv2.rectangle(img, (8, 38), (92, 42), CHEESE_COLOR, -1)
    cv2.rectangle(img, (5, 42), (95, 54), PATTY_COLOR, -1)
    # bottom bun
    cv2.ellipse(img, (cx, 56), (45, 14), 0, 0, 180, BUN_COLOR, -1)
    cv2.rectangle(img, (5, 54), (95, 58), BUN_COLOR, -1)
    return img


class Burger:
    def __init__(self, num_burgers: int = NUM_BURGERS, seed: int = DEFAULT_SEED):
        self.sprite = _draw_sprite()
        self.mask = self.sprite.any(axis=2)
        self.num_burgers = num_burgers
        self.rng = np.random.RandomState(seed)

        self._size = None      # (width, height) the state was laid out for
        self.x = None
        self.y = None
        self.dx = None
        self.dy = None

    def _reset(self, width: int, height: int):
        max_x = max(width - SPRITE_W, 0)
        max_y = max(height - SPRITE_H, 0)
        n = self.num_burgers
        self.x = self.rng.randint(0, max_x + 1, size=n)
        self.y = self.rng.randint(0, max_y + 1, size=n)
        self.dx = self.rng.choice([-3, -2, -1, 1, 2, 3], size=n)
        self.dy = self.rng.choice([-3, -2, -1, 1, 2, 3], size=n)
        self._size = (width, height)

    def _advance(self, width: int, height: int):
        max_x = max(width - SPRITE_W, 0)
        max_y = max(height - SPRITE_H, 0)

        self.x = self.x + self.dx
        self.y = self.y + self.dy

        # bounce off the borders
        hit_x = (self.x < 0) | (self.x > max_x)
        hit_y = (self.y < 0) | (self.y > max_y)
        self.dx = np.where(hit_x, -self.dx, self.dx)
        self.dy = np.where(hit_y, -self.dy, self.dy)
        self.x = np.clip(self.x, 0, max_x)
        self.y = np.clip(self.y, 0, max_y)

    def render_burger(self, width: int, height: int) -> np.ndarray:
        """Return the next width x height bgr8 frame of the animation."""
        width = int(width)
        height = int(height)
        if self._size != (width, height):
            self._reset(width, height)
        else:
            self._advance(width, height)

        frame = np.empty((height, width, 3), dtype=np.uint8)
        frame[:] = BACKGROUND

        for x, y in zip(self.x, self.y):
            # sprite may be clipped when the frame is smaller than a burger
            w = min(SPRITE_W, width - x)
            h = min(SPRITE_H, height - y)
            if w <= 0 or h <= 0:
                continue
            roi = frame[y:y + h, x:x + w]
            mask = self.mask[:h, :w]
            roi[mask] = self.sprite[:h, :w][mask]

        return frame

    def next_frame(self, width: int, height: int) -> np.ndarray:
        return self.render_burger(width, height)
