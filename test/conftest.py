from types import SimpleNamespace

import pytest


class FakeImage:
    """Stand-in for sensor_msgs.msg.Image with the fields the encoder writes."""

    def __init__(self):
        self.header = SimpleNamespace(frame_id="")
        self.height = 0
        self.width = 0
        self.encoding = ""
        self.is_bigendian = False
        self.step = 0
        self.data = None


class FakePublisher:
    def __init__(self, fail_on=()):
        self.sent = []
        self.calls = 0
        self.fail_on = set(fail_on)   # 1-based publish call numbers that raise

    def publish(self, msg):
        self.calls += 1
        if self.calls in self.fail_on:
            raise RuntimeError("publisher rejected message")
        self.sent.append(msg)


class ListSource:
    """Frame source replaying a fixed list of frames (None = empty grab)."""

    def __init__(self, frames):
        self.frames = list(frames)
        self.calls = 0

    def next_frame(self, width, height):
        self.calls += 1
        if not self.frames:
            return None
        return self.frames.pop(0)


@pytest.fixture
def fake_image():
    return FakeImage


@pytest.fixture
def publisher():
    return FakePublisher()


def bool_msg(value):
    return SimpleNamespace(data=value)
