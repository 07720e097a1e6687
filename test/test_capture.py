import cv2
import numpy as np
import pytest

from image_tools import capture
from image_tools.capture import CaptureSource


class FakeVideoCapture:
    instances = []

    def __init__(self, device, api_preference):
        self.device = device
        self.api_preference = api_preference
        self.props = {}
        self.opened = True
        self.frames = []
        self.released = False
        FakeVideoCapture.instances.append(self)

    def set(self, prop, value):
        self.props[prop] = value
        return True

    def get(self, prop):
        return self.props.get(prop, 0.0)

    def isOpened(self):
        return self.opened

    def read(self):
        if not self.frames:
            return False, None
        return True, self.frames.pop(0)

    def release(self):
        self.released = True
        self.opened = False


@pytest.fixture
def fake_cv(monkeypatch):
    FakeVideoCapture.instances = []
    monkeypatch.setattr(capture.cv2, "VideoCapture", FakeVideoCapture)
    return FakeVideoCapture


class RecordingLogger:
    def __init__(self):
        self.lines = []

    def info(self, msg):
        self.lines.append(msg)


def test_open_requests_geometry(fake_cv):
    logger = RecordingLogger()
    source = CaptureSource(logger)

    assert source.open("/dev/video3", 320, 240)
    cap = fake_cv.instances[0]
    assert cap.device == "/dev/video3"
    assert cap.api_preference == cv2.CAP_V4L2
    assert cap.props[cv2.CAP_PROP_FRAME_WIDTH] == 320.0
    assert cap.props[cv2.CAP_PROP_FRAME_HEIGHT] == 240.0
    assert source.is_open()
    assert "320x240" in logger.lines[0]


def test_open_failure(fake_cv, monkeypatch):
    monkeypatch.setattr(FakeVideoCapture, "isOpened", lambda self: False)
    source = CaptureSource()
    assert not source.open("/dev/video9", 640, 480)
    assert not source.is_open()


def test_grab_returns_frame_then_none(fake_cv):
    source = CaptureSource()
    source.open("/dev/video0", 4, 4)
    frame = np.ones((4, 4, 3), dtype=np.uint8)
    fake_cv.instances[0].frames = [frame]

    assert source.grab() is frame
    assert source.grab() is None


def test_grab_treats_empty_array_as_missing(fake_cv):
    source = CaptureSource()
    source.open("/dev/video0", 4, 4)
    fake_cv.instances[0].frames = [np.zeros((0, 0, 3), dtype=np.uint8)]
    assert source.grab() is None


def test_grab_before_open():
    assert CaptureSource().grab() is None


def test_next_frame_ignores_geometry(fake_cv):
    source = CaptureSource()
    source.open("/dev/video0", 4, 4)
    frame = np.ones((4, 4, 3), dtype=np.uint8)
    fake_cv.instances[0].frames = [frame]
    assert source.next_frame(999, 999) is frame


def test_release(fake_cv):
    source = CaptureSource()
    source.open("/dev/video0", 4, 4)
    cap = fake_cv.instances[0]
    source.release()
    assert cap.released
    assert not source.is_open()
    source.release()
