from image_tools.capture import CaptureOpenFailure
from image_tools.encoding import UnsupportedEncoding

__all__ = ["CaptureOpenFailure", "UnsupportedEncoding"]
