"""screencap - Capture the X11 screen as an image or video."""

__version__ = "0.1.0"
