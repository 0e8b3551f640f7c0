"""A lightweight metrics facade: metric keys, units and labels, a pluggable global recorder, and registration and emission functions."""

__version__ = "0.1.0"
__all__ = ["common", "label", "key", "recorder", "register", "emit", "printrecorder"]