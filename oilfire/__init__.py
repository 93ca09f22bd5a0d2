"""Oilfire — liquid rocket engine sizing from top-level requirements."""

__app_name__ = "oilfire"
__version__ = "0.1.0"
