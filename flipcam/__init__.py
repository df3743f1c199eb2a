"""Flip Cam: cash and inventory tracking backend for a camera resale business."""

__version__ = "1.0.0"
