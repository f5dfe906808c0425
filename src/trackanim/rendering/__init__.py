"""Headless rendering"""
from .frame_capture import FrameCapture

__all__ = ["FrameCapture"]
