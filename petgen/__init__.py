"""Batch generator for cartoon pet images via the Runware API."""

__version__ = "0.1.0"
