"""Adaptive Cards typed-schema tooling, masked RGBA drawing and layout tree printing."""

__version__ = "0.1.0"