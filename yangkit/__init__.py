"""Yangkit: configuration surface for a YANG schema parser."""

__version__ = "0.1.0"
