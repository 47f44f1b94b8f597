"""Bouncing desktop pests."""

__version__ = "0.1.0"
