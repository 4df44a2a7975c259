"""Deterministic Minecraft world-seed analysis."""

__version__ = "0.1.0"
