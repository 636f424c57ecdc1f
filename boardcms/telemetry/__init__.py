"""Telemetry for content operations.

This package emits deterministic operation logs for auditing content writes.
"""

from .logger import ContentLogger

__all__ = ["ContentLogger"]
