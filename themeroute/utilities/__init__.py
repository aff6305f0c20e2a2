"""Utilities - logging."""

from themeroute.utilities.logging import setup_logging

__all__ = ["setup_logging"]
