"""Resilience patterns for degrading gracefully when upstream APIs fail."""

from .fallback import FallbackChain, describe, with_default

__all__ = [
    "FallbackChain",
    "describe",
    "with_default",
]
