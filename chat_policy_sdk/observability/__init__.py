"""Observability helpers for the chat policy SDK."""

from .logging import PolicyLogger

__all__ = ["PolicyLogger"]
