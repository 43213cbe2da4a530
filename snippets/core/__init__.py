"""Core data models for snippets."""

from .models import Snippet, now_iso

__all__ = ["Snippet", "now_iso"]
