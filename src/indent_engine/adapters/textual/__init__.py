"""Textual host integration for the edit engine."""

from .controller import StringBufferSync, TextAreaBridge, TextAreaHooks

__all__ = ["TextAreaBridge", "TextAreaHooks", "StringBufferSync"]
