"""Tool execution engine."""

from .executor import HANDLERS, ToolExecutor

__all__ = ["HANDLERS", "ToolExecutor"]
