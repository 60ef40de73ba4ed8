"""Agent tools module."""

from duckscout.agent.tools.base import Tool
from duckscout.agent.tools.registry import ToolRegistry

__all__ = ["Tool", "ToolRegistry"]
