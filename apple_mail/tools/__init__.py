"""
Mail tool definitions organized by domain.

Each module exports a list of Tool objects that are combined into ALL_TOOLS.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .app import app_tools
from .compose import compose_tools
from .mailbox import mailbox_tools
from .message import message_tools
from .organize import organize_tools

if TYPE_CHECKING:
  from mcp.types import Tool

ALL_TOOLS: list[Tool] = [
  *mailbox_tools,
  *message_tools,
  *compose_tools,
  *organize_tools,
  *app_tools,
]

TOOL_NAMES: tuple[str, ...] = tuple(tool.name for tool in ALL_TOOLS)
