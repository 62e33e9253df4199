"""
MCP server wiring.

Handles tools/list and tools/call on stdio. The catalog is served as-is;
every call goes through dispatch_tool and comes back as a single text block.
"""

from __future__ import annotations

import logging
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool

from . import __version__
from .client.osascript_client import create_client
from .config import MailSettings
from .handlers import dispatch_tool
from .helpers import ToolResult
from .tools import ALL_TOOLS

log = logging.getLogger("skill.apple_mail.server")

SERVER_NAME = "apple-mail-mcp"


def to_call_tool_result(result: ToolResult) -> CallToolResult:
  return CallToolResult(
    content=[TextContent(type="text", text=result.content)],
    isError=result.is_error,
  )


async def list_tools() -> list[Tool]:
  return ALL_TOOLS


async def call_tool(name: str, arguments: dict[str, Any] | None) -> CallToolResult:
  result = await dispatch_tool(name, arguments or {})
  return to_call_tool_result(result)


def create_mcp_server() -> Server:
  """Create and configure the MCP server with all tool handlers."""
  server = Server(SERVER_NAME, version=__version__)
  server.list_tools()(list_tools)
  # Handlers coerce and default their own arguments
  server.call_tool(validate_input=False)(call_tool)
  return server


async def run_server(settings: MailSettings | None = None) -> None:
  """Run the MCP server on stdio."""
  settings = settings or MailSettings.from_env()
  create_client(settings)

  server = create_mcp_server()
  async with stdio_server() as (read_stream, write_stream):
    log.info("Apple Mail MCP server running on stdio")
    await server.run(read_stream, write_stream, server.create_initialization_options())
