"""Tests for the MCP server surface."""

from __future__ import annotations

import asyncio

from mcp.types import CallToolRequest, CallToolResult, ListToolsRequest

from apple_mail import server
from apple_mail.helpers import ToolResult
from apple_mail.tools import ALL_TOOLS

EXPECTED_TOOLS = [
  "mail_get_accounts",
  "mail_get_mailboxes",
  "mail_get_unread",
  "mail_get_recent",
  "mail_get_email",
  "mail_search",
  "mail_send",
  "mail_reply",
  "mail_mark_read",
  "mail_mark_unread",
  "mail_delete",
  "mail_move",
  "mail_unread_count",
  "mail_open",
  "mail_check",
]


def test_catalog_order_and_schemas():
  tools = asyncio.run(server.list_tools())

  assert tools is ALL_TOOLS
  assert [tool.name for tool in tools] == EXPECTED_TOOLS
  for tool in tools:
    assert tool.description
    assert tool.inputSchema["type"] == "object"
    assert set(tool.inputSchema["required"]) <= set(tool.inputSchema["properties"])


def test_required_parameters():
  required = {tool.name: tool.inputSchema["required"] for tool in ALL_TOOLS}
  assert required["mail_get_email"] == ["emailId"]
  assert required["mail_search"] == ["query"]
  assert required["mail_send"] == ["to", "subject", "body"]
  assert required["mail_move"] == ["emailId", "toMailbox"]
  assert required["mail_get_unread"] == []


def test_declared_defaults():
  props = {tool.name: tool.inputSchema["properties"] for tool in ALL_TOOLS}
  assert props["mail_get_recent"]["mailbox"]["default"] == "INBOX"
  assert props["mail_get_recent"]["limit"]["default"] == 20
  assert props["mail_reply"]["replyAll"]["default"] is False
  assert props["mail_search"]["searchIn"]["enum"] == ["subject", "sender", "content", "all"]


def test_to_call_tool_result():
  result = server.to_call_tool_result(ToolResult(content="Error: boom", is_error=True))

  assert isinstance(result, CallToolResult)
  assert result.isError is True
  assert len(result.content) == 1
  assert result.content[0].type == "text"
  assert result.content[0].text == "Error: boom"


def test_call_tool_unknown():
  result = asyncio.run(server.call_tool("not-a-real-operation", {}))

  assert result.isError is True
  assert result.content[0].text == "Unknown tool: not-a-real-operation"


def test_call_tool_interpreter_failure(install_interpreter):
  install_interpreter(stderr="Application not found\n", exit_code=1)

  result = asyncio.run(server.call_tool("mail_unread_count", None))

  assert result.isError is True
  assert result.content[0].text == "Error: AppleScript error: Application not found"


def test_call_tool_success(install_interpreter):
  install_interpreter(stdout="Work (2 unread):\n  INBOX: 2\n\nGrand Total: 2 unread\n")

  result = asyncio.run(server.call_tool("mail_unread_count", {"account": "Work"}))

  assert result.isError is False
  assert result.content[0].text == "Work (2 unread):\n  INBOX: 2\n\nGrand Total: 2 unread"


def test_create_mcp_server_registers_handlers():
  mcp_server = server.create_mcp_server()

  assert mcp_server.name == "apple-mail-mcp"
  assert ListToolsRequest in mcp_server.request_handlers
  assert CallToolRequest in mcp_server.request_handlers
