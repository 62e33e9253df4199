"""
Unread summary and application tools (3 tools).
"""

from __future__ import annotations

from mcp.types import Tool

app_tools: list[Tool] = [
  Tool(
    name="mail_unread_count",
    description="Get count of unread emails per account/mailbox",
    inputSchema={
      "type": "object",
      "properties": {"account": {"type": "string", "description": "Account (optional)"}},
      "required": [],
    },
  ),
  Tool(
    name="mail_open",
    description="Open the Mail app",
    inputSchema={"type": "object", "properties": {}, "required": []},
  ),
  Tool(
    name="mail_check",
    description="Check for new mail",
    inputSchema={"type": "object", "properties": {}, "required": []},
  ),
]
