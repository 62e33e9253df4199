"""
Account and mailbox tools (2 tools).
"""

from __future__ import annotations

from mcp.types import Tool

mailbox_tools: list[Tool] = [
  Tool(
    name="mail_get_accounts",
    description="Get all email accounts configured in Apple Mail",
    inputSchema={"type": "object", "properties": {}, "required": []},
  ),
  Tool(
    name="mail_get_mailboxes",
    description="Get all mailboxes for an account",
    inputSchema={
      "type": "object",
      "properties": {
        "account": {"type": "string", "description": "Account name (optional)"},
      },
      "required": [],
    },
  ),
]
