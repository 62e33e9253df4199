"""
Read-state, delete and move tools (4 tools).
"""

from __future__ import annotations

from mcp.types import Tool

organize_tools: list[Tool] = [
  Tool(
    name="mail_mark_read",
    description="Mark email(s) as read. Use emailId 'all' with mailbox and account to clear a whole mailbox",
    inputSchema={
      "type": "object",
      "properties": {
        "emailId": {"type": "string", "description": "Email ID or 'all'"},
        "mailbox": {"type": "string", "description": "Mailbox (if 'all')"},
        "account": {"type": "string", "description": "Account (if 'all')"},
      },
      "required": ["emailId"],
    },
  ),
  Tool(
    name="mail_mark_unread",
    description="Mark email as unread",
    inputSchema={
      "type": "object",
      "properties": {"emailId": {"type": "string", "description": "Email ID"}},
      "required": ["emailId"],
    },
  ),
  Tool(
    name="mail_delete",
    description="Delete an email (move to trash)",
    inputSchema={
      "type": "object",
      "properties": {"emailId": {"type": "string", "description": "Email ID"}},
      "required": ["emailId"],
    },
  ),
  Tool(
    name="mail_move",
    description="Move email to a different mailbox",
    inputSchema={
      "type": "object",
      "properties": {
        "emailId": {"type": "string", "description": "Email ID"},
        "toMailbox": {"type": "string", "description": "Destination mailbox"},
        "toAccount": {"type": "string", "description": "Destination account (optional)"},
      },
      "required": ["emailId", "toMailbox"],
    },
  ),
]
