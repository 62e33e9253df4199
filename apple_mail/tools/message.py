"""
Message read tools (4 tools).
"""

from __future__ import annotations

from mcp.types import Tool

message_tools: list[Tool] = [
  Tool(
    name="mail_get_unread",
    description="Get unread emails",
    inputSchema={
      "type": "object",
      "properties": {
        "account": {"type": "string", "description": "Account name (optional)"},
        "mailbox": {"type": "string", "description": "Mailbox name", "default": "INBOX"},
        "limit": {"type": "number", "description": "Max emails", "default": 20},
      },
      "required": [],
    },
  ),
  Tool(
    name="mail_get_recent",
    description="Get recent emails (read and unread)",
    inputSchema={
      "type": "object",
      "properties": {
        "account": {"type": "string", "description": "Account name (optional)"},
        "mailbox": {"type": "string", "description": "Mailbox name", "default": "INBOX"},
        "limit": {"type": "number", "description": "Max emails", "default": 20},
      },
      "required": [],
    },
  ),
  Tool(
    name="mail_get_email",
    description="Get full content of a specific email by ID",
    inputSchema={
      "type": "object",
      "properties": {
        "emailId": {"type": "string", "description": "Email message ID"},
      },
      "required": ["emailId"],
    },
  ),
  Tool(
    name="mail_search",
    description="Search emails by subject, sender, or content",
    inputSchema={
      "type": "object",
      "properties": {
        "query": {"type": "string", "description": "Search query"},
        "account": {"type": "string", "description": "Account name (optional)"},
        "searchIn": {
          "type": "string",
          "enum": ["subject", "sender", "content", "all"],
          "description": "Where to search; 'all' covers subject and sender",
          "default": "all",
        },
        "limit": {"type": "number", "description": "Max results", "default": 20},
      },
      "required": ["query"],
    },
  ),
]
