"""
Send and reply tools (2 tools).
"""

from __future__ import annotations

from mcp.types import Tool

compose_tools: list[Tool] = [
  Tool(
    name="mail_send",
    description="Send a new email",
    inputSchema={
      "type": "object",
      "properties": {
        "to": {"type": "string", "description": "Recipient email (comma-separated for several)"},
        "subject": {"type": "string", "description": "Subject"},
        "body": {"type": "string", "description": "Body content"},
        "cc": {"type": "string", "description": "CC (comma-separated)"},
        "bcc": {"type": "string", "description": "BCC (comma-separated)"},
      },
      "required": ["to", "subject", "body"],
    },
  ),
  Tool(
    name="mail_reply",
    description="Reply to an email",
    inputSchema={
      "type": "object",
      "properties": {
        "emailId": {"type": "string", "description": "Email ID to reply to"},
        "body": {"type": "string", "description": "Reply content"},
        "replyAll": {"type": "boolean", "description": "Reply all", "default": False},
      },
      "required": ["emailId", "body"],
    },
  ),
]
