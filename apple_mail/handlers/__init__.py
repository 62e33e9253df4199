"""
Tool dispatch — routes tool names to handler functions.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from ..helpers import ErrorCategory, ToolResult, log_and_format_error, unknown_tool_result
from .app import mail_check, mail_open, mail_unread_count
from .compose import mail_reply, mail_send
from .mailbox import mail_get_accounts, mail_get_mailboxes
from .message import mail_get_email, mail_get_recent, mail_get_unread, mail_search
from .organize import mail_delete, mail_mark_read, mail_mark_unread, mail_move

log = logging.getLogger("skill.apple_mail.handlers")

Handler = Callable[[dict[str, Any]], Awaitable[ToolResult]]

# Map tool names to (handler, error category)
HANDLERS: dict[str, tuple[Handler, ErrorCategory]] = {
  # Accounts & mailboxes
  "mail_get_accounts": (mail_get_accounts, ErrorCategory.ACCOUNT),
  "mail_get_mailboxes": (mail_get_mailboxes, ErrorCategory.ACCOUNT),
  # Messages
  "mail_get_unread": (mail_get_unread, ErrorCategory.MSG),
  "mail_get_recent": (mail_get_recent, ErrorCategory.MSG),
  "mail_get_email": (mail_get_email, ErrorCategory.MSG),
  "mail_search": (mail_search, ErrorCategory.MSG),
  # Compose
  "mail_send": (mail_send, ErrorCategory.SEND),
  "mail_reply": (mail_reply, ErrorCategory.SEND),
  # Organize
  "mail_mark_read": (mail_mark_read, ErrorCategory.ORGANIZE),
  "mail_mark_unread": (mail_mark_unread, ErrorCategory.ORGANIZE),
  "mail_delete": (mail_delete, ErrorCategory.ORGANIZE),
  "mail_move": (mail_move, ErrorCategory.ORGANIZE),
  # Status & app
  "mail_unread_count": (mail_unread_count, ErrorCategory.ACCOUNT),
  "mail_open": (mail_open, ErrorCategory.APP),
  "mail_check": (mail_check, ErrorCategory.APP),
}


async def dispatch_tool(tool_name: str, args: dict[str, Any] | None) -> ToolResult:
  """Dispatch a tool call to the appropriate handler.

  Never raises: unknown names and any failure while building or running
  the script come back as error results.
  """
  entry = HANDLERS.get(tool_name)
  if entry is None:
    log.error("Unknown tool: %s", tool_name)
    return unknown_tool_result(tool_name)

  handler, category = entry
  try:
    return await handler(args or {})
  except Exception as e:
    return log_and_format_error(tool_name, e, category)
