"""
Read-state, delete and move tool handlers.
"""

from __future__ import annotations

from typing import Any

from ..client import builders
from ..client.osascript_client import run_script
from ..helpers import ToolResult, text_result
from ..validation import opt_string, require_string


async def mail_mark_read(args: dict[str, Any]) -> ToolResult:
  email_id = require_string(args, "emailId")
  mailbox = opt_string(args, "mailbox")
  account = opt_string(args, "account")

  # Bulk mode needs both; otherwise "all" falls through as a plain id
  if email_id == "all" and mailbox and account:
    script = builders.build_mark_all_read_script(account, mailbox)
  else:
    script = builders.build_mark_read_script(email_id)
  return text_result(await run_script(script))


async def mail_mark_unread(args: dict[str, Any]) -> ToolResult:
  email_id = require_string(args, "emailId")
  return text_result(await run_script(builders.build_mark_unread_script(email_id)))


async def mail_delete(args: dict[str, Any]) -> ToolResult:
  email_id = require_string(args, "emailId")
  return text_result(await run_script(builders.build_delete_script(email_id)))


async def mail_move(args: dict[str, Any]) -> ToolResult:
  email_id = require_string(args, "emailId")
  to_mailbox = require_string(args, "toMailbox")
  to_account = opt_string(args, "toAccount")

  script = builders.build_move_script(email_id, to_mailbox, to_account)
  return text_result(await run_script(script))
