"""
Message list/read/search tool handlers.
"""

from __future__ import annotations

from typing import Any

from ..client import builders
from ..client.osascript_client import run_script
from ..helpers import ToolResult, text_result
from ..validation import opt_enum, opt_number, opt_string, require_string, require_text

DEFAULT_MAILBOX = "INBOX"
DEFAULT_LIMIT = 20


def _listing_args(args: dict[str, Any]) -> tuple[str | None, str, int]:
  account = opt_string(args, "account")
  mailbox = opt_string(args, "mailbox", DEFAULT_MAILBOX) or DEFAULT_MAILBOX
  limit = opt_number(args, "limit", DEFAULT_LIMIT)
  return account, mailbox, DEFAULT_LIMIT if limit is None else limit


async def mail_get_unread(args: dict[str, Any]) -> ToolResult:
  account, mailbox, limit = _listing_args(args)
  script = builders.build_get_unread_script(account, mailbox, limit)
  return text_result(await run_script(script))


async def mail_get_recent(args: dict[str, Any]) -> ToolResult:
  account, mailbox, limit = _listing_args(args)
  script = builders.build_get_recent_script(account, mailbox, limit)
  return text_result(await run_script(script))


async def mail_get_email(args: dict[str, Any]) -> ToolResult:
  email_id = require_string(args, "emailId")
  return text_result(await run_script(builders.build_get_email_script(email_id)))


async def mail_search(args: dict[str, Any]) -> ToolResult:
  query = require_text(args, "query")
  account = opt_string(args, "account")
  scope = opt_enum(args, "searchIn", builders.SEARCH_SCOPES, "all")
  limit = opt_number(args, "limit", DEFAULT_LIMIT)
  script = builders.build_search_script(
    query,
    account=account,
    scope=scope,
    limit=DEFAULT_LIMIT if limit is None else limit,
  )
  return text_result(await run_script(script))
