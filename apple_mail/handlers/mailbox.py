"""
Account and mailbox tool handlers.
"""

from __future__ import annotations

from typing import Any

from ..client import builders
from ..client.osascript_client import run_script
from ..helpers import ToolResult, text_result
from ..validation import opt_string


async def mail_get_accounts(args: dict[str, Any]) -> ToolResult:
  output = await run_script(builders.build_get_accounts_script())
  return text_result(f"Email Accounts:\n{output}")


async def mail_get_mailboxes(args: dict[str, Any]) -> ToolResult:
  account = opt_string(args, "account")
  return text_result(await run_script(builders.build_get_mailboxes_script(account)))
