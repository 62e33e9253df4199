"""
Unread summary and Mail.app control handlers.
"""

from __future__ import annotations

from typing import Any

from ..client import builders
from ..client.osascript_client import run_script
from ..helpers import ToolResult, text_result
from ..validation import opt_string


async def mail_unread_count(args: dict[str, Any]) -> ToolResult:
  account = opt_string(args, "account")
  return text_result(await run_script(builders.build_unread_count_script(account)))


async def mail_open(args: dict[str, Any]) -> ToolResult:
  await run_script(builders.build_open_script())
  return text_result("Mail app opened")


async def mail_check(args: dict[str, Any]) -> ToolResult:
  await run_script(builders.build_check_script())
  return text_result("Checking for new mail...")
