"""
Send/reply tool handlers.
"""

from __future__ import annotations

from typing import Any

from ..client import builders
from ..client.osascript_client import run_script
from ..helpers import ToolResult, text_result
from ..validation import ValidationError, opt_bool, opt_string, require_string, require_text, split_addresses


async def mail_send(args: dict[str, Any]) -> ToolResult:
  to = split_addresses(require_string(args, "to"))
  if not to:
    raise ValidationError("Missing required parameter: to")
  subject = require_text(args, "subject")
  body = require_text(args, "body")
  cc = split_addresses(opt_string(args, "cc"))
  bcc = split_addresses(opt_string(args, "bcc"))

  script = builders.build_send_script(to, subject, body, cc=cc, bcc=bcc)
  return text_result(await run_script(script))


async def mail_reply(args: dict[str, Any]) -> ToolResult:
  email_id = require_string(args, "emailId")
  body = require_text(args, "body")
  reply_all = opt_bool(args, "replyAll", False) or False

  script = builders.build_reply_script(email_id, body, reply_all=reply_all)
  return text_result(await run_script(script))
