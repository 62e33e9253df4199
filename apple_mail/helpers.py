"""
Shared result envelope and normalization helpers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

log = logging.getLogger("skill.apple_mail.helpers")


# ---------------------------------------------------------------------------
# Tool result
# ---------------------------------------------------------------------------


@dataclass
class ToolResult:
  content: str
  is_error: bool = False


def text_result(text: str) -> ToolResult:
  """Wrap interpreter output (or a fixed message) as a successful result."""
  return ToolResult(content=text)


def error_result(message: str) -> ToolResult:
  """Wrap a failure message in the uniform error shape."""
  return ToolResult(content=f"Error: {message}", is_error=True)


def unknown_tool_result(name: str) -> ToolResult:
  return ToolResult(content=f"Unknown tool: {name}", is_error=True)


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------


class ErrorCategory(str, Enum):
  ACCOUNT = "ACCOUNT"
  MSG = "MSG"
  SEND = "SEND"
  ORGANIZE = "ORGANIZE"
  APP = "APP"


def log_and_format_error(
  function_name: str,
  error: Exception,
  category: str | ErrorCategory | None = None,
) -> ToolResult:
  """Log a failed tool call with a stable error code and build its result."""
  prefix = category.value if isinstance(category, ErrorCategory) else (category or "GEN")
  hash_val = sum(ord(c) for c in function_name) % 1000
  error_code = f"{prefix}-ERR-{hash_val:03d}"

  log.error("[MAIL] Error in %s - Code: %s - %s", function_name, error_code, error)

  return error_result(str(error))
