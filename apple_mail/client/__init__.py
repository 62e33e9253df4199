"""
Mail.app scripting layer: script builders and the osascript client.
"""

from .osascript_client import (
  AppleScriptError,
  OsascriptClient,
  create_client,
  get_client,
  run_script,
)

__all__ = [
  "AppleScriptError",
  "OsascriptClient",
  "create_client",
  "get_client",
  "run_script",
]
