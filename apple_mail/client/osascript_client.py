"""
osascript client — stages a generated script on disk and runs it.

osascript is synchronous, so async callers go through run_script(),
which hands the call to a worker thread.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import os
import subprocess
import tempfile

from ..config import MailSettings

log = logging.getLogger("skill.apple_mail.client")

STAGING_PREFIX = "mail-mcp-"
STAGING_SUFFIX = ".scpt"


class AppleScriptError(Exception):
  """Raised when osascript cannot be run or exits non-zero."""

  def __init__(self, message: str, stderr: str | None = None, returncode: int | None = None):
    super().__init__(f"AppleScript error: {message}")
    self.stderr = stderr
    self.returncode = returncode


class OsascriptClient:
  """Runs AppleScript source through the osascript interpreter."""

  def __init__(self, settings: MailSettings | None = None) -> None:
    self.settings = settings or MailSettings()

  def execute(self, script: str) -> str:
    """Run script and return its stdout with trailing whitespace removed."""
    fd, path = tempfile.mkstemp(
      prefix=STAGING_PREFIX,
      suffix=STAGING_SUFFIX,
      dir=self.settings.staging_dir,
    )
    try:
      with os.fdopen(fd, "w", encoding="utf-8") as fh:
        fh.write(script)
      log.debug("Running staged script %s", path)
      return self._run(path)
    finally:
      with contextlib.suppress(FileNotFoundError):
        os.unlink(path)

  def _run(self, path: str) -> str:
    limit = self.settings.max_output_bytes
    # stdout goes to a temp file so a huge result never sits in a pipe buffer
    with tempfile.TemporaryFile() as out:
      try:
        result = subprocess.run(
          [self.settings.osascript_path, path],
          stdout=out,
          stderr=subprocess.PIPE,
          text=True,
          timeout=self.settings.timeout_seconds,
        )
      except subprocess.TimeoutExpired:
        log.error("osascript timed out after %ss", self.settings.timeout_seconds)
        raise AppleScriptError(f"osascript timed out after {self.settings.timeout_seconds}s")
      except OSError as e:
        log.error("Could not run %s: %s", self.settings.osascript_path, e)
        raise AppleScriptError(str(e)) from e

      if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        log.error("osascript failed (exit %d): %s", result.returncode, stderr)
        raise AppleScriptError(
          stderr or f"osascript exited with status {result.returncode}",
          stderr=stderr or None,
          returncode=result.returncode,
        )

      out.seek(0)
      raw = out.read(limit + 1)

    if len(raw) > limit:
      raise AppleScriptError("stdout maxBuffer length exceeded")
    return raw.decode("utf-8", errors="replace").rstrip()


# ---------------------------------------------------------------------------
# Module-level helper
# ---------------------------------------------------------------------------


async def run_script(script: str) -> str:
  """Execute script on the shared client without blocking the event loop."""
  return await asyncio.to_thread(get_client().execute, script)


# ---------------------------------------------------------------------------
# Singleton
# ---------------------------------------------------------------------------

_client_instance: OsascriptClient | None = None


def create_client(settings: MailSettings | None = None) -> OsascriptClient:
  """Create and return the singleton OsascriptClient."""
  global _client_instance
  _client_instance = OsascriptClient(settings or MailSettings.from_env())
  return _client_instance


def get_client() -> OsascriptClient:
  """Return the singleton client, creating it from the environment on first use."""
  if _client_instance is None:
    return create_client()
  return _client_instance


def reset_client() -> None:
  global _client_instance
  _client_instance = None
