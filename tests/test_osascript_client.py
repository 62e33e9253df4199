"""Tests for staging and running scripts through the interpreter."""

from __future__ import annotations

import asyncio
import os

import pytest

from apple_mail.client import osascript_client
from apple_mail.client.osascript_client import AppleScriptError, OsascriptClient
from apple_mail.config import MailSettings


def test_returns_stdout_without_trailing_whitespace(make_interpreter):
  stub = make_interpreter(stdout="Work (5 mailboxes)\nPersonal (3 mailboxes)\n\n  \n")
  client = OsascriptClient(stub.settings)

  assert client.execute('tell application "Mail" to activate') == "Work (5 mailboxes)\nPersonal (3 mailboxes)"


def test_interpreter_receives_script_file(make_interpreter):
  stub = make_interpreter(stdout="ok")
  script = 'tell application "Mail"\n  return "x"\nend tell'

  OsascriptClient(stub.settings).execute(script)

  assert stub.last_script == script
  name = os.path.basename(stub.last_path)
  assert name.startswith("mail-mcp-")
  assert name.endswith(".scpt")
  assert os.path.dirname(stub.last_path) == str(stub.staging_dir)


def test_staged_file_removed_after_success(make_interpreter):
  stub = make_interpreter(stdout="ok")
  OsascriptClient(stub.settings).execute("return 1")

  assert stub.staged_files() == []
  assert not os.path.exists(stub.last_path)


def test_staged_file_removed_after_failure(make_interpreter):
  stub = make_interpreter(stderr="execution error: boom (-2700)\n", exit_code=1)

  with pytest.raises(AppleScriptError):
    OsascriptClient(stub.settings).execute("return 1")

  assert stub.staged_files() == []
  assert not os.path.exists(stub.last_path)


def test_failure_carries_stderr(make_interpreter):
  stub = make_interpreter(stderr="Application not found\n", exit_code=1)

  with pytest.raises(AppleScriptError) as exc_info:
    OsascriptClient(stub.settings).execute("return 1")

  assert str(exc_info.value) == "AppleScript error: Application not found"
  assert exc_info.value.stderr == "Application not found"
  assert exc_info.value.returncode == 1


def test_failure_without_stderr_uses_generic_message(make_interpreter):
  stub = make_interpreter(exit_code=3)

  with pytest.raises(AppleScriptError) as exc_info:
    OsascriptClient(stub.settings).execute("return 1")

  assert str(exc_info.value) == "AppleScript error: osascript exited with status 3"


def test_missing_interpreter(tmp_path):
  staging = tmp_path / "staging"
  staging.mkdir()
  settings = MailSettings(osascript_path=str(tmp_path / "no-such-osascript"), staging_dir=str(staging))

  with pytest.raises(AppleScriptError) as exc_info:
    OsascriptClient(settings).execute("return 1")

  assert str(exc_info.value).startswith("AppleScript error: ")
  assert list(staging.iterdir()) == []


def test_output_bound(make_interpreter):
  stub = make_interpreter(stdout="x" * 100, max_output_bytes=10)

  with pytest.raises(AppleScriptError, match="maxBuffer"):
    OsascriptClient(stub.settings).execute("return 1")
  assert stub.staged_files() == []


def test_output_at_bound_is_accepted(make_interpreter):
  stub = make_interpreter(stdout="x" * 10, max_output_bytes=10)
  assert OsascriptClient(stub.settings).execute("return 1") == "x" * 10


def test_timeout(make_interpreter):
  stub = make_interpreter(sleep=5, timeout_seconds=0.2)

  with pytest.raises(AppleScriptError, match="timed out"):
    OsascriptClient(stub.settings).execute("return 1")
  assert stub.staged_files() == []


def test_staging_names_never_reused(make_interpreter):
  stub = make_interpreter(stdout="ok")
  client = OsascriptClient(stub.settings)

  paths = set()
  for _ in range(5):
    client.execute("return 1")
    paths.add(stub.last_path)
  assert len(paths) == 5


def test_concurrent_calls_do_not_collide(make_interpreter):
  stub = make_interpreter(stdout="ok")
  osascript_client.create_client(stub.settings)

  async def run_many() -> list[str]:
    return await asyncio.gather(*(osascript_client.run_script(f"return {i}") for i in range(8)))

  assert asyncio.run(run_many()) == ["ok"] * 8
  assert stub.staged_files() == []


def test_get_client_builds_from_environment(monkeypatch, tmp_path):
  monkeypatch.setenv("APPLE_MAIL_OSASCRIPT", "/opt/bin/osascript")
  monkeypatch.setenv("APPLE_MAIL_STAGING_DIR", str(tmp_path))

  client = osascript_client.get_client()

  assert client.settings.osascript_path == "/opt/bin/osascript"
  assert client.settings.staging_dir == str(tmp_path)
  assert osascript_client.get_client() is client
