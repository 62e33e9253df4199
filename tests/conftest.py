"""
Shared fixtures: a shell stub standing in for osascript.

The stub copies the staged script aside (so tests can inspect what was
generated), prints canned stdout/stderr, and exits with a canned code.
"""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from pathlib import Path

import pytest

from apple_mail.client import osascript_client
from apple_mail.config import MailSettings


@dataclass
class StubInterpreter:
  settings: MailSettings
  capture_dir: Path

  @property
  def staging_dir(self) -> Path:
    return Path(self.settings.staging_dir)

  @property
  def last_script(self) -> str:
    return (self.capture_dir / "last_script").read_text()

  @property
  def last_path(self) -> str:
    return (self.capture_dir / "last_path").read_text().strip()

  def staged_files(self) -> list[str]:
    return sorted(p.name for p in self.staging_dir.glob("mail-mcp-*"))


@pytest.fixture
def make_interpreter(tmp_path: Path):
  """Factory building a stub interpreter and settings pointing at it."""
  counter = {"n": 0}

  def factory(
    stdout: str = "",
    stderr: str = "",
    exit_code: int = 0,
    sleep: float | None = None,
    **settings_kwargs,
  ) -> StubInterpreter:
    counter["n"] += 1
    base = tmp_path / f"stub{counter['n']}"
    capture_dir = base / "capture"
    staging_dir = base / "staging"
    capture_dir.mkdir(parents=True)
    staging_dir.mkdir()
    (capture_dir / "stdout").write_text(stdout)
    (capture_dir / "stderr").write_text(stderr)

    lines = [
      "#!/bin/sh",
      f'cp "$1" "{capture_dir}/last_script"',
      f'echo "$1" > "{capture_dir}/last_path"',
      f'cat "{capture_dir}/stdout"',
      f'cat "{capture_dir}/stderr" >&2',
    ]
    if sleep is not None:
      lines.append(f"exec sleep {sleep}")
    lines.append(f"exit {exit_code}")

    script = base / "osascript"
    script.write_text("\n".join(lines) + "\n")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

    settings = MailSettings(
      osascript_path=str(script),
      staging_dir=str(staging_dir),
      **settings_kwargs,
    )
    return StubInterpreter(settings=settings, capture_dir=capture_dir)

  return factory


@pytest.fixture
def install_interpreter(make_interpreter):
  """Build a stub and make it the shared client used by the handlers."""

  def factory(**kwargs) -> StubInterpreter:
    stub = make_interpreter(**kwargs)
    osascript_client.create_client(stub.settings)
    return stub

  return factory


@pytest.fixture(autouse=True)
def _reset_client(monkeypatch):
  for key in list(os.environ):
    if key.startswith("APPLE_MAIL_"):
      monkeypatch.delenv(key)
  osascript_client.reset_client()
  yield
  osascript_client.reset_client()
