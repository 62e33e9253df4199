"""
Entry point for the Apple Mail MCP server.

Run with: python -m apple_mail          (MCP over stdio)
"""

from __future__ import annotations

import asyncio
import logging
import sys


def main() -> None:
  from .config import MailSettings
  from .server import run_server

  settings = MailSettings.from_env()
  logging.basicConfig(
    level=settings.log_level.upper(),
    format="[%(name)s] %(levelname)s: %(message)s",
    stream=sys.stderr,
  )
  asyncio.run(run_server(settings))


if __name__ == "__main__":
  main()
