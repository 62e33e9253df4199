"""
Runtime settings, read from the environment at startup.
"""

from __future__ import annotations

import os
import tempfile

from pydantic import BaseModel, Field

DEFAULT_MAX_OUTPUT_BYTES = 50 * 1024 * 1024

# Environment variable -> settings field
ENV_FIELDS: dict[str, str] = {
  "APPLE_MAIL_OSASCRIPT": "osascript_path",
  "APPLE_MAIL_STAGING_DIR": "staging_dir",
  "APPLE_MAIL_MAX_OUTPUT_BYTES": "max_output_bytes",
  "APPLE_MAIL_TIMEOUT": "timeout_seconds",
  "APPLE_MAIL_LOG_LEVEL": "log_level",
}


class MailSettings(BaseModel):
  osascript_path: str = "osascript"
  staging_dir: str = Field(default_factory=tempfile.gettempdir)
  max_output_bytes: int = Field(default=DEFAULT_MAX_OUTPUT_BYTES, gt=0)
  # None blocks until the interpreter exits
  timeout_seconds: float | None = Field(default=None, gt=0)
  log_level: str = "INFO"

  @classmethod
  def from_env(cls, environ: dict[str, str] | None = None) -> MailSettings:
    """Build settings from APPLE_MAIL_* variables, falling back to defaults."""
    env = os.environ if environ is None else environ
    values = {field: env[key] for key, field in ENV_FIELDS.items() if env.get(key)}
    return cls.model_validate(values)
