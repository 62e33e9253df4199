"""
Input validation helpers.

Tool arguments arrive loosely typed; handlers coerce them here and
apply defaults rather than relying on schema validation upstream.
"""

from __future__ import annotations


class ValidationError(Exception):
  """Raised when input validation fails."""

  pass


def opt_string(args: dict, key: str, default: str | None = None) -> str | None:
  """Extract optional string from args."""
  val = args.get(key)
  if val is None:
    return default
  if isinstance(val, str):
    return val.strip() if val.strip() else default
  return str(val).strip() if str(val).strip() else default


def opt_number(args: dict, key: str, default: int | None = None) -> int | None:
  """Extract optional number from args."""
  val = args.get(key)
  if val is None or isinstance(val, bool):
    return default
  if isinstance(val, (int, float)):
    return int(val)
  try:
    return int(float(str(val)))
  except (ValueError, TypeError):
    return default


def opt_bool(args: dict, key: str, default: bool | None = None) -> bool | None:
  """Extract optional boolean from args."""
  val = args.get(key)
  if val is None:
    return default
  if isinstance(val, bool):
    return val
  if isinstance(val, str):
    return val.lower() in ("true", "1", "yes", "on")
  return bool(val)


def opt_enum(args: dict, key: str, choices: tuple[str, ...], default: str) -> str:
  """Extract optional string constrained to a fixed set of values."""
  val = opt_string(args, key)
  if val is None:
    return default
  if val not in choices:
    raise ValidationError(f"Invalid {key}: {val} (expected one of: {', '.join(choices)})")
  return val


def require_string(args: dict, key: str) -> str:
  """Extract required string from args."""
  val = opt_string(args, key)
  if val is None or val == "":
    raise ValidationError(f"Missing required parameter: {key}")
  return val


def split_addresses(value: str | None) -> list[str]:
  """Split a comma-separated address list, dropping blanks."""
  if not value:
    return []
  return [part.strip() for part in value.split(",") if part.strip()]


def require_text(args: dict, key: str) -> str:
  """Extract required free text (subject, body, query) exactly as given.

  Unlike require_string, surrounding whitespace and line breaks are kept.
  """
  val = args.get(key)
  if val is None:
    raise ValidationError(f"Missing required parameter: {key}")
  text = val if isinstance(val, str) else str(val)
  if not text.strip():
    raise ValidationError(f"Missing required parameter: {key}")
  return text
