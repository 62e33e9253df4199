"""
Apple Mail MCP server.

Exposes Mail.app operations as MCP tools. Each call is fulfilled by
generating an AppleScript, running it through osascript, and wrapping
the output in a tool result.
"""

__version__ = "1.0.0"
