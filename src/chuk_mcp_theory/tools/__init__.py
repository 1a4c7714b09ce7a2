"""
MCP tool implementations.

Tools are organized by domain:
- theory - Pitches, chords, scales, keys and progressions
- export - MIDI export tools
"""

from chuk_mcp_theory.tools.export import register_export_tools
from chuk_mcp_theory.tools.theory import register_theory_tools

__all__ = [
    "register_export_tools",
    "register_theory_tools",
]
