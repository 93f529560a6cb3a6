"""Unified glyphs and separators for log output."""


class LogStyle:
    """Unified logging style constants for consistent visual hierarchy."""

    DOUBLE = "═" * 80
    LIGHT = "─" * 80

    ARROW = "»"
    BULLET = "•"
    WARNING = "⚠"
    SUCCESS = "✓"

    INDENT = "  "
    DOUBLE_INDENT = "    "
