"""Shared console and icons for terminal output."""

from rich.console import Console

console = Console()
error_console = Console(stderr=True)

ICONS = {
    "check": "✓",
    "cross": "✗",
    "arrow": "→",
    "warning": "⚠",
}
