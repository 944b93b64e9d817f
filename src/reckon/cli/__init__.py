"""
reckon CLI package.

- commands.py: the ``reckon`` command (argument, piped lines, interactive)
- lines.py: line-at-a-time evaluation for piped input
- repl.py: interactive prompt
- utils.py: shared utilities
"""

from reckon.cli.commands import app
from reckon.cli.utils import get_version, version_callback


def main() -> None:
    """Console-script entry point."""
    app(prog_name="reckon")


__all__ = [
    "app",
    "main",
    "get_version",
    "version_callback",
]
