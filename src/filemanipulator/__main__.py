"""Allow ``python -m filemanipulator`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m filemanipulator`` behaves identically to the
``filemanipulator`` console script.
"""

from __future__ import annotations

from filemanipulator.cli.app import cli

if __name__ == "__main__":
    cli()
