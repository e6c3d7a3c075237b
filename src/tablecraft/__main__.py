"""Allow ``python -m tablecraft`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m tablecraft`` behaves identically to the ``tablecraft``
console script.
"""

from __future__ import annotations

from tablecraft.cli.app import cli

if __name__ == "__main__":
    cli()
