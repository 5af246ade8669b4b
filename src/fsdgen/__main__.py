"""Allow ``python -m fsdgen`` invocation."""

from __future__ import annotations

from fsdgen.cli import cli

if __name__ == "__main__":
    cli()
