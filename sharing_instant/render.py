"""Terminal rendering of presence lists and a shared cursor grid."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

BOLD = "\x1b[1m"
DIM = "\x1b[2m"
RESET = "\x1b[0m"

WIDTH = 40
HEIGHT = 20

_COLORS = {
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
}
_DEFAULT_COLOR = "\x1b[37m"

_ICONS = {
    "online": "\u25cf",
    "away": "\u25d1",
    "busy": "\u25cb",
}


@dataclass(frozen=True)
class UserPresence:
    """Presence published by a peer in the avatar stack."""

    name: str
    color: str
    status: str


@dataclass(frozen=True)
class CursorPresence:
    """Presence published by a peer on the cursor grid."""

    name: str
    color: str
    x: int
    y: int


def color_to_ansi(color: str) -> str:
    """ANSI escape for a colour name; white for anything unknown."""
    return _COLORS.get(color, _DEFAULT_COLOR)


def status_icon(status: str) -> str:
    """Glyph for a presence status; ``?`` for anything unknown."""
    return _ICONS.get(status, "?")


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def step_cursor(x: int, y: int, dx: int, dy: int) -> tuple[int, int]:
    """Move a cursor by ``(dx, dy)``, keeping it inside the grid."""
    return _clamp(x + dx, 0, WIDTH - 1), _clamp(y + dy, 0, HEIGHT - 1)


def _initial(name: str) -> str:
    return name[0] if name else "?"


def format_presence(
    my_name: str,
    my_color_ansi: str,
    user: UserPresence | None,
    peers: Mapping[str, UserPresence],
) -> str:
    """Text shown when the presence of the room changes."""
    lines = ["", f"  {DIM}--- presence update ---{RESET}"]
    if user is not None:
        icon = status_icon(user.status)
        lines.append(
            f"  {my_color_ansi}{icon} {my_name}{RESET} {DIM}(you, {user.status}){RESET}"
        )
    if not peers:
        lines.append(f"  {DIM}(no peers yet){RESET}")
    else:
        for peer in peers.values():
            ansi = color_to_ansi(peer.color)
            icon = status_icon(peer.status)
            lines.append(f"  {ansi}{icon} {peer.name}{RESET} {DIM}({peer.status}){RESET}")
    return "\n".join(lines) + "\n"


def render_grid(cursors: Iterable[CursorPresence]) -> str:
    """Screen contents: cleared terminal, bordered grid of initials and a legend."""
    cursors = list(cursors)
    grid = [[(" ", RESET) for _ in range(WIDTH)] for _ in range(HEIGHT)]
    for cursor in cursors:
        x = _clamp(cursor.x, 0, WIDTH - 1)
        y = _clamp(cursor.y, 0, HEIGHT - 1)
        grid[y][x] = (_initial(cursor.name), color_to_ansi(cursor.color))

    parts = [
        "\x1b[2J\x1b[H",
        f"  {BOLD}Cursors{RESET} — {DIM}{len(cursors)} peer(s){RESET}\n\n",
        "  \u250c" + "\u2500" * WIDTH + "\u2510\n",
    ]
    for row in grid:
        cells = "".join(
            f"{DIM}\u00b7{RESET}" if ch == " " else f"{ansi}{BOLD}{ch}{RESET}"
            for ch, ansi in row
        )
        parts.append(f"  \u2502{cells}\u2502\n")
    parts.append("  \u2514" + "\u2500" * WIDTH + "\u2518\n")
    parts.append("\n")
    for cursor in cursors:
        ansi = color_to_ansi(cursor.color)
        parts.append(
            f"  {ansi}{BOLD}{_initial(cursor.name)}{RESET} = {cursor.name} "
            f"{DIM}({cursor.x}, {cursor.y}){RESET}\n"
        )
    parts.append(f"\n  {DIM}Type 'quit' to exit.{RESET}\n")
    return "".join(parts)


__all__ = [
    "BOLD",
    "DIM",
    "HEIGHT",
    "RESET",
    "WIDTH",
    "CursorPresence",
    "UserPresence",
    "color_to_ansi",
    "format_presence",
    "render_grid",
    "status_icon",
    "step_cursor",
]