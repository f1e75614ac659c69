import pytest

from sharing_instant.render import (
    HEIGHT,
    RESET,
    WIDTH,
    CursorPresence,
    UserPresence,
    color_to_ansi,
    format_presence,
    render_grid,
    status_icon,
    step_cursor,
)


@pytest.mark.parametrize(
    "color, ansi",
    [
        ("red", "\x1b[31m"),
        ("green", "\x1b[32m"),
        ("yellow", "\x1b[33m"),
        ("blue", "\x1b[34m"),
        ("magenta", "\x1b[35m"),
        ("cyan", "\x1b[36m"),
        ("purple", "\x1b[37m"),
        ("", "\x1b[37m"),
    ],
)
def test_color_to_ansi(color, ansi):
    assert color_to_ansi(color) == ansi


@pytest.mark.parametrize(
    "status, icon",
    [("online", "\u25cf"), ("away", "\u25d1"), ("busy", "\u25cb"), ("gone", "?")],
)
def test_status_icon(status, icon):
    assert status_icon(status) == icon


def test_step_cursor_moves_inside_grid():
    assert step_cursor(5, 5, 1, -1) == (6, 4)


def test_step_cursor_clamps_at_edges():
    assert step_cursor(0, 0, -1, -1) == (0, 0)
    assert step_cursor(WIDTH - 1, HEIGHT - 1, 1, 1) == (WIDTH - 1, HEIGHT - 1)


@pytest.mark.parametrize("dx", [-1, 0, 1])
@pytest.mark.parametrize("dy", [-1, 0, 1])
def test_step_cursor_stays_in_bounds(dx, dy):
    for x, y in [(0, 0), (WIDTH - 1, 0), (0, HEIGHT - 1), (WIDTH - 1, HEIGHT - 1)]:
        nx, ny = step_cursor(x, y, dx, dy)
        assert 0 <= nx < WIDTH and 0 <= ny < HEIGHT


def test_format_presence_without_peers():
    me = UserPresence(name="Ada", color="red", status="away")
    text = format_presence("Ada", "\x1b[31m", me, {})
    assert "--- presence update ---" in text
    assert "(no peers yet)" in text
    assert f"\x1b[31m{status_icon('away')} Ada{RESET}" in text
    assert "(you, away)" in text


def test_format_presence_lists_each_peer():
    peers = {
        "p1": UserPresence(name="Bob", color="blue", status="busy"),
        "p2": UserPresence(name="Cy", color="green", status="online"),
    }
    text = format_presence("Ada", "\x1b[31m", None, peers)
    assert "(no peers yet)" not in text
    assert "(you," not in text
    assert f"{color_to_ansi('blue')}{status_icon('busy')} Bob{RESET}" in text
    assert text.index("Bob") < text.index("Cy")


def _grid_rows(output):
    return [line for line in output.splitlines() if line.startswith("  \u2502")]


def test_render_grid_empty_has_full_border():
    output = render_grid([])
    assert output.startswith("\x1b[2J\x1b[H")
    rows = _grid_rows(output)
    assert len(rows) == HEIGHT
    assert all(row.count("\u00b7") == WIDTH for row in rows)
    assert "  \u250c" + "\u2500" * WIDTH + "\u2510" in output
    assert "0 peer(s)" in output


def test_render_grid_places_initial_in_row():
    cursors = [CursorPresence(name="Zed", color="cyan", x=3, y=7)]
    rows = _grid_rows(render_grid(cursors))
    assert "Z" in rows[7]
    assert rows[7].count("\u00b7") == WIDTH - 1
    assert all(row.count("\u00b7") == WIDTH for i, row in enumerate(rows) if i != 7)


def test_render_grid_clamps_but_legend_keeps_coordinates():
    cursors = [CursorPresence(name="Ada", color="red", x=WIDTH + 5, y=-3)]
    output = render_grid(cursors)
    rows = _grid_rows(output)
    assert rows[0].count("\u00b7") == WIDTH - 1
    assert f"({WIDTH + 5}, -3)" in output
    assert "1 peer(s)" in output


def test_render_grid_empty_name_uses_question_mark():
    output = render_grid([CursorPresence(name="", color="red", x=0, y=0)])
    rows = _grid_rows(output)
    assert "?" in rows[0]
    assert "Type 'quit' to exit." in output