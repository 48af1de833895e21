import curses
from typing import Sequence

from jacks.screens.navigation import Area, KeyEvent

SPECIAL_KEYS = {
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
    curses.KEY_ENTER: "enter",
    curses.KEY_RESIZE: "resize",
    10: "enter",
    13: "enter",
    27: "esc",
}

HIGHLIGHT_PAIR = 1
TABLE_PAIR = 2


class CursesRenderer:
    """Draws screen primitives onto a curses window, clipping anything off screen."""

    def __init__(self, window) -> None:
        self.window = window
        self.highlight = curses.A_BOLD
        self.table = curses.A_NORMAL
        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(HIGHLIGHT_PAIR, curses.COLOR_GREEN, -1)
            curses.init_pair(TABLE_PAIR, curses.COLOR_BLUE, -1)
            self.highlight = curses.color_pair(HIGHLIGHT_PAIR) | curses.A_BOLD
            self.table = curses.color_pair(TABLE_PAIR)

    def area(self) -> Area:
        height, width = self.window.getmaxyx()
        return Area(0, 0, height, width)

    def clear(self) -> None:
        self.window.erase()

    def refresh(self) -> None:
        self.window.refresh()

    def _put(self, y: int, x: int, text: str, attr: int = curses.A_NORMAL) -> None:
        max_y, max_x = self.window.getmaxyx()
        if y < 0 or y >= max_y or x < 0 or x >= max_x:
            return
        # Writing the bottom-right cell makes curses raise, so stop one short there.
        room = max_x - x - (1 if y == max_y - 1 else 0)
        if room <= 0 or not text:
            return
        self.window.addnstr(y, x, text, room, attr)

    def _put_centered(self, y: int, area: Area, text: str, attr: int = curses.A_NORMAL) -> None:
        text = text[:area.width]
        self._put(y, area.left + max((area.width - len(text)) // 2, 0), text, attr)

    def render_border(self, area: Area) -> None:
        if area.height < 2 or area.width < 2:
            return
        bottom = area.top + area.height - 1
        right = area.left + area.width - 1
        horizontal = "-" * (area.width - 2)
        self._put(area.top, area.left, f"+{horizontal}+")
        self._put(bottom, area.left, f"+{horizontal}+")
        for y in range(area.top + 1, bottom):
            self._put(y, area.left, "|")
            self._put(y, right, "|")

    def render_text(self, text: str, area: Area, highlight: bool = False) -> None:
        attr = self.highlight if highlight else curses.A_NORMAL
        lines = text.split("\n")[:area.height]
        top = area.top + max((area.height - len(lines)) // 2, 0)
        for offset, line in enumerate(lines):
            self._put_centered(top + offset, area, line, attr)

    def render_table(self, rows: Sequence[Sequence[str]], column_headers: Sequence[str], title: str, area: Area) -> None:
        columns = len(column_headers)
        widths = [
            max([len(column_headers[i])] + [len(row[i]) for row in rows if i < len(row)])
            for i in range(columns)
        ]

        def line(cells: Sequence[str]) -> str:
            return " ".join(cell.rjust(width) for cell, width in zip(cells, widths))

        y = area.top
        self._put_centered(y, area, title, curses.A_BOLD)
        y += 2
        self._put_centered(y, area, line(column_headers), curses.A_BOLD)
        y += 1
        for row in rows:
            if y >= area.top + area.height:
                break
            self._put_centered(y, area, line(row), self.table)
            y += 1


class CursesInput:
    def __init__(self, window) -> None:
        self.window = window
        self.window.keypad(True)

    def next_key_event(self) -> KeyEvent:
        code = self.window.getch()
        if code in SPECIAL_KEYS:
            return KeyEvent(SPECIAL_KEYS[code])
        if 0 <= code < 256:
            return KeyEvent(chr(code).lower())
        return KeyEvent(f"key_{code}")
