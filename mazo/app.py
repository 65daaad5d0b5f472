"""Terminal front end: a menu asking for maze dimensions and an interactive maze view."""

from __future__ import annotations

import argparse
import curses
import enum
import locale
import random
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from mazo.maze import Maze, Position, Wall, parse_dimension

_DIGITS = "0123456789"
_BLOCK = "\u2588\u2588"

_MENU_PROMPT = " Enter dimension of maze to be generated here: (e.g. 50, 40, 30) "


class Key(enum.Enum):
    """Non-character keys understood by the application."""

    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    ESCAPE = enum.auto()
    BACKSPACE = enum.auto()
    ENTER = enum.auto()


class CellKind(enum.Enum):
    """What a two-column screen cell of the maze view shows."""

    WALL = enum.auto()
    EMPTY = enum.auto()
    START = enum.auto()
    END = enum.auto()
    CURRENT = enum.auto()
    SOLUTION = enum.auto()


@dataclass(frozen=True)
class RenderedCell:
    """One screen cell of the maze view; ``step`` is set for solution cells."""

    kind: CellKind
    step: Optional[int] = None

    @property
    def text(self) -> str:
        """The two characters drawn for this cell."""
        if self.kind is CellKind.EMPTY:
            return "  "
        if self.kind is CellKind.SOLUTION:
            step = self.step or 0
            return f"{step // 10}{step % 10}"
        return _BLOCK


def _render_cell(maze: Maze, steps: dict[Position, int], wy: int, wx: int) -> RenderedCell:
    ry, rx = wy % 2, wx % 2
    if ry and rx:
        return RenderedCell(CellKind.WALL)

    vertical, horizontal = maze.axes
    position = list(maze.position)
    position[vertical] = (position[vertical] + wy // 2) % maze.dimensions[vertical]
    position[horizontal] = (position[horizontal] + wx // 2) % maze.dimensions[horizontal]
    cell = tuple(position)

    if ry or rx:
        axis = vertical if ry else horizontal
        closed = maze.get_wall(Wall(cell, axis))
        return RenderedCell(CellKind.WALL if closed else CellKind.EMPTY)

    if cell == maze.start:
        return RenderedCell(CellKind.START)
    if cell == maze.end:
        return RenderedCell(CellKind.END)
    if cell == maze.position:
        return RenderedCell(CellKind.CURRENT)
    if cell in steps:
        return RenderedCell(CellKind.SOLUTION, steps[cell])
    return RenderedCell(CellKind.EMPTY)


def render_maze(
    width: int,
    height: int,
    maze: Maze,
    solution: Optional[Sequence[Sequence[int]]] = None,
) -> list[list[RenderedCell]]:
    """Lay out the maze around the walker for an area of ``width`` columns and ``height`` rows.

    Each returned cell covers two terminal columns, so a row holds ``width // 2`` cells.
    """
    steps = {tuple(cell): index % 100 for index, cell in enumerate(solution or ())}
    columns = width // 2
    return [
        [
            _render_cell(maze, steps, y - height // 2, x - columns // 2)
            for x in range(columns)
        ]
        for y in range(height)
    ]


Span = tuple[str, bool]
KeyInput = Union[Key, str]


class Application:
    """State machine behind the terminal interface: a menu, then a maze view."""

    def __init__(self) -> None:
        self.dimension = ""
        self.maze: Optional[Maze] = None
        self.view_axis: Optional[int] = None
        self.solution: Optional[list[Position]] = None

    def in_menu(self) -> bool:
        """True while the dimension menu is shown."""
        return self.maze is None

    def _back_to_menu(self) -> None:
        self.dimension = ""
        self.maze = None
        self.view_axis = None
        self.solution = None

    def _require_maze(self) -> Maze:
        if self.maze is None:
            raise RuntimeError("no maze is shown while in the menu")
        return self.maze

    def menu_text(self) -> tuple[str, str]:
        """Return the menu's text and its colour: "grey", "green" or "red"."""
        if not self.in_menu():
            raise RuntimeError("the menu is not shown")
        if not self.dimension:
            return _MENU_PROMPT, "grey"
        colour = "green" if parse_dimension(self.dimension) is not None else "red"
        return f" Dimension: {self.dimension} ", colour

    def info_lines(self) -> list[list[Span]]:
        """Return the info panel as lines of (text, highlighted) spans."""
        maze = self._require_maze()

        def listing(label: str, values: Sequence[int]) -> list[Span]:
            return [(label + ", ".join(str(value) for value in values), False)]

        axes_line: list[Span] = [
            ("Current Axes (Vertical, Horizontal): ", False),
            (str(maze.axes[0]), self.view_axis == 0),
            (" ", False),
            (str(maze.axes[1]), self.view_axis == 1),
        ]
        return [
            axes_line,
            listing("Dimensions: ", maze.dimensions),
            listing("Position: ", maze.position),
            listing("Start: ", maze.start),
            listing("End: ", maze.end),
        ]

    def help_lines(self) -> list[str]:
        """Return the help panel's lines for the current state."""
        maze = self._require_maze()
        if self.view_axis is not None:
            lines = [
                f"0-{len(maze.dimensions) - 1}: Select replacement axis",
                "Esc: Cancel selection of replacement axis",
            ]
        else:
            lines = ["0-1: Select which axes to modify", "Esc: exit"]
        lines.append("s: Unsolve maze" if self.solution is not None else "s: Solve maze")
        lines.append("Arrow Keys: Move")
        return lines

    def update(self, key: KeyInput, ctrl: bool = False) -> bool:
        """Handle one key press; return False when the application should quit."""
        if key == "q" or (key == "c" and ctrl):
            return False
        if self.maze is None:
            self._update_menu(key)
        else:
            self._update_main(self.maze, key)
        return True

    def _update_menu(self, key: KeyInput) -> None:
        if isinstance(key, str):
            self.dimension += key
        elif key is Key.ESCAPE:
            self.dimension = ""
        elif key is Key.BACKSPACE:
            self.dimension = self.dimension[:-1]
        elif key is Key.ENTER:
            dimensions = parse_dimension(self.dimension)
            if dimensions is not None:
                maze = Maze(dimensions)
                maze.generate(random.Random())
                maze.go_to_start()
                self.maze = maze
                self.view_axis = None
                self.solution = None

    def _update_main(self, maze: Maze, key: KeyInput) -> None:
        moves = {
            Key.UP: (0, False),
            Key.DOWN: (0, True),
            Key.LEFT: (1, False),
            Key.RIGHT: (1, True),
        }
        if isinstance(key, Key):
            if key in moves:
                maze.walk(*moves[key])
            elif key is Key.ESCAPE:
                if self.view_axis is not None:
                    self.view_axis = None
                else:
                    self._back_to_menu()
            return

        if len(key) == 1 and key in _DIGITS:
            digit = int(key)
            if self.view_axis is not None:
                maze.set_view_axis(self.view_axis, digit)
                self.view_axis = None
            else:
                self.view_axis = digit
        elif key == "s":
            self.solution = maze.solve() if self.solution is None else None

    def run(self) -> None:
        """Run the interactive terminal interface until the user quits."""
        locale.setlocale(locale.LC_ALL, "")
        curses.wrapper(self._loop)

    def _loop(self, screen: "curses.window") -> None:
        curses.raw()
        try:
            curses.set_escdelay(25)
        except (AttributeError, curses.error):
            pass
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        screen.keypad(True)
        palette = _Palette()

        while True:
            self._draw(screen, palette)
            try:
                raw = screen.get_wch()
            except curses.error:
                continue
            event = _translate(raw)
            if event is None:
                continue
            if not self.update(*event):
                return

    def _draw(self, screen: "curses.window", palette: "_Palette") -> None:
        screen.erase()
        height, width = screen.getmaxyx()
        if self.maze is None:
            self._draw_menu(screen, palette, height, width)
        else:
            self._draw_main(screen, palette, self.maze, height, width)
        screen.refresh()

    def _draw_menu(self, screen, palette, height: int, width: int) -> None:
        text, colour = self.menu_text()
        box_width, box_height = len(text) + 2, 3
        left, top = 0, 0
        if width > box_width:
            left = (width - box_width) // 2
        else:
            box_width = width
        if height > box_height:
            top = (height - box_height) // 2
        else:
            box_height = height
        _draw_box(screen, top, left, box_height, box_width, "")
        _put(screen, top + 1, left + 1, text[: max(box_width - 2, 0)], palette[colour])

    def _draw_main(self, screen, palette, maze: Maze, height: int, width: int) -> None:
        info = self.info_lines()
        help_text = self.help_lines()

        info_height = min(len(info) + 2, height)
        help_height = min(len(help_text) + 2, height - info_height)
        maze_top = info_height + help_height
        maze_height = height - maze_top

        _draw_box(screen, 0, 0, info_height, width, "Info")
        for row, line in enumerate(info[: max(info_height - 2, 0)], start=1):
            column = 1
            for text, highlighted in line:
                _put(screen, row, column, text, palette["red"] if highlighted else 0)
                column += len(text)

        _draw_box(screen, info_height, 0, help_height, width, "Help")
        for row, line in enumerate(help_text[: max(help_height - 2, 0)], start=info_height + 1):
            _put(screen, row, 1, line, 0)

        colours = {
            CellKind.START: "green",
            CellKind.END: "red",
            CellKind.CURRENT: "yellow",
            CellKind.SOLUTION: "cyan",
        }
        for y, row in enumerate(render_maze(width, maze_height, maze, self.solution)):
            for x, cell in enumerate(row):
                attr = palette[colours[cell.kind]] if cell.kind in colours else 0
                _put(screen, maze_top + y, x * 2, cell.text, attr)


class _Palette:
    """Curses attributes for the colour names used by the interface."""

    def __init__(self) -> None:
        self._attrs: dict[str, int] = {"grey": curses.A_DIM}
        if not curses.has_colors():
            return
        curses.start_color()
        try:
            curses.use_default_colors()
            background = -1
        except curses.error:
            background = curses.COLOR_BLACK
        names = {
            "green": curses.COLOR_GREEN,
            "red": curses.COLOR_RED,
            "yellow": curses.COLOR_YELLOW,
            "cyan": curses.COLOR_CYAN,
        }
        for pair, (name, colour) in enumerate(names.items(), start=1):
            curses.init_pair(pair, colour, background)
            self._attrs[name] = curses.color_pair(pair)

    def __getitem__(self, name: str) -> int:
        return self._attrs.get(name, 0)


_SPECIAL_KEYS = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    curses.KEY_BACKSPACE: Key.BACKSPACE,
    curses.KEY_ENTER: Key.ENTER,
}

_CHARACTER_KEYS = {
    "\x1b": Key.ESCAPE,
    "\n": Key.ENTER,
    "\r": Key.ENTER,
    "\x7f": Key.BACKSPACE,
    "\b": Key.BACKSPACE,
}


def _translate(raw: Union[int, str]) -> Optional[tuple[KeyInput, bool]]:
    """Turn a curses key into (key, ctrl), or None for keys that are ignored."""
    if isinstance(raw, int):
        key = _SPECIAL_KEYS.get(raw)
        return None if key is None else (key, False)
    if raw in _CHARACTER_KEYS:
        return _CHARACTER_KEYS[raw], False
    code = ord(raw)
    if code < 32:
        if raw == "\t":
            return None
        return chr(code + 96), True
    return raw, False


def _put(screen, y: int, x: int, text: str, attr: int) -> None:
    try:
        screen.addstr(y, x, text, attr)
    except curses.error:
        pass


def _draw_box(screen, top: int, left: int, height: int, width: int, title: str) -> None:
    if height < 2 or width < 2:
        return
    inner = width - 2
    header = (title + "\u2500" * inner)[:inner]
    _put(screen, top, left, "\u250c" + header + "\u2510", 0)
    for row in range(top + 1, top + height - 1):
        _put(screen, row, left, "\u2502", 0)
        _put(screen, row, left + width - 1, "\u2502", 0)
    _put(screen, top + height - 1, left, "\u2514" + "\u2500" * inner + "\u2518", 0)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the interactive maze program."""
    parser = argparse.ArgumentParser(
        prog="mazo",
        description="Generate, explore and solve n-dimensional toroidal mazes in the terminal.",
    )
    parser.parse_args(argv)
    Application().run()
    return 0