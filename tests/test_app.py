import random

import pytest

from mazo.app import Application, CellKind, Key, RenderedCell, render_maze
from mazo.maze import Maze, Wall


def _enter(app, text):
    for character in text:
        assert app.update(character) is True
    assert app.update(Key.ENTER) is True


def _generated_maze(dimensions, seed=7):
    maze = Maze(dimensions)
    maze.generate(random.Random(seed))
    maze.go_to_start()
    return maze


def test_render_shape():
    maze = Maze((3, 3))
    rows = render_maze(10, 7, maze, None)
    assert len(rows) == 7
    assert all(len(row) == 5 for row in rows)


def test_render_centre_is_start():
    maze = Maze((3, 3))
    rows = render_maze(10, 7, maze, None)
    assert rows[3][2].kind is CellKind.START


def test_odd_odd_cells_are_walls():
    maze = _generated_maze((6, 5))
    rows = render_maze(20, 9, maze, None)
    for y, row in enumerate(rows):
        for x, cell in enumerate(row):
            if (y - 4) % 2 and (x - 5) % 2:
                assert cell.kind is CellKind.WALL


def test_wall_between_cells_follows_maze():
    maze = Maze((3, 3))
    assert render_maze(10, 7, maze, None)[4][2].kind is CellKind.WALL
    maze.set_wall(Wall((0, 0), 0), False)
    rows = render_maze(10, 7, maze, None)
    assert rows[4][2].kind is CellKind.EMPTY
    assert rows[3][3].kind is CellKind.WALL


def test_end_and_current_cells():
    maze = Maze((3, 3))
    maze.end = (1, 0)
    rows = render_maze(10, 7, maze, None)
    assert rows[5][2].kind is CellKind.END

    maze.position = (1, 1)
    maze.end = (2, 2)
    rows = render_maze(10, 7, maze, None)
    assert rows[3][2].kind is CellKind.CURRENT
    assert rows[1][0].kind is CellKind.START


def test_render_wraps_around_torus():
    maze = Maze((3, 3))
    maze.end = (2, 0)
    rows = render_maze(10, 7, maze, None)
    assert rows[1][2].kind is CellKind.END


def test_render_respects_swapped_axes():
    maze = Maze((3, 3))
    maze.set_view_axis(0, 1)
    maze.set_view_axis(1, 0)
    maze.end = (0, 1)
    rows = render_maze(10, 7, maze, None)
    assert rows[5][2].kind is CellKind.END


def test_solution_steps_rendered():
    maze = Maze((5, 5))
    maze.end = (0, 2)
    solution = [(0, 0), (0, 1), (0, 2)]
    rows = render_maze(18, 7, maze, solution)
    assert rows[3][4].kind is CellKind.START
    assert rows[3][6] == RenderedCell(CellKind.SOLUTION, 1)
    assert rows[3][6].text == "01"
    assert rows[3][8].kind is CellKind.END


def test_cell_text():
    assert RenderedCell(CellKind.SOLUTION, 42).text == "42"
    assert RenderedCell(CellKind.EMPTY).text == "  "
    assert RenderedCell(CellKind.WALL).text == "\u2588\u2588"
    assert RenderedCell(CellKind.START).text == RenderedCell(CellKind.WALL).text


def test_initial_menu():
    app = Application()
    assert app.in_menu()
    text, colour = app.menu_text()
    assert text == " Enter dimension of maze to be generated here: (e.g. 50, 40, 30) "
    assert colour == "grey"


def test_menu_typing_and_validation():
    app = Application()
    for character in "5,5":
        app.update(character)
    assert app.menu_text() == (" Dimension: 5,5 ", "green")
    app.update("x")
    assert app.menu_text() == (" Dimension: 5,5x ", "red")
    app.update(Key.BACKSPACE)
    assert app.dimension == "5,5"
    app.update(Key.ESCAPE)
    assert app.dimension == ""


def test_quit_keys():
    app = Application()
    assert app.update("q") is False
    assert app.update("c", ctrl=True) is False
    assert app.update("c") is True
    assert app.dimension == "c"


def test_invalid_enter_stays_in_menu():
    app = Application()
    _enter(app, "4,,")
    assert app.in_menu()
    assert app.dimension == "4,,"


def test_enter_creates_maze():
    app = Application()
    _enter(app, "4, 3")
    assert not app.in_menu()
    assert app.maze.dimensions == (4, 3)
    assert app.maze.position == app.maze.start
    assert app.view_axis is None
    assert app.solution is None


def test_state_checks_raise():
    app = Application()
    with pytest.raises(RuntimeError):
        app.info_lines()
    with pytest.raises(RuntimeError):
        app.help_lines()
    _enter(app, "3,3")
    with pytest.raises(RuntimeError):
        app.menu_text()


def test_info_lines():
    app = Application()
    _enter(app, "4,3")
    lines = app.info_lines()
    assert "".join(text for text, _ in lines[1]) == "Dimensions: 4, 3"
    assert "".join(text for text, _ in lines[0]).startswith("Current Axes (Vertical, Horizontal): ")
    assert not any(highlighted for _, highlighted in lines[0])
    app.update("1")
    highlighted = [span for span in app.info_lines()[0] if span[1]]
    assert highlighted == [(str(app.maze.axes[1]), True)]


def test_view_axis_selection():
    app = Application()
    _enter(app, "4,3")
    app.update("1")
    assert app.view_axis == 1
    assert app.help_lines()[0] == "0-1: Select replacement axis"
    app.update("0")
    assert app.view_axis is None
    assert app.maze.axes == [0, 0]
    app.update("0")
    app.update("5")
    assert app.maze.axes == [0, 0]
    assert app.help_lines()[:2] == ["0-1: Select which axes to modify", "Esc: exit"]


def test_escape_cancels_then_leaves():
    app = Application()
    _enter(app, "4,3")
    app.update("1")
    app.update(Key.ESCAPE)
    assert app.view_axis is None
    assert not app.in_menu()
    app.update(Key.ESCAPE)
    assert app.in_menu()
    assert app.dimension == ""


def test_solve_toggle():
    app = Application()
    _enter(app, "5,4")
    app.update("s")
    path = app.solution
    maze = app.maze
    assert path[0] == maze.start
    assert path[-1] == maze.end
    for a, b in zip(path, path[1:]):
        assert maze.distance(a, b) == 1
    assert "s: Unsolve maze" in app.help_lines()
    app.update("s")
    assert app.solution is None
    assert "s: Solve maze" in app.help_lines()


def test_arrow_keys_walk_through_open_walls():
    app = Application()
    _enter(app, "4,4")
    maze = app.maze
    maze.reset_walls()
    start = maze.position
    app.update(Key.DOWN)
    assert maze.position == start

    maze.set_wall(Wall(start, maze.axes[0]), False)
    app.update(Key.DOWN)
    assert maze.position == maze.traverse(start, 0, True)
    app.update(Key.UP)
    assert maze.position == start

    maze.set_wall(Wall(maze.traverse(start, 1, False), 1), False)
    app.update(Key.LEFT)
    assert maze.position == maze.traverse(start, 1, False)
    app.update(Key.RIGHT)
    assert maze.position == start