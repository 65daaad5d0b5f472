# mazo

A terminal maze game. A maze can have any number of dimensions and every axis
wraps around, so the maze lives on a torus. You look at two axes at a time and
can swap either of them for any other axis.

The interface is drawn with the standard library's `curses` module, so it
needs a platform where `curses` is available (Linux, macOS and other POSIX
systems).

## Installing

    pip install .

## Playing

    mazo

`mazo --help` prints a short description; the command takes no other options.

First type the size of the maze as comma-separated numbers, for example
`50, 40, 30`, and press Enter. The prompt is shown in green when the input is
valid and in red when it is not. Backspace deletes the last character and Esc
clears the input. A new maze is generated with random start and end cells, and
you are placed on the start.

In the maze:

| Key         | Action                                                    |
|-------------|-----------------------------------------------------------|
| Arrow keys  | Move through the maze (walls block the way)               |
| `0`-`1`     | Pick which shown axis (vertical or horizontal) to replace |
| `0`-`9`     | After picking, choose the maze axis to show in its place  |
| `s`         | Show the shortest solution, or hide it again              |
| Esc         | Cancel an axis choice, or go back to the menu             |
| `q`, Ctrl+C | Quit (also from the menu)                                 |

The start is drawn in green, the goal in red and your position in yellow.
Cells on the solution path show their step number (modulo 100) in cyan.
The Info panel lists the shown axes, the dimensions, your position, the start
and the end; the Help panel lists the keys for the current state.

## Using it as a library

    import random
    from mazo.maze import Maze, parse_dimension

    maze = Maze(parse_dimension("10, 8, 6"))
    maze.generate(random.Random(1))
    path = maze.solve()  # list of positions from start to end, both included

- `parse_dimension(text)` returns a list of sizes, or `None` if any part is
  not a number.
- `Maze.generate(rng)` carves the maze with randomised Prim's algorithm using
  a `random.Random`.
- `Maze.solve()` finds a shortest path with A* and raises `NoPathError` if the
  end cannot be reached.
- `Maze.walk(view_axis, sign)`, `Maze.set_view_axis(view_axis, axis)` and
  `Maze.go_to_start()` move the walker and change the shown axes.
- `mazo.app.render_maze(width, height, maze, solution)` lays out the view
  around the walker as rows of `RenderedCell` values, without drawing
  anything, and `mazo.app.Application` holds the menu and maze state driven
  by `Application.update(key, ctrl)`.

`mazo.heap.BinaryHashHeap(key, value)` is a binary min-heap holding at most
one item per key, with `PushAction.KEEP`, `PushAction.DECREASE_KEY` and
`PushAction.INCREASE_KEY` to choose what happens when a key is already in the
heap. `push` returns whether the heap changed; `pop` raises `IndexError` when
the heap is empty.

## Tests

    pip install .[test]
    pytest