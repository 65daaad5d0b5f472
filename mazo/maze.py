"""An n-dimensional toroidal maze: generation, solving and walking."""

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from math import prod
from typing import Iterable, Sequence

from mazo.heap import BinaryHashHeap, PushAction

Position = tuple[int, ...]

_NUMBER = re.compile(r"\+?[0-9]+")


def _step(position: Sequence[int], shape: Sequence[int], axis: int, sign: bool) -> Position:
    """Move one cell along ``axis``, forwards if ``sign`` is true, wrapping around."""
    moved = list(position)
    if sign:
        moved[axis] = 0 if moved[axis] == shape[axis] - 1 else moved[axis] + 1
    else:
        moved[axis] = shape[axis] - 1 if moved[axis] == 0 else moved[axis] - 1
    return tuple(moved)


@dataclass(frozen=True)
class Wall:
    """The wall between the cell at ``position`` and the next cell along ``axis``."""

    position: Position
    axis: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", tuple(self.position))

    @classmethod
    def from_cell(cls, shape: Sequence[int], position: Sequence[int]) -> list[Wall]:
        """Return the walls surrounding the cell at ``position``."""
        walls = []
        for axis in range(len(shape)):
            walls.append(cls(tuple(position), axis))
            walls.append(cls(_step(position, shape, axis, False), axis))
        return walls

    def neighbour_cells(self, shape: Sequence[int]) -> tuple[Position, Position]:
        """Return the two cells this wall separates."""
        return self.position, _step(self.position, shape, self.axis, True)


class NoPathError(Exception):
    """Raised when the maze has no path from start to end."""


@dataclass
class _Node:
    position: Position
    g_score: int
    f_score: int


class Maze:
    """A maze on an n-dimensional torus, with a walker viewing two of its axes."""

    def __init__(self, dimensions: Iterable[int]) -> None:
        self.dimensions: Position = tuple(dimensions)
        origin = (0,) * len(self.dimensions)
        self.start: Position = origin
        self.end: Position = origin
        self.position: Position = origin
        self.axes: list[int] = [0, 1]
        self.walls: list[bool] = [True] * (prod(self.dimensions) * len(self.dimensions))

    def wall_index(self, wall: Wall) -> int:
        """Return the index of ``wall`` in the flat wall array."""
        index = 0
        stride = 1
        for limit, value in zip(self.dimensions, wall.position):
            index += stride * value
            stride *= limit
        return index + stride * wall.axis

    def traverse(self, position: Sequence[int], axis: int, sign: bool) -> Position:
        """Move one cell along ``axis`` in the direction given by ``sign``, wrapping around."""
        return _step(position, self.dimensions, axis, sign)

    def neighbours(self, position: Sequence[int]) -> list[tuple[Wall, Position]]:
        """Return each neighbouring cell paired with the wall leading to it."""
        result = []
        for axis in range(len(self.dimensions)):
            for sign in (False, True):
                neighbour = self.traverse(position, axis, sign)
                wall_position = tuple(position) if sign else neighbour
                result.append((Wall(wall_position, axis), neighbour))
        return result

    def reset_walls(self) -> None:
        """Close every wall."""
        self.walls = [True] * len(self.walls)

    def get_wall(self, wall: Wall) -> bool:
        """Return True if ``wall`` is closed."""
        return self.walls[self.wall_index(wall)]

    def set_wall(self, wall: Wall, value: bool) -> None:
        """Close (True) or open (False) ``wall``."""
        self.walls[self.wall_index(wall)] = value

    def generate(self, rng: random.Random) -> None:
        """Pick random start and end cells and carve a maze with randomised Prim's algorithm."""
        self.start = tuple(rng.randrange(limit) for limit in self.dimensions)
        self.end = tuple(rng.randrange(limit) for limit in self.dimensions)

        visited = {self.start}
        frontier = Wall.from_cell(self.dimensions, self.start)

        self.reset_walls()
        while frontier:
            chosen = rng.randrange(len(frontier))
            frontier[chosen], frontier[-1] = frontier[-1], frontier[chosen]
            wall = frontier.pop()

            carved = False
            for cell in wall.neighbour_cells(self.dimensions):
                if cell in visited:
                    continue
                frontier.extend(
                    candidate
                    for candidate in Wall.from_cell(self.dimensions, cell)
                    if self.get_wall(candidate)
                )
                visited.add(cell)
                carved = True

            if carved:
                self.set_wall(wall, False)

    def distance(self, position1: Sequence[int], position2: Sequence[int]) -> int:
        """Return the taxicab distance between two cells, going round the torus if shorter."""
        total = 0
        for a, b, limit in zip(position1, position2, self.dimensions):
            delta = (a - b) % limit
            total += min(delta, limit - delta)
        return total

    def solve(self) -> list[Position]:
        """Return the shortest path from start to end, both included, found with A*.

        Raises NoPathError if the end cannot be reached.
        """
        open_nodes: BinaryHashHeap[_Node] = BinaryHashHeap(
            key=lambda node: node.position, value=lambda node: node.f_score
        )
        open_nodes.push(
            PushAction.KEEP,
            _Node(self.start, 0, self.distance(self.start, self.end)),
        )
        visited: set[Position] = set()
        links: dict[Position, Position] = {}

        while len(open_nodes):
            node = open_nodes.pop()
            if node.position == self.end:
                path = [self.end]
                while path[-1] != self.start:
                    path.append(links[path[-1]])
                path.reverse()
                return path

            for wall, neighbour in self.neighbours(node.position):
                if neighbour in visited or self.get_wall(wall):
                    continue
                g_score = node.g_score + 1
                f_score = g_score + self.distance(neighbour, self.end)
                if open_nodes.push(
                    PushAction.DECREASE_KEY, _Node(neighbour, g_score, f_score)
                ):
                    links[neighbour] = node.position

            visited.add(node.position)

        raise NoPathError("no path found")

    def go_to_start(self) -> None:
        """Move the walker to the start cell."""
        self.position = self.start

    def walk(self, view_axis: int, sign: bool) -> None:
        """Step along the axis shown as ``view_axis`` unless a wall is in the way."""
        axis = self.axes[view_axis]
        if sign:
            if self.get_wall(Wall(self.position, axis)):
                return
            self.position = self.traverse(self.position, axis, True)
        else:
            moved = self.traverse(self.position, axis, False)
            if not self.get_wall(Wall(moved, axis)):
                self.position = moved

    def set_view_axis(self, view_axis: int, axis: int) -> None:
        """Show maze ``axis`` as ``view_axis``; out-of-range requests are ignored."""
        if view_axis < 2 and axis < len(self.dimensions):
            self.axes[view_axis] = axis


def parse_dimension(text: str) -> list[int] | None:
    """Parse a comma-separated list of sizes, or return None if any part is not a number."""
    sizes = []
    for part in text.split(","):
        part = part.strip()
        if not _NUMBER.fullmatch(part):
            return None
        sizes.append(int(part))
    return sizes