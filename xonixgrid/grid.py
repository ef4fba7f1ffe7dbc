"""Game constants, tiles and the tile grid."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .errors import OutOfBounds

SPEED = 100
CELL_SIZE = 15
ROWS = 50
COLS = 50
WINDOW_WIDTH = COLS * CELL_SIZE
WINDOW_HEIGHT = ROWS * CELL_SIZE
ENEMY_COUNT = 3
REWARD = 4

WHITE = (255, 255, 255)
BLUE = (0, 0, 255)


class TileType(enum.Enum):
    EMPTY = enum.auto()
    FILLED = enum.auto()
    TEMP = enum.auto()
    ENEMY = enum.auto()
    BORDER = enum.auto()


@dataclass
class Tile:
    """One grid cell: its kind, its colour and the cell it is drawn at."""

    type: TileType = TileType.EMPTY
    color: tuple[int, int, int] = WHITE
    position: tuple[int, int] = (0, 0)

    def pixel_position(self):
        x, y = self.position
        return (x * CELL_SIZE, y * CELL_SIZE)


class Grid:
    """A width x height field of tiles framed by a border."""

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self._rows: list[list[Tile]] = []
        self.reset()

    def reset(self):
        """Clear every tile and lay down the border."""
        self._rows = [[Tile() for _ in range(self.width)] for _ in range(self.height)]
        border = [(x, 0) for x in range(self.width)]
        border += [(x, self.height - 1) for x in range(self.width)]
        border += [(0, y) for y in range(self.height)]
        border += [(self.width - 1, y) for y in range(self.height)]
        for x, y in border:
            tile = self._rows[y][x]
            tile.position = (x, y)
            tile.type = TileType.BORDER
            tile.color = BLUE

    @staticmethod
    def cell_of(pos):
        """Cell holding the pixel position ``pos``."""
        return (int(pos[0] / CELL_SIZE), int(pos[1] / CELL_SIZE))

    def __getitem__(self, cell):
        if not self.contains(cell):
            raise OutOfBounds(cell)
        x, y = cell
        return self._rows[y][x]

    def contains(self, cell):
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def is_filled(self, cell):
        """True when the cell is captured or part of the border."""
        return self[cell].type in (TileType.FILLED, TileType.BORDER)

    def cells(self):
        """Yield ``((x, y), tile)`` row by row."""
        for y, row in enumerate(self._rows):
            for x, tile in enumerate(row):
                yield (x, y), tile