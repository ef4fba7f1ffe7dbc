"""The playing field: grid, player, enemies and the countdown."""

from __future__ import annotations

import random

from .areacloser import AreaCloser
from .grid import CELL_SIZE, Grid
from .player import Player
from .trail import BODY_SIZE, Rect

START_TIME = 180.0


class Board:
    """One level in play."""

    def __init__(self, game_data, level, score, rng=None):
        rng = rng if rng is not None else random.Random()
        self.game_data = game_data
        self.level = level
        width, height = game_data.screen_size
        self.grid = Grid(width, height)
        self.area_closer = AreaCloser(self.grid)
        self.player = Player((0, 0), game_data.num_of_lives, self, score)
        self.time_left = START_TIME
        self.enemies = []
        for _ in range(level.num_of_enemies):
            x = 1 + rng.randrange(width - 2)
            y = 1 + rng.randrange(height - 2)
            self.enemies.append((float(x * CELL_SIZE), float(y * CELL_SIZE)))

    def update(self, dt, direction):
        """Advance the level by ``dt`` seconds."""
        self.tick_timer(dt)
        self.player.update(dt, direction)
        self.check_collisions()

    def is_on_filled_tile(self, cell):
        x, y = cell
        if not (0 <= x < self.grid_width and 0 <= y < self.grid_height):
            return False
        return self.grid.is_filled(cell)

    def set_on_closed_area(self, path):
        """Capture the area closed by ``path``, if it has at least three points."""
        if len(path) < 3:
            return
        self.area_closer.fill_area(path, self.enemies)

    def check_collisions(self):
        for rect in self.enemy_rects():
            self.player.check_collision(rect)

    def tick_timer(self, elapsed):
        self.time_left -= elapsed

    def enemy_rects(self):
        """Bounding rectangles of the enemies, centred on their positions."""
        half = CELL_SIZE / 2
        return [Rect(x - half, y - half, BODY_SIZE, BODY_SIZE) for x, y in self.enemies]

    @property
    def score(self):
        return self.player.score

    @property
    def lives(self):
        return self.player.lives

    @property
    def grid_width(self):
        return self.game_data.screen_size[0]

    @property
    def grid_height(self):
        return self.game_data.screen_size[1]

    @property
    def screen_width(self):
        return self.grid_width * CELL_SIZE

    @property
    def screen_height(self):
        return self.grid_height * CELL_SIZE

    @property
    def percentage_filled(self):
        return self.area_closer.percent_filled