"""Capturing of the area enclosed by the player's trail."""

from __future__ import annotations

from collections import deque

from .grid import BLUE, ENEMY_COUNT, TileType

_BLOCKING = (TileType.FILLED, TileType.TEMP, TileType.BORDER)


class AreaCloser:
    """Fills every region of the grid that holds no enemy once a trail is closed."""

    def __init__(self, grid):
        self.grid = grid
        self.percent_filled = 0.0

    def fill_area(self, path, enemy_positions):
        """Lay the trail down, then fill every region no enemy can reach."""
        self.set_trail_on_grid(path)
        for position in enemy_positions:
            self.flood_fill(position)
        for (x, y), tile in self.grid.cells():
            if tile.type is TileType.TEMP:
                tile.type = TileType.EMPTY
                continue
            if tile.type is not TileType.FILLED:
                self.increment_filled_percentage()
            tile.type = TileType.FILLED
            tile.color = BLUE
            tile.position = (x, y)

    def flood_fill(self, inner_pos):
        """Mark the region around the pixel position ``inner_pos`` as reachable."""
        start = self.grid.cell_of(inner_pos)
        if self.grid[start].type in (TileType.FILLED, TileType.TEMP):
            return
        queue = deque([start])
        while queue:
            cell = queue.popleft()
            tile = self.grid[cell]
            if tile.type in _BLOCKING:
                continue
            tile.type = TileType.TEMP
            x, y = cell
            for neighbour in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
                if not self.grid.contains(neighbour):
                    continue
                if self.grid[neighbour].type not in _BLOCKING:
                    queue.append(neighbour)

    def set_trail_on_grid(self, path):
        """Mark the cells along each segment of the pixel path as filled."""
        cells = [self.grid.cell_of(point) for point in path]
        for start, end in zip(cells, cells[1:]):
            self.draw_line(start, end)

    def draw_line(self, start, end):
        """Fill the cells of a straight line between two cells."""
        x, y = start
        end_x, end_y = end
        delta_x = abs(end_x - x)
        delta_y = abs(end_y - y)
        step_x = 1 if x < end_x else -1
        step_y = 1 if y < end_y else -1
        error = delta_x - delta_y
        while True:
            tile = self.grid[(x, y)]
            tile.type = TileType.FILLED
            tile.color = BLUE
            tile.position = (x, y)
            if (x, y) == (end_x, end_y):
                break
            double_error = 2 * error
            if double_error > -delta_y:
                error -= delta_y
                x += step_x
            if double_error < delta_x:
                error += delta_x
                y += step_y

    def increment_filled_percentage(self):
        """Add one tile's share to the filled percentage."""
        width = float(self.grid.width)
        height = float(self.grid.height)
        total = height * width - 2 * width - 2 * height - ENEMY_COUNT - 1
        if total > 0:
            self.percent_filled += 100.0 / total