"""The player's piece: movement, trail and collisions."""

from __future__ import annotations

import enum

from .grid import REWARD, SPEED
from .trail import BODY_SIZE, Rect, Trail, cell_of_point


class Direction(enum.Enum):
    """Movement direction as a unit vector."""

    NONE = (0, 0)
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


class Player:
    """The piece the player steers across the grid."""

    def __init__(self, position, lives, board, score):
        self.position = (float(position[0]), float(position[1]))
        self.start_position = self.position
        self.lives = lives
        self.score = score
        self.board = board
        self.direction = Direction.NONE
        self.speed = float(SPEED)
        self.trail = Trail()

    def update(self, dt, direction):
        """Move for ``dt`` seconds and extend or close the trail."""
        old_position = self.position
        self.direction = direction
        dx, dy = direction.value
        self.move((dx * self.speed * dt, dy * self.speed * dt))

        is_moving = direction is not Direction.NONE
        on_filled = self.board.is_on_filled_tile(cell_of_point(self.position))
        was_on_filled = self.board.is_on_filled_tile(cell_of_point(old_position))
        if not on_filled and was_on_filled:
            self.trail.add_point(self.position)
        elif not was_on_filled and on_filled:
            self.board.set_on_closed_area(list(self.trail))
            self.score = int(self.score + self.board.percentage_filled / REWARD)
            self.trail.clear()
        elif not on_filled and is_moving:
            self.trail.add_point(self.position)

    def move(self, delta):
        """Shift by ``delta`` pixels, kept inside the board."""
        x = self.position[0] + delta[0]
        y = self.position[1] + delta[1]
        width = self.board.screen_width
        height = self.board.screen_height
        x = max(x, 0.0)
        y = max(y, 0.0)
        if x + BODY_SIZE > width:
            x = float(width - BODY_SIZE)
        if y + BODY_SIZE > height:
            y = float(height - BODY_SIZE)
        self.position = (x, y)

    def bounds(self):
        return Rect(self.position[0], self.position[1], BODY_SIZE, BODY_SIZE)

    def collides_with(self, rect):
        """True when the player's body overlaps ``rect``."""
        return self.bounds().intersects(rect)

    def check_collision(self, rect):
        """Lose a life if ``rect`` hits the player or the trail."""
        if self.collides_with(rect) or self.trail.collides(rect):
            self.handle_collision()
            return True
        return False

    def handle_collision(self):
        self.trail.clear()
        self.lives -= 1
        self.reset_position()

    def reset_position(self):
        self.position = self.start_position