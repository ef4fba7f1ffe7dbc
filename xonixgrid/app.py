"""Game screens, the controller that switches between them, and the entry point."""

from __future__ import annotations

import abc
import argparse
import functools
import random
import sys
from pathlib import Path

import pygame

from .board import Board
from .errors import FileNotFound, GameError, InvalidInput, OutOfBounds
from .grid import CELL_SIZE
from .hud import HudData, hud_lines
from .levels import load_game_file
from .player import Direction
from .trail import BODY_SIZE, Rect

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
MAGENTA = (255, 0, 255)
GREY = (200, 200, 200)
ENEMY_COLOR = (0, 160, 0)

BUTTON_SIZE = (200.0, 60.0)
BUTTON_SPACING = 40.0
HUD_OFFSETS = (0, 130, 260, 410, 540)


@functools.lru_cache(maxsize=None)
def _font(size):
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _centered_rect(text, size, center):
    """Bounding rectangle of ``text`` rendered at ``size`` and centred on ``center``."""
    width, height = _font(size).size(text)
    return Rect(center[0] - width / 2, center[1] - height / 2, width, height)


def _blit_centered(surface, text, size, color, center):
    image = _font(size).render(text, True, color)
    surface.blit(image, image.get_rect(center=(round(center[0]), round(center[1]))))


def _direction_from_keys(pressed):
    """Direction for the arrow keys held down; up wins over down, left, right."""
    for key, direction in (
        (pygame.K_UP, Direction.UP),
        (pygame.K_DOWN, Direction.DOWN),
        (pygame.K_LEFT, Direction.LEFT),
        (pygame.K_RIGHT, Direction.RIGHT),
    ):
        if pressed[key]:
            return direction
    return Direction.NONE


class GameState(abc.ABC):
    """One screen of the game, driven by the controller."""

    def __init__(self, controller):
        self.controller = controller

    @abc.abstractmethod
    def handle_event(self, event):
        """React to one input event."""

    @abc.abstractmethod
    def update(self, dt):
        """Advance the screen by ``dt`` seconds."""

    @abc.abstractmethod
    def render(self, surface):
        """Draw the screen onto ``surface``."""


class WelcomeState(GameState):
    """Title screen with a single Play button."""

    def __init__(self, controller):
        super().__init__(controller)
        width, height = controller.window_size
        self.play_button = _centered_rect("Play", 80, (width / 2, height * 0.75))
        self.hovered = False
        self.start_requested = False
        self._background = None

    def handle_event(self, event):
        pos = getattr(event, "pos", None)
        if pos is None:
            return
        self.hovered = self.play_button.contains(pos)
        if (
            event.type == pygame.MOUSEBUTTONUP
            and getattr(event, "button", None) == 1
            and self.hovered
        ):
            self.start_requested = True

    def update(self, dt):
        if self.start_requested:
            self.controller.switch_state(InGameState(self.controller, 0, 0))

    def _load_background(self):
        if self._background is None:
            path = Path(self.controller.resource_dir) / "welcome_bg.png"
            if not path.is_file():
                raise GameError("welcome_bg.png not found")
            image = pygame.image.load(str(path))
            self._background = pygame.transform.scale(image, self.controller.window_size)
        return self._background

    def render(self, surface):
        surface.blit(self._load_background(), (0, 0))
        color = WHITE if self.hovered else BLACK
        button = self.play_button
        _blit_centered(
            surface,
            "Play",
            80,
            color,
            (button.left + button.width / 2, button.top + button.height / 2),
        )


class InGameState(GameState):
    """A level being played."""

    def __init__(self, controller, level, score):
        super().__init__(controller)
        self.level = level
        self.score = score
        self.board = Board(controller.game_data, controller.levels[level], score, controller.rng)
        self.hud = HudData(
            score=self.board.score,
            lives=self.board.lives,
            timer=self.board.time_left,
            percentage=self.board.percentage_filled,
            level=level + 1,
        )

    def handle_event(self, event):
        """The player is steered from the held keys, not from events."""

    def update(self, dt):
        self.board.update(dt, self.controller.direction)
        self.hud = HudData(
            score=self.board.score,
            lives=self.board.lives,
            timer=self.board.time_left,
            percentage=self.board.percentage_filled,
            level=self.level + 1,
        )
        self.check_progress()

    def check_progress(self):
        """Ask for the next screen when the level is lost or its area target is met."""
        levels = self.controller.levels
        if not self.board.lives:
            self.controller.switch_state(EndState(self.controller, self.score, won=False))
        if self.board.percentage_filled >= levels[self.level].required_percentage:
            self.score += self.board.score
            if self.level < len(levels) - 1:
                self.controller.switch_state(
                    InGameState(self.controller, self.level + 1, self.score)
                )
            else:
                self.controller.switch_state(EndState(self.controller, self.score, won=True))

    def render(self, surface):
        for _, tile in self.board.grid.cells():
            x, y = tile.pixel_position()
            surface.fill(tile.color, (x, y, CELL_SIZE, CELL_SIZE))
        player = self.board.player
        for x, y in player.trail:
            surface.fill(MAGENTA, (round(x), round(y), CELL_SIZE, CELL_SIZE))
        surface.fill(RED, (round(player.position[0]), round(player.position[1]), BODY_SIZE, BODY_SIZE))
        for rect in self.board.enemy_rects():
            surface.fill(ENEMY_COLOR, (round(rect.left), round(rect.top), BODY_SIZE, BODY_SIZE))
        base_x = self.controller.game_data.screen_size[0] / 8
        font = _font(24)
        for offset, line in zip(HUD_OFFSETS, hud_lines(self.hud)):
            surface.blit(font.render(line, True, WHITE), (round(base_x + offset), 10))


class EndState(GameState):
    """Closing screen after a win or a loss, with Restart and Quit buttons."""

    def __init__(self, controller, score, won):
        super().__init__(controller)
        self.score = score
        self.won = won
        self.message = "You Won!" if won else "You Lost :("
        self.score_text = f"Your Score: {score}"
        width, height = controller.window_size
        button_w, button_h = BUTTON_SIZE
        start_x = (width - (2 * button_w + BUTTON_SPACING)) / 2
        y = height * 0.75
        self.restart_button = Rect(start_x, y, button_w, button_h)
        self.quit_button = Rect(start_x + button_w + BUTTON_SPACING, y, button_w, button_h)

    def click(self, pos):
        """Act on a left click at ``pos``; return ``"restart"``, ``"quit"`` or None."""
        if self.restart_button.contains(pos):
            self.controller.switch_state(WelcomeState(self.controller))
            return "restart"
        if self.quit_button.contains(pos):
            self.controller.running = False
            return "quit"
        return None

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.controller.running = False
            return
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.click(event.pos)

    def update(self, dt):
        """Nothing moves on this screen."""

    def render(self, surface):
        width, height = self.controller.window_size
        _blit_centered(surface, self.message, 80, WHITE, (width / 2, height * 0.2))
        _blit_centered(surface, self.score_text, 50, WHITE, (width / 2, height * 0.35))
        for rect, label in ((self.restart_button, "Restart"), (self.quit_button, "Quit")):
            box = pygame.Rect(round(rect.left), round(rect.top), round(rect.width), round(rect.height))
            surface.fill(GREY, box)
            pygame.draw.rect(surface, WHITE, box.inflate(4, 4), 2)
            _blit_centered(surface, label, 24, BLACK, (rect.left + 100, rect.top + 30))


class GameController:
    """Owns the game data and the current screen, and runs the main loop."""

    def __init__(self, path="game_data.txt"):
        self.game_data, self.levels = load_game_file(path)
        self.resource_dir = Path(path).parent
        width, height = self.game_data.screen_size
        self.window_size = (width * CELL_SIZE, height * CELL_SIZE)
        self.rng = random.Random()
        self.direction = Direction.NONE
        self.running = True
        self.pending_state = None
        self.state = WelcomeState(self)

    def switch_state(self, state):
        """Schedule ``state`` to replace the current one after this frame."""
        self.pending_state = state

    def apply_pending(self):
        """Make the scheduled state current; return whether there was one."""
        if self.pending_state is None:
            return False
        self.state, self.pending_state = self.pending_state, None
        return True

    def run(self):
        """Open the window and loop until it is closed."""
        pygame.init()
        try:
            surface = pygame.display.set_mode(self.window_size)
            pygame.display.set_caption("Xonix")
            clock = pygame.time.Clock()
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYUP and event.key == pygame.K_ESCAPE:
                        self.running = False
                    self.state.handle_event(event)
                dt = clock.tick() / 1000.0
                self.direction = _direction_from_keys(pygame.key.get_pressed())
                self.state.update(dt)
                surface.fill(BLACK)
                self.state.render(surface)
                pygame.display.flip()
                self.apply_pending()
        finally:
            pygame.quit()


def main(argv=None):
    """Start the game; return the process exit status."""
    parser = argparse.ArgumentParser(prog="xonixgrid", description="Area-capturing arcade game.")
    parser.add_argument("path", nargs="?", default="game_data.txt", help="game data file")
    args = parser.parse_args(argv)
    try:
        GameController(args.path).run()
    except (FileNotFound, OutOfBounds, InvalidInput) as exc:
        print(exc)
    except Exception as exc:
        print(f"got: {exc}", file=sys.stderr)
        return 3
    return 0