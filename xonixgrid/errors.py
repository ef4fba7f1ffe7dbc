"""Exceptions raised by the game."""


class GameError(RuntimeError):
    """Base class for every error the game reports."""


class FileNotFound(GameError):
    """A data file could not be opened."""

    def __init__(self, path):
        super().__init__(f"Path {path} not found")
        self.path = path


class OutOfBounds(GameError):
    """A grid position lies outside the grid."""

    def __init__(self, pos):
        x, y = pos
        super().__init__(f"Position ({x}, {y}) is out of bounds")
        self.pos = (x, y)


class InvalidInput(GameError):
    """A token in the game file does not fit the format."""

    def __init__(self, token):
        super().__init__(f'Invalid input: "{token}" for game format')
        self.token = token