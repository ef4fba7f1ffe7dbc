"""Parsing of the game data file: screen size, lives and level list."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import FileNotFound, GameError, InvalidInput

_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class GameData:
    """Global settings: lives and grid size in cells (width, height)."""

    num_of_lives: int
    screen_size: tuple[int, int]

    def describe(self):
        width, height = self.screen_size
        return f"screen size is: {width} x {height} num of lives: {self.num_of_lives}\n"


@dataclass
class LevelData:
    """One level: how many enemies and which fill percentage wins it."""

    num_of_enemies: int
    required_percentage: int

    def describe(self):
        return (
            f"num of enemies: {self.num_of_enemies}"
            f"req presentage: {self.required_percentage} \n"
        )


def _read_int(text, pos):
    """Read one integer the way a formatted stream does; return it and the new offset."""
    match = _INT.match(text, pos)
    if match is None:
        rest = text[pos:].split()
        raise InvalidInput(rest[0] if rest else text)
    return int(match.group(1)), match.end()


def _leading_int(text):
    """Integer prefix of ``text`` after optional whitespace."""
    match = _INT.match(text)
    if match is None:
        raise InvalidInput(text)
    return int(match.group(1))


def parse_game_data(line):
    """Parse the first line: grid width, grid height and number of lives."""
    width, pos = _read_int(line, 0)
    height, pos = _read_int(line, pos)
    lives, _ = _read_int(line, pos)
    return GameData(num_of_lives=lives, screen_size=(width, height))


def _parse_tuple(token):
    inner = token[1:-1]
    x_text, comma, y_text = inner.partition(",")
    if not comma:
        raise GameError("invalid tuple format")
    return _leading_int(x_text), _leading_int(y_text)


def parse_level_line(line):
    """Parse a level line: required percentage, then an enemy count or positions."""
    required, pos = _read_int(line, 0)
    tokens = iter(line[pos:].split())
    count = 0
    for token in tokens:
        if token[0] in "0123456789":
            count = _leading_int(token)
        elif token.startswith("(") and token.endswith(")"):
            # Once positions start, every remaining token is read as a position.
            _parse_tuple(token)
            count += 1
            for rest in tokens:
                _parse_tuple(rest)
                count += 1
        else:
            raise InvalidInput(token)
    return LevelData(num_of_enemies=count, required_percentage=required)


def parse_levels(lines):
    """Parse every non-empty line into a level."""
    levels = []
    for line in lines:
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        levels.append(parse_level_line(line))
    return levels


def load_game_file(path):
    """Read a game file and return ``(GameData, [LevelData, ...])``."""
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError as exc:
        raise FileNotFound(str(path)) from exc
    first = lines[0] if lines else ""
    return parse_game_data(first), parse_levels(lines[1:])