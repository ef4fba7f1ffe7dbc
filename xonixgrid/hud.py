"""Text shown in the heads-up display."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class HudData:
    """Values the HUD shows."""

    score: int
    lives: int
    timer: float
    percentage: float
    level: int


def format_timer(seconds):
    """Whole seconds as ``m:ss``, truncating toward zero."""
    total = int(seconds)
    sign = -1 if total < 0 else 1
    minutes, rest = divmod(abs(total), 60)
    return f"{sign * minutes}:{sign * rest:02d}"


def hud_lines(data):
    """The HUD texts in display order: score, lives, time, area, level."""
    return [
        f"Score: {data.score}",
        f"Lives: {data.lives}",
        f"Time: {format_timer(data.timer)}",
        f"Area: {int(data.percentage)}%",
        f"Level: {data.level}",
    ]