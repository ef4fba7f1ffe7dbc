# xonixgrid

A small Xonix-style arcade game. You steer a red square around a grid with
a wall around it. When you step off filled ground you leave a trail. When you
get back onto filled ground, the trail becomes wall, and every region that
holds no enemy is claimed. Claim the percentage of the board that the level
asks for and you go on to the next level. If an enemy touches you or your
trail, you lose a life and go back to the top-left corner. With no lives left,
the game is lost. If you clear the last level, you win.

## Installing

```
pip install .
```

This also installs `pygame`.

## Playing

```
xonixgrid
```

By default the game reads `game_data.txt` from the current directory. You can
give another file as an argument:

```
xonixgrid path/to/game_data.txt
```

The title screen uses a background image, `welcome_bg.png`, which must be in
the same directory as the game file. Click **Play** to start. Steer with the
arrow keys. If you hold more than one arrow key, up wins over down, down over
left, and left over right. Press Escape or close the window to quit.

The status line shows your score, your lives, a countdown that starts at
3:00, the percentage of the board you have claimed, and the level number.
The end screen shows your score and two buttons. **Restart** goes back to the
title screen. **Quit** closes the game.

If the game file is missing or has an invalid token, the command prints the
error and exits with status 0. Any other error, such as a missing background
image, is printed to standard error as `got: <message>` and the exit status
is 3.

## The game file

The first line gives the grid width and the grid height, both in cells, and
then the number of lives. Each cell is 15 pixels.

```
50 50 3
```

Each line after that describes one level. It starts with the percentage of
the board you must claim. After that comes the number of enemies, either as a
plain count or as a list of `(x,y)` tuples. With a list, each tuple adds one
enemy:

```
60 3
75 (10,10) (20,15) (30,30)
```

Blank lines are skipped. A token that is neither a number nor a
parenthesised tuple raises `xonixgrid.errors.InvalidInput`. A tuple without a
comma raises `xonixgrid.errors.GameError`.

## As a library

The game logic works without a window:

- `xonixgrid.levels`: `load_game_file(path)` returns a `GameData` and a list of
  `LevelData`. `parse_game_data`, `parse_level_line` and `parse_levels` parse
  single lines or lists of lines.
- `xonixgrid.grid.Grid`: the tile grid. Border tiles are laid down on creation.
  Indexing with an `(x, y)` cell outside the grid raises `OutOfBounds`.
- `xonixgrid.areacloser.AreaCloser`: lays a trail onto the grid, then claims
  every region that no enemy can reach.
- `xonixgrid.trail.Trail` and `xonixgrid.trail.Rect`: the player's trail and
  the rectangle overlap test used for collisions.
- `xonixgrid.player.Player` and `xonixgrid.player.Direction`: movement,
  trail-laying and collision handling.
- `xonixgrid.board.Board`: one level in play. Call `Board.update(dt, direction)`
  to advance it. Pass a `random.Random` as `rng` if you want the enemy
  placement to be the same on every run.
- `xonixgrid.hud`: `hud_lines(HudData(...))` returns the status-line texts.

## What the game does not do

- Enemies do not move. Each one stays on the cell where it was placed.
- Enemies are always placed at random inside the wall. Positions written in
  the game file only set how many enemies there are.
- Nothing happens when the countdown reaches zero. The countdown keeps going
  below 0:00.
- There are no high scores and no saved games.

## Tests

```
pip install .[test]
pytest
```