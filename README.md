# ballgame

A small 2D arcade game. You steer a blue ball around a window and collect
stars while red balls bounce off the walls. Each star is worth one point.
Touching a red ball ends your game, and your final score is printed.

## Installing

```
pip install .
```

This installs pygame as a dependency.

## Playing

```
ballgame
```

Options:

- `--width` and `--height` set the window size in pixels. The defaults are
  1280 and 720.
- `--seed` sets the random seed. Use it to get repeatable enemy and star
  placement.
- `--assets` names the directory that holds the sprites and sounds. The
  default is `assets`. The game looks for `sprites/ball_blue_large.png`,
  `sprites/ball_red_large.png`, `sprites/star.png` and the `audio/*.ogg`
  effects inside it. If a sprite is missing, the game draws a coloured
  circle in its place. If a sound is missing, or no audio device is
  available, that sound is skipped.

Controls:

- `W` / `A` / `S` / `D` move the player up, left, down and right.
  Holding two keys moves you diagonally at the same speed.
- `Escape`, or closing the window, quits.

When the game starts, four enemies and ten stars appear. Another enemy joins
every five seconds, and a new star appears every second. The game prints the
following to the terminal:

- `Score: N` when the game starts and each time the score changes.
- The high-score list when the game starts and each time a game ends.
- `Your final score is: N` when an enemy hits the player.

After a hit, the player is removed. The enemies and stars keep moving until
you quit.

## What it does not do

- The score is not drawn in the window. It appears only in the terminal.
- High scores are kept in memory for the current run only. They are not
  saved to disk, and every entry is recorded under the name `Player`.
- There is no restart after a game over. Start the command again to play
  another round.

## Using it as a library

The game logic does not depend on a display, so you can drive it step by
step:

```python
from ballgame.app import Game

game = Game(800, 600, 42)
game.startup()
events = game.update(1 / 60, {"d"})
sounds = game.take_sounds()
```

`Game.update(dt, pressed)` advances the world by `dt` seconds. `pressed` is
the set of movement keys held down: `"w"`, `"a"`, `"s"` and `"d"`, in either
case. It returns the `GameOver` events raised during that frame.
`Game.take_sounds()` returns the sound-effect paths queued since the last
call and clears the queue. The state itself is in `game.world`, a
`ballgame.world.World`. It holds the player, the enemies, the stars, the
scoreboard and the spawn timers.

The other modules:

- `ballgame.player`, `ballgame.enemy` and `ballgame.star` hold the systems
  for each kind of entity. These cover spawning, movement, confinement to
  the window and collisions.
- `ballgame.score` holds `ScoreBoard` and the systems that report scores.
- `ballgame.timer` holds `Timer`, which can run once or repeat.
- `ballgame.world` holds `Vec2`, the entity classes and the tuning
  constants.

## Running the tests

```
pip install ".[test]"
pytest
```