"""Game entities, tuning constants and the shared world state."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

from ballgame.score import ScoreBoard
from ballgame.timer import Timer

NUMBER_OF_ENEMIES = 4
ENEMY_SPEED = 200.0
ENEMY_SPRITE_SIZE = 64.0
ENEMY_SPRITE_SRC = "sprites/ball_red_large.png"
ENEMY_SPAWN_TIME = 5.0

NUMBER_OF_STARS = 10
STAR_SIZE = 30.0
STAR_SPAWN_TIME = 1.0
STAR_SPRITE_SRC = "sprites/star.png"

PLAYER_SPRITE_SRC = "sprites/ball_blue_large.png"
PLAYER_SPRITE_SIZE = 64.0
PLAYER_SPEED = 500.0

DEFAULT_WIDTH = 1280.0
DEFAULT_HEIGHT = 720.0


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vec2:
        """Return the unit vector pointing the same way."""
        size = self.length()
        if size == 0.0 or not math.isfinite(size):
            raise ValueError(f"cannot normalize {self!r}")
        return Vec2(self.x / size, self.y / size)

    def distance(self, other: Vec2) -> float:
        return (self - other).length()


@dataclass
class Enemy:
    position: Vec2
    direction: Vec2
    sprite: str = ENEMY_SPRITE_SRC


@dataclass
class Star:
    position: Vec2
    sprite: str = STAR_SPRITE_SRC


@dataclass
class Player:
    position: Vec2
    sprite: str = PLAYER_SPRITE_SRC


@dataclass(frozen=True)
class GameOver:
    score: int


@dataclass
class World:
    """Everything the game systems read and change during a frame."""

    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT
    seed: int | None = None
    rng: random.Random = field(init=False, repr=False)
    player: Player | None = field(default=None, init=False)
    enemies: list[Enemy] = field(default_factory=list, init=False)
    stars: list[Star] = field(default_factory=list, init=False)
    scoreboard: ScoreBoard = field(default_factory=ScoreBoard, init=False)
    sounds: list[str] = field(default_factory=list, init=False, repr=False)
    enemy_spawn_timer: Timer = field(init=False, repr=False)
    star_spawn_timer: Timer = field(init=False, repr=False)
    _game_over_events: list[GameOver] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"window size must be positive, got {self.width}x{self.height}")
        self.rng = random.Random(self.seed)
        self.enemy_spawn_timer = Timer(ENEMY_SPAWN_TIME, repeating=True)
        self.star_spawn_timer = Timer(STAR_SPAWN_TIME, repeating=True)

    @property
    def center(self) -> Vec2:
        return Vec2(self.width / 2.0, self.height / 2.0)

    def random_position(self) -> Vec2:
        """A uniformly random point inside the window."""
        return Vec2(self.rng.random() * self.width, self.rng.random() * self.height)

    def play_sound(self, path: str) -> None:
        """Queue a sound effect to be played."""
        self.sounds.append(path)

    def emit_game_over(self, event: GameOver) -> None:
        self._game_over_events.append(event)

    def take_game_over_events(self) -> list[GameOver]:
        """Return the pending game-over events and clear the queue."""
        events, self._game_over_events = self._game_over_events, []
        return events