"""The game loop: wires the systems together and runs them in a window."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from pathlib import Path

from ballgame.enemy import (
    confine_enemy_movement,
    enemy_movement,
    spawn_enemies,
    spawn_enemies_over_time,
    tick_enemy_spawn_timer,
    update_enemy_direction,
)
from ballgame.player import (
    confine_player_movement,
    enemy_hit_player,
    player_hit_star,
    player_movement,
    spawn_player,
)
from ballgame.score import high_scores_updated, update_high_scores, update_score
from ballgame.star import spawn_stars, spawn_stars_over_time, tick_star_spawn_timer
from ballgame.world import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    ENEMY_SPRITE_SIZE,
    ENEMY_SPRITE_SRC,
    PLAYER_SPRITE_SIZE,
    PLAYER_SPRITE_SRC,
    STAR_SIZE,
    STAR_SPRITE_SRC,
    GameOver,
    World,
)

FRAMES_PER_SECOND = 60
BACKGROUND = (40, 40, 40)

_SPRITE_STYLE = {
    PLAYER_SPRITE_SRC: ((60, 120, 230), PLAYER_SPRITE_SIZE),
    ENEMY_SPRITE_SRC: ((220, 60, 60), ENEMY_SPRITE_SIZE),
    STAR_SPRITE_SRC: ((240, 210, 60), STAR_SIZE),
}


class Game:
    """One running game: the world plus the order its systems run in."""

    def __init__(self, width: float = DEFAULT_WIDTH, height: float = DEFAULT_HEIGHT,
                 seed: int | None = None) -> None:
        self.world = World(width=width, height=height, seed=seed)

    def startup(self) -> None:
        """Spawn the player, the first enemies and the first stars."""
        spawn_player(self.world)
        spawn_enemies(self.world)
        spawn_stars(self.world)

    def update(self, dt: float, pressed: Iterable[str] = ()) -> list[GameOver]:
        """Advance the game by ``dt`` seconds with the given keys held.

        Returns the game-over events raised during this frame.
        """
        world = self.world

        player_movement(world, pressed, dt)
        confine_player_movement(world)
        enemy_hit_player(world)
        player_hit_star(world)

        enemy_movement(world, dt)
        update_enemy_direction(world)
        confine_enemy_movement(world)
        tick_enemy_spawn_timer(world, dt)
        spawn_enemies_over_time(world)

        tick_star_spawn_timer(world, dt)
        spawn_stars_over_time(world)

        events = world.take_game_over_events()
        update_score(world.scoreboard)
        update_high_scores(world.scoreboard, events)
        high_scores_updated(world.scoreboard)
        for event in events:
            print(f"Your final score is: {event.score}")
        return events

    def take_sounds(self) -> list[str]:
        """Return the sound effects queued since the last call and clear them."""
        sounds, self.world.sounds = self.world.sounds, []
        return sounds


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="ballgame", description="Dodge the red balls, collect the stars.")
    parser.add_argument("--width", type=float, default=DEFAULT_WIDTH, help="window width in pixels")
    parser.add_argument("--height", type=float, default=DEFAULT_HEIGHT, help="window height in pixels")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--assets", type=Path, default=Path("assets"), help="directory holding sprites and audio")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Open a window and play until it is closed or Escape is pressed."""
    args = _parse_args(argv)
    game = Game(args.width, args.height, args.seed)

    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((int(args.width), int(args.height)))
        pygame.display.set_caption("Ball Game")
        clock = pygame.time.Clock()
        images: dict[str, object] = {}
        sound_cache: dict[str, object] = {}
        key_map = {"a": pygame.K_a, "d": pygame.K_d, "w": pygame.K_w, "s": pygame.K_s}

        def image_for(sprite: str):
            if sprite not in images:
                try:
                    images[sprite] = pygame.image.load(str(args.assets / sprite)).convert_alpha()
                except (pygame.error, FileNotFoundError):
                    images[sprite] = None
            return images[sprite]

        def play(path: str) -> None:
            if not pygame.mixer.get_init():
                return
            if path not in sound_cache:
                try:
                    sound_cache[path] = pygame.mixer.Sound(str(args.assets / path))
                except (pygame.error, FileNotFoundError):
                    sound_cache[path] = None
            sound = sound_cache[path]
            if sound is not None:
                sound.play()

        def draw(sprite: str, x: float, y: float) -> None:
            center = (round(x), round(args.height - y))
            image = image_for(sprite)
            if image is not None:
                screen.blit(image, image.get_rect(center=center))
            else:
                color, size = _SPRITE_STYLE[sprite]
                pygame.draw.circle(screen, color, center, round(size / 2))

        game.startup()
        running = True
        while running:
            dt = clock.tick(FRAMES_PER_SECOND) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            if not running:
                break

            keys = pygame.key.get_pressed()
            pressed = {name for name, code in key_map.items() if keys[code]}
            game.update(dt, pressed)
            for path in game.take_sounds():
                play(path)

            screen.fill(BACKGROUND)
            world = game.world
            for star in world.stars:
                draw(star.sprite, star.position.x, star.position.y)
            for enemy in world.enemies:
                draw(enemy.sprite, enemy.position.x, enemy.position.y)
            if world.player is not None:
                draw(world.player.sprite, world.player.position.x, world.player.position.y)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0