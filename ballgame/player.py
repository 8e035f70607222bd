"""Player systems: spawning, keyboard movement and collisions."""

from __future__ import annotations

from collections.abc import Iterable

from ballgame.world import (
    ENEMY_SPRITE_SIZE,
    PLAYER_SPEED,
    PLAYER_SPRITE_SIZE,
    STAR_SIZE,
    GameOver,
    Player,
    Vec2,
    World,
)

EXPLOSION_SOUND = "audio/explosionCrunch_000.ogg"
STAR_SOUND = "audio/laserLarge_000.ogg"

KEY_DIRECTIONS = {
    "a": Vec2(-1.0, 0.0),
    "d": Vec2(1.0, 0.0),
    "w": Vec2(0.0, 1.0),
    "s": Vec2(0.0, -1.0),
}


def spawn_player(world: World) -> Player:
    """Place the player at the centre of the window."""
    world.player = Player(position=world.center)
    return world.player


def player_movement(world: World, pressed: Iterable[str], dt: float) -> None:
    """Move the player by the held W/A/S/D keys for ``dt`` seconds."""
    if world.player is None:
        return
    held = {key.lower() for key in pressed}
    direction = Vec2()
    for key, step in KEY_DIRECTIONS.items():
        if key in held:
            direction = direction + step
    if direction.length() > 0.0:
        direction = direction.normalize()
    world.player.position = world.player.position + direction * (PLAYER_SPEED * dt)


def confine_player_movement(world: World) -> None:
    """Clamp the player inside the window."""
    if world.player is None:
        return
    half = PLAYER_SPRITE_SIZE / 2.0
    position = world.player.position
    x = min(max(position.x, half), world.width - half)
    y = min(max(position.y, half), world.height - half)
    world.player.position = Vec2(x, y)


def enemy_hit_player(world: World) -> None:
    """End the game when an enemy touches the player."""
    player = world.player
    if player is None:
        return
    reach = PLAYER_SPRITE_SIZE / 2.0 + ENEMY_SPRITE_SIZE / 2.0
    hit = False
    for enemy in world.enemies:
        if player.position.distance(enemy.position) < reach:
            print("Enemy hit player! Game over!")
            world.play_sound(EXPLOSION_SOUND)
            world.emit_game_over(GameOver(score=world.scoreboard.value))
            hit = True
    if hit:
        world.player = None


def player_hit_star(world: World) -> None:
    """Collect every star the player touches, scoring a point for each."""
    player = world.player
    if player is None:
        return
    reach = PLAYER_SPRITE_SIZE / 2.0 + STAR_SIZE / 2.0
    remaining = []
    for star in world.stars:
        if player.position.distance(star.position) < reach:
            world.scoreboard.add_point()
            world.play_sound(STAR_SOUND)
        else:
            remaining.append(star)
    world.stars = remaining