"""Enemy systems: spawning, moving, bouncing off the window edges."""

from __future__ import annotations

from ballgame.world import (
    ENEMY_SPEED,
    ENEMY_SPRITE_SIZE,
    NUMBER_OF_ENEMIES,
    Enemy,
    Vec2,
    World,
)

BOUNCE_SOUNDS = ("audio/pluck_001.ogg", "audio/pluck_002.ogg")


def _bounds(world: World) -> tuple[float, float, float, float]:
    half = ENEMY_SPRITE_SIZE / 2.0
    return half, world.width - half, half, world.height - half


def _spawn_enemy(world: World) -> Enemy:
    position = world.random_position()
    direction = Vec2(world.rng.random(), world.rng.random()).normalize()
    enemy = Enemy(position=position, direction=direction)
    world.enemies.append(enemy)
    return enemy


def spawn_enemies(world: World) -> list[Enemy]:
    """Place the starting enemies at random points; return them."""
    return [_spawn_enemy(world) for _ in range(NUMBER_OF_ENEMIES)]


def enemy_movement(world: World, dt: float) -> None:
    """Move every enemy along its direction for ``dt`` seconds."""
    for enemy in world.enemies:
        enemy.position = enemy.position + enemy.direction * (ENEMY_SPEED * dt)


def update_enemy_direction(world: World) -> None:
    """Reverse enemies that have left the playable area and play a bounce sound."""
    x_min, x_max, y_min, y_max = _bounds(world)
    for enemy in world.enemies:
        dx, dy = enemy.direction.x, enemy.direction.y
        changed = False
        if not x_min <= enemy.position.x <= x_max:
            dx = -dx
            changed = True
        if not y_min <= enemy.position.y <= y_max:
            dy = -dy
            changed = True
        if changed:
            enemy.direction = Vec2(dx, dy)
            first, second = BOUNCE_SOUNDS
            world.play_sound(first if world.rng.random() > 0.5 else second)


def confine_enemy_movement(world: World) -> None:
    """Clamp every enemy inside the window."""
    x_min, x_max, y_min, y_max = _bounds(world)
    for enemy in world.enemies:
        x = min(max(enemy.position.x, x_min), x_max)
        y = min(max(enemy.position.y, y_min), y_max)
        enemy.position = Vec2(x, y)


def tick_enemy_spawn_timer(world: World, dt: float) -> None:
    """Advance the enemy spawn timer."""
    world.enemy_spawn_timer.tick(dt)


def spawn_enemies_over_time(world: World) -> Enemy | None:
    """Spawn one enemy when the spawn timer has just finished."""
    if world.enemy_spawn_timer.finished():
        return _spawn_enemy(world)
    return None