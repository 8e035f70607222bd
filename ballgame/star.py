"""Star systems: initial scattering and periodic spawning."""

from __future__ import annotations

from ballgame.world import NUMBER_OF_STARS, Star, World


def _spawn_star(world: World) -> Star:
    star = Star(position=world.random_position())
    world.stars.append(star)
    return star


def spawn_stars(world: World) -> list[Star]:
    """Scatter the starting stars at random points; return them."""
    return [_spawn_star(world) for _ in range(NUMBER_OF_STARS)]


def tick_star_spawn_timer(world: World, dt: float) -> None:
    """Advance the star spawn timer."""
    world.star_spawn_timer.tick(dt)


def spawn_stars_over_time(world: World) -> Star | None:
    """Spawn one star when the spawn timer has just finished."""
    if world.star_spawn_timer.finished():
        return _spawn_star(world)
    return None