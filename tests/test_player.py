import pytest

from ballgame.player import (
    EXPLOSION_SOUND,
    STAR_SOUND,
    confine_player_movement,
    enemy_hit_player,
    player_hit_star,
    player_movement,
    spawn_player,
)
from ballgame.world import (
    PLAYER_SPEED,
    PLAYER_SPRITE_SIZE,
    PLAYER_SPRITE_SRC,
    Enemy,
    GameOver,
    Star,
    Vec2,
    World,
)


@pytest.fixture
def world():
    w = World(width=800.0, height=600.0, seed=2)
    spawn_player(w)
    return w


def test_spawn_player_at_center(world):
    assert world.player.position == Vec2(400.0, 300.0)
    assert world.player.sprite == PLAYER_SPRITE_SRC


def test_move_right(world):
    player_movement(world, {"d"}, 0.1)
    assert world.player.position.x == pytest.approx(400.0 + PLAYER_SPEED * 0.1)
    assert world.player.position.y == pytest.approx(300.0)


def test_uppercase_keys_accepted(world):
    player_movement(world, ["W"], 0.1)
    assert world.player.position.y == pytest.approx(300.0 + PLAYER_SPEED * 0.1)


def test_diagonal_movement_is_normalized(world):
    start = world.player.position
    player_movement(world, {"d", "w"}, 0.2)
    moved = world.player.position.distance(start)
    assert moved == pytest.approx(PLAYER_SPEED * 0.2)


def test_opposite_keys_cancel(world):
    player_movement(world, {"a", "d", "w", "s"}, 1.0)
    assert world.player.position == Vec2(400.0, 300.0)


def test_movement_without_player_does_nothing():
    w = World(seed=1)
    player_movement(w, {"d"}, 1.0)
    confine_player_movement(w)
    assert w.player is None


def test_confine_player(world):
    half = PLAYER_SPRITE_SIZE / 2.0
    world.player.position = Vec2(-100.0, 5000.0)
    confine_player_movement(world)
    assert world.player.position == Vec2(half, world.height - half)
    world.player.position = Vec2(5000.0, -100.0)
    confine_player_movement(world)
    assert world.player.position == Vec2(world.width - half, half)


def test_enemy_hit_ends_game(world, capsys):
    world.scoreboard.add_point()
    world.enemies.append(Enemy(position=world.player.position, direction=Vec2(1.0, 0.0)))
    enemy_hit_player(world)
    assert world.player is None
    assert world.take_game_over_events() == [GameOver(score=world.scoreboard.value)]
    assert world.sounds == [EXPLOSION_SOUND]
    assert "Enemy hit player! Game over!" in capsys.readouterr().out


def test_enemy_far_away_does_not_hit(world):
    world.enemies.append(Enemy(position=Vec2(10.0, 10.0), direction=Vec2(1.0, 0.0)))
    enemy_hit_player(world)
    assert world.player.position == Vec2(400.0, 300.0)
    assert world.take_game_over_events() == []


def test_player_collects_star(world):
    far = Star(position=Vec2(10.0, 10.0))
    world.stars.extend([Star(position=world.player.position), far])
    player_hit_star(world)
    assert world.scoreboard.value == 1
    assert world.stars == [far]
    assert world.sounds == [STAR_SOUND]


def test_player_collects_several_stars(world):
    world.stars.extend([Star(position=world.player.position) for _ in range(3)])
    player_hit_star(world)
    assert world.scoreboard.value == 3
    assert world.stars == []
    assert world.sounds == [STAR_SOUND] * 3