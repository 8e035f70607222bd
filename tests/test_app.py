import pytest

from ballgame.app import Game, main
from ballgame.world import (
    ENEMY_SPAWN_TIME,
    NUMBER_OF_ENEMIES,
    NUMBER_OF_STARS,
    PLAYER_SPRITE_SIZE,
    STAR_SPAWN_TIME,
    Enemy,
    GameOver,
    Star,
    Vec2,
)


@pytest.fixture
def quiet_game():
    game = Game(800.0, 600.0, seed=7)
    game.startup()
    game.world.enemies.clear()
    game.world.stars.clear()
    return game


def test_startup_spawns_everything():
    game = Game(800.0, 600.0, seed=1)
    game.startup()
    assert game.world.player.position == Vec2(400.0, 300.0)
    assert len(game.world.enemies) == NUMBER_OF_ENEMIES
    assert len(game.world.stars) == NUMBER_OF_STARS


def test_same_seed_gives_same_start():
    first = Game(800.0, 600.0, seed=42)
    second = Game(800.0, 600.0, seed=42)
    first.startup()
    second.startup()
    assert [e.position for e in first.world.enemies] == [e.position for e in second.world.enemies]
    assert [s.position for s in first.world.stars] == [s.position for s in second.world.stars]


def test_invalid_window_size_raises():
    with pytest.raises(ValueError):
        Game(0.0, 600.0, seed=1)


def test_no_keys_keeps_player_still(quiet_game):
    start = quiet_game.world.player.position
    quiet_game.update(0.1, set())
    assert quiet_game.world.player.position == start


def test_key_moves_player_right(quiet_game):
    start = quiet_game.world.player.position
    quiet_game.update(0.1, {"d"})
    moved = quiet_game.world.player.position
    assert moved.x > start.x
    assert moved.y == start.y


def test_player_is_confined_to_window(quiet_game):
    quiet_game.update(100.0, {"d", "w"})
    position = quiet_game.world.player.position
    assert position.x == quiet_game.world.width - PLAYER_SPRITE_SIZE / 2.0
    assert position.y == quiet_game.world.height - PLAYER_SPRITE_SIZE / 2.0


def test_enemy_collision_ends_game(quiet_game, capsys):
    world = quiet_game.world
    world.enemies.append(Enemy(position=world.player.position, direction=Vec2(1.0, 0.0)))
    events = quiet_game.update(0.0, set())
    assert events == [GameOver(score=0)]
    assert world.player is None
    assert world.scoreboard.high_scores == [("Player", 0)]
    assert "Your final score is: 0" in capsys.readouterr().out
    assert "audio/explosionCrunch_000.ogg" in quiet_game.take_sounds()


def test_collecting_a_star_scores(quiet_game, capsys):
    world = quiet_game.world
    world.stars.append(Star(position=world.player.position))
    events = quiet_game.update(0.0, set())
    assert events == []
    assert world.scoreboard.value == 1
    assert world.stars == []
    assert "Score: 1" in capsys.readouterr().out


def test_take_sounds_clears_queue(quiet_game):
    world = quiet_game.world
    world.stars.append(Star(position=world.player.position))
    quiet_game.update(0.0, set())
    assert quiet_game.take_sounds() == ["audio/laserLarge_000.ogg"]
    assert quiet_game.take_sounds() == []


def test_star_spawns_when_timer_finishes(quiet_game):
    quiet_game.update(STAR_SPAWN_TIME, set())
    assert len(quiet_game.world.stars) == 1


def test_enemy_spawns_when_timer_finishes(quiet_game):
    quiet_game.update(ENEMY_SPAWN_TIME, set())
    assert len(quiet_game.world.enemies) == 1


def test_update_without_startup_has_no_player():
    game = Game(800.0, 600.0, seed=3)
    events = game.update(0.5, {"a"})
    assert events == []
    assert game.world.player is None


def test_main_rejects_bad_arguments():
    with pytest.raises(SystemExit):
        main(["--width", "wide"])