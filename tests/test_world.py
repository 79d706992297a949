import copy
import random

import pytest

from wordinvaders.components import (
    BASE_SPEED,
    EXPLOSION_LEN,
    MAX_ENEMY,
    PLAYER_SIZE,
    SPRITE_SCALE,
    WinSize,
)
from wordinvaders.exercise import Exercise, Question
from wordinvaders.formation import Formation
from wordinvaders.world import Enemy, Game, Laser, SpriteSize, Velocity

WIN = WinSize(1920.0, 900.0)


def make_exercise():
    return Exercise(
        questions=[
            Question(question="h[ ]llo :x", word="hello", answer="e", options=["a", "b", "c", "d", "e"]),
            Question(question="w[ ]rld :y", word="world", answer="o", options=["o", "p", "q", "r", "s"]),
        ]
    )


def make_game(**kwargs):
    return Game(WIN, make_exercise(), random.Random(7), **kwargs)


def make_formation():
    return Formation(start=(0.0, 0.0), radius=(120.0, 100.0), pivot=(0.0, 0.0), speed=BASE_SPEED, angle=0.0)


def add_enemy(game, x, y, option):
    enemy = Enemy(x=x, y=y, formation=make_formation(), option=option)
    game.enemies.append(enemy)
    game.enemy_count += 1
    return enemy


def player_laser(x, y):
    return Laser(x=x, y=y, size=SpriteSize(9.0, 54.0), from_player=True, velocity=Velocity(0.0, 1.0))


def test_spawn_player_sits_five_pixels_above_bottom():
    game = make_game()
    player = game.spawn_player(0.0)
    assert player.x == 0.0
    bottom_edge = player.y - PLAYER_SIZE[1] * SPRITE_SCALE / 2.0
    assert bottom_edge == pytest.approx(-WIN.h / 2.0 + 5.0)
    assert game.player_state.on is True


def test_spawn_player_waits_for_respawn_delay():
    game = make_game()
    game.spawn_player(0.0)
    assert game.spawn_player(0.5) is None
    game.player_state.shot(1.0)
    assert game.spawn_player(2.0) is None
    assert game.spawn_player(3.5) is not None
    assert game.player_state.last_shot == -1.0


@pytest.mark.parametrize("left,right,expected", [(True, False, -1.0), (False, True, 1.0), (True, True, -1.0), (False, False, 0.0)])
def test_steer(left, right, expected):
    game = make_game()
    game.spawn_player(0.0)
    game.steer(left, right)
    assert game.player.velocity.x == expected


def test_fire_spawns_symmetric_pair():
    game = make_game()
    assert game.fire() == []
    game.spawn_player(0.0)
    shots = game.fire()
    assert len(shots) == 2
    assert shots[0].x + shots[1].x == pytest.approx(2 * game.player.x)
    assert all(s.from_player and s.velocity.y == 1.0 for s in shots)
    assert game.lasers == shots


def test_spawn_enemy_respects_max():
    game = make_game()
    spawned = [game.spawn_enemy() for _ in range(5)]
    assert sum(e is not None for e in spawned) == 3
    assert game.enemy_count == len(game.enemies) == 3
    assert (game.enemies[0].x, game.enemies[0].y) == game.enemies[0].formation.start


def test_enemy_fire_one_laser_per_enemy():
    game = make_game()
    game.spawn_enemy()
    game.spawn_enemy()
    shots = game.enemy_fire()
    assert len(shots) == 2
    assert all(not s.from_player and s.velocity.y == -1.0 for s in shots)
    assert shots[0].y == pytest.approx(game.enemies[0].y - 15.0)


def test_assign_options_draws_from_question_options():
    game = make_game()
    for _ in range(3):
        game.spawn_enemy()
    question = game.assign_options()
    assert game.panel_text == question.question
    assert all(e.option in question.options for e in game.enemies)


def test_assign_options_forces_answer_every_fifth():
    game = make_game(max_enemy_count=4)
    for _ in range(4):
        game.spawn_enemy()
    game.assign_options()
    assert [e.option for e in game.enemies] == ["e"] * 4


def test_assign_options_without_questions():
    game = Game(WIN, Exercise(), random.Random(1))
    game.spawn_enemy()
    assert game.assign_options() is None
    assert game.enemies[0].option is None


def test_move_entities_moves_and_despawns_lasers():
    game = make_game()
    near = player_laser(0.0, 0.0)
    far = player_laser(0.0, WIN.h / 2.0 + 199.0)
    game.lasers.extend([near, far])
    game.move_entities(0.01)
    assert near.y == pytest.approx(0.01 * BASE_SPEED)
    assert game.lasers == [near]


def test_move_enemies_follows_formation():
    game = make_game()
    enemy = add_enemy(game, 300.0, 200.0, None)
    reference = copy.copy(enemy.formation)
    expected = reference.step(300.0, 200.0, 0.1)
    game.move_enemies(0.1)
    assert (enemy.x, enemy.y) == pytest.approx(expected)


def test_correct_hit_clears_all_enemies_and_advances():
    game = make_game(max_enemy_count=5)
    add_enemy(game, 0.0, 0.0, "e")
    add_enemy(game, 500.0, 0.0, "a")
    game.lasers.append(player_laser(0.0, 0.0))
    results = game.player_laser_hits()
    assert results == [("e", True)]
    assert game.enemies == [] and game.enemy_count == 0
    assert game.lasers == []
    assert game.max_enemy_count == 2
    assert game.exercise.current_index == 1
    assert len(game.explosions) == 1


def test_wrong_hit_removes_one_enemy_and_raises_max():
    game = make_game()
    add_enemy(game, 0.0, 0.0, "a")
    other = add_enemy(game, 500.0, 0.0, "b")
    game.lasers.append(player_laser(0.0, 0.0))
    assert game.player_laser_hits() == [("a", False)]
    assert game.enemies == [other]
    assert game.max_enemy_count == 4
    assert game.exercise.current_index == 0


def test_wrong_hit_max_is_capped():
    game = make_game(max_enemy_count=MAX_ENEMY)
    add_enemy(game, 0.0, 0.0, "a")
    game.lasers.append(player_laser(0.0, 0.0))
    game.player_laser_hits()
    assert game.max_enemy_count == MAX_ENEMY


def test_unlabelled_enemy_is_not_hit():
    game = make_game()
    add_enemy(game, 0.0, 0.0, None)
    game.lasers.append(player_laser(0.0, 0.0))
    assert game.player_laser_hits() == []
    assert len(game.enemies) == 1 and len(game.lasers) == 1


def test_enemy_laser_kills_player():
    game = make_game()
    player = game.spawn_player(0.0)
    game.lasers.append(Laser(x=player.x, y=player.y, size=SpriteSize(17.0, 55.0), from_player=False))
    assert game.enemy_laser_hits(4.0) is True
    assert game.player is None
    assert game.player_state.on is False and game.player_state.last_shot == 4.0
    assert game.lasers == []
    assert game.enemy_laser_hits(5.0) is False


def test_explosion_runs_through_all_frames():
    game = make_game()
    game._explode(0.0, 0.0)
    for _ in range(EXPLOSION_LEN - 1):
        game.update_explosions(0.06)
    assert game.explosions[0].index == EXPLOSION_LEN - 1
    game.update_explosions(0.06)
    assert game.explosions == []


def test_update_spawns_player_and_enemies_on_timers():
    game = make_game()
    game.update(0.4, 0.4)
    assert game.player is None
    game.update(0.2, 0.6)
    assert game.player is not None
    game.update(0.5, 1.1)
    assert game.enemy_count == 1