import math

import pytest

from campfire_survival.simulation import Player

WIDTH, HEIGHT = 800, 600
CAP, NORM, MARGIN = 0.6, 60.0, 12.0


def move(player, direction, dt):
    player.apply_movement(direction, dt, WIDTH, HEIGHT, CAP, NORM, MARGIN)


def test_new_player_has_full_stats_and_empty_inventory():
    player = Player(x=400, y=300)
    assert (player.health, player.hunger, player.thirst) == (100, 100, 100)
    assert (player.wood, player.stone) == (0, 0)
    assert not player.is_incapacitated


@pytest.mark.parametrize(
    "hunger, expected",
    [(100, 3.6 * 1.6), (60, 3.6 * 1.6), (30, 3.6 * 1.3), (0, 3.6)],
)
def test_hunger_speeds_up_the_player(hunger, expected):
    player = Player(x=400, y=300, hunger=hunger)
    assert player.effective_speed(CAP) == pytest.approx(expected)


def test_straight_movement_distance():
    player = Player(x=400, y=300, hunger=0)
    move(player, (1, 0), 0.02)
    assert player.x == pytest.approx(400 + 3.6 * 0.02 * 60)
    assert player.y == 300


def test_diagonal_movement_is_normalized():
    player = Player(x=400, y=300, hunger=0)
    move(player, (1, 1), 0.02)
    step = 3.6 * 0.02 * 60
    assert player.x - 400 == pytest.approx(step / math.sqrt(2))
    assert player.y - 300 == pytest.approx(step / math.sqrt(2))
    assert math.hypot(player.x - 400, player.y - 300) == pytest.approx(step)


def test_zero_direction_does_not_move():
    player = Player(x=400, y=300)
    move(player, (0, 0), 0.05)
    assert (player.x, player.y) == (400, 300)


def test_position_is_clamped_to_edge_margin():
    player = Player(x=15, y=590)
    move(player, (-1, 1), 0.06)
    assert player.x == MARGIN
    assert player.y == HEIGHT - MARGIN


def test_no_momentum_between_moves():
    player = Player(x=400, y=300)
    move(player, (1, 0), 0.02)
    x = player.x
    move(player, (0, 0), 0.02)
    assert player.x == x
