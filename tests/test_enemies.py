import pytest

from solong.enemies import (
    BALL_PERIOD,
    COIN_FRAME_COUNT,
    COIN_PERIOD,
    DOOR_FRAME_COUNT,
    DOOR_PERIOD,
    MAX_ENEMIES,
    Enemy,
    FrameCounter,
    find_enemies,
)

GRID = ["111111", "1P00X1", "111111"]


def test_find_enemies_positions():
    enemies = find_enemies(GRID)
    assert enemies == [Enemy(x=4, y=1, ball_x=4, ball_y=1)]
    assert enemies[0].ball_dir == -1
    assert enemies[0].ball_timer == 0


def test_find_enemies_row_major_order():
    grid = ["1111", "1X01", "10X1", "1111"]
    assert [(e.x, e.y) for e in find_enemies(grid)] == [(1, 1), (2, 2)]


def test_find_enemies_limit():
    row = "1" + "X" * (MAX_ENEMIES + 1) + "1"
    with pytest.raises(ValueError):
        find_enemies(["1" * len(row), row, "1" * len(row)])


def test_ball_waits_for_period():
    enemy = find_enemies(GRID)[0]
    for _ in range(BALL_PERIOD - 1):
        assert enemy.step(GRID, (1, 1)) is False
    assert enemy.ball_x == enemy.x
    assert enemy.step(GRID, (1, 1)) is False
    assert enemy.ball_x == enemy.x - 1
    assert enemy.ball_timer == 0


def test_ball_hits_player():
    enemy = find_enemies(GRID)[0]
    results = [enemy.step(GRID, (1, 1)) for _ in range(BALL_PERIOD * 3)]
    assert results[-1] is True
    assert not any(results[:-1])
    assert (enemy.ball_x, enemy.ball_y) == (1, 1)


def test_ball_returns_after_wall():
    enemy = find_enemies(GRID)[0]
    away = (2, 5)
    for _ in range(BALL_PERIOD * 3):
        enemy.step(GRID, away)
    assert enemy.ball_x == 1
    for _ in range(BALL_PERIOD):
        assert enemy.step(GRID, away) is False
    assert enemy.ball_x == enemy.x
    assert enemy.ball_timer == 0


def test_frame_counter_advances_each_period():
    counter = FrameCounter(COIN_FRAME_COUNT, COIN_PERIOD)
    frames = [counter.tick() for _ in range(COIN_PERIOD)]
    assert frames[:-1] == [0] * (COIN_PERIOD - 1)
    assert frames[-1] == 1


def test_frame_counter_wraps():
    counter = FrameCounter(DOOR_FRAME_COUNT, DOOR_PERIOD)
    seen = {counter.tick() for _ in range(DOOR_FRAME_COUNT * DOOR_PERIOD)}
    assert seen == set(range(DOOR_FRAME_COUNT))
    assert counter.frame == 0