import pytest

from stonecheck.core import DOWN, LEFT, RIGHT, UP, Checker, Player, PlayerId, Stone, Vec2


def test_vec_add_and_sub():
    assert Vec2(2, 2) + Vec2(-1, 1) == Vec2(1, 3)
    assert Vec2(2, 2) - Vec2(-1, 1) == Vec2(3, 1)


def test_vec_direction_helpers():
    v = Vec2(2, 2)
    assert v.up() == v + UP == Vec2(2, 1)
    assert v.down() == v + DOWN == Vec2(2, 3)
    assert v.left() == v + LEFT == Vec2(1, 2)
    assert v.right() == v + RIGHT == Vec2(3, 2)


def test_vec_scaling():
    assert Vec2(1, -1) * 2 == Vec2(2, -2)
    assert 2 * Vec2(0, 1) == Vec2(0, 2)


def test_checker_height_tracks_owner():
    assert Checker.empty().is_empty
    assert Checker(PlayerId.A, 3).height == 3
    with pytest.raises(ValueError):
        Checker(PlayerId.A, 0)
    with pytest.raises(ValueError):
        Checker(PlayerId.EMPTY, 1)
    with pytest.raises(ValueError):
        Checker(PlayerId.B, 4)


def test_opponent_of_empty_player_raises():
    assert PlayerId.A.opponent == PlayerId.B
    assert PlayerId.B.opponent == PlayerId.A
    with pytest.raises(ValueError):
        PlayerId.EMPTY.opponent


def test_player_stone_inventory_saturates():
    player = Player(PlayerId.B, max_stones=1)
    assert player.take_stone() == Stone(PlayerId.B)
    assert player.stones_remaining == 0
    assert player.take_stone() is None
    assert player.stones_remaining == 0
    player.reset()
    assert player.stones_remaining == 1
