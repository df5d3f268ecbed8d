import pytest

from stonecheck.core import (
    RIGHT,
    FireChecker,
    Game,
    GameConfig,
    MoveChecker,
    MoveCodec,
    PlaceStone,
    PlayerId,
    SlideStone,
    Vec2,
)


def test_codec_layout_for_default_board():
    codec = MoveCodec(8, 6)
    assert codec.size == 48 * 8 + 48 + 63 + 63 * 4
    assert codec.encode(MoveChecker(Vec2(0, 0), Vec2(0, -1))) == 0
    assert codec.encode(FireChecker(Vec2(0, 0))) == 384
    assert codec.encode(PlaceStone(Vec2(8, 6))) == 384 + 48 + 62
    assert codec.decode(codec.size - 1) == SlideStone(Vec2(8, 6), RIGHT)


def test_codec_round_trips_opening_moves():
    config = GameConfig(width=6, height=5)
    game = Game(config=config)
    codec = MoveCodec(config.width, config.height)
    moves = game.legal_moves(PlayerId.A).all() + game.legal_moves(PlayerId.B).checker_moves

    indices = [codec.encode(move) for move in moves]
    assert len(set(indices)) == len(moves)
    assert [codec.decode(index) for index in indices] == moves


def test_codec_rejects_bad_input():
    codec = MoveCodec(8, 6)
    with pytest.raises(ValueError):
        codec.decode(codec.size)
    with pytest.raises(ValueError):
        codec.encode(MoveChecker(Vec2(0, 0), Vec2(2, 0)))
    with pytest.raises(ValueError):
        codec.encode(SlideStone(Vec2(0, 0), Vec2(1, 1)))
    with pytest.raises(ValueError):
        codec.encode(FireChecker(Vec2(8, 0)))
    with pytest.raises(TypeError):
        codec.encode("not a move")
