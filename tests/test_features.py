import numpy as np

from stonecheck.core import Game, PlaceStone, PlayerId, Vec2
from stonecheck.features import build_aux_vector, build_checker_planes, build_stone_planes, game_to_numpy


def test_checker_planes_initial_board():
    game = Game()
    planes = build_checker_planes(game.board, PlayerId.A)

    assert planes.shape == (2, 6, 8)
    # heights 1+1+2+2+3+3 per side, scaled by the maximum height
    assert np.isclose(planes[0].sum(), 4.0)
    assert np.isclose(planes[1].sum(), 4.0)
    assert planes[0, 2, 7] == 1.0
    assert planes[1, 2, 7] == 0.0


def test_planes_swap_with_perspective():
    game = Game()
    game.apply_move(PlayerId.B, PlaceStone(Vec2(4, 3)))

    from_a = build_stone_planes(game.board, PlayerId.A)
    from_b = build_stone_planes(game.board, PlayerId.B)
    assert from_a[1, 3, 4] == 1.0
    assert from_b[0, 3, 4] == 1.0
    assert np.array_equal(
        build_checker_planes(game.board, PlayerId.A)[0],
        build_checker_planes(game.board, PlayerId.B)[1],
    )


def test_aux_vector_reports_turn_and_inventory():
    game = Game()
    game.apply_move(PlayerId.A, PlaceStone(Vec2(4, 3)))
    aux = build_aux_vector(game, PlayerId.A)

    assert aux[0] == 1.0
    assert aux[1] == 0.0
    assert np.isclose(aux[2], 31 / 32)
    assert aux[3] == 1.0
    assert set(game_to_numpy(game)) == {"checkers", "stones", "aux"}
