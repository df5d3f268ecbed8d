import numpy as np
import pytest

from stonecheck.choosers import MoveChooser, RandomChooser, ScriptedChooser
from stonecheck.core import Game, MoveCandidates, PlaceStone, PlayerId, Vec2


def test_random_chooser_picks_a_candidate():
    game = Game()
    candidates = game.legal_moves(PlayerId.A)
    chooser = RandomChooser(np.random.default_rng(0))
    for _ in range(10):
        assert chooser.choose(candidates) in candidates


def test_random_chooser_spawn_is_reproducible():
    candidates = Game().legal_moves(PlayerId.B)
    first = RandomChooser().spawn(7)
    second = RandomChooser().spawn(7)
    assert [first.choose(candidates) for _ in range(5)] == [second.choose(candidates) for _ in range(5)]


def test_random_chooser_without_candidates():
    with pytest.raises(ValueError):
        RandomChooser().choose(MoveCandidates(PlayerId.A))


def test_scripted_chooser_refuses_illegal_and_exhausted_scripts():
    candidates = Game().legal_moves(PlayerId.A)
    chooser = ScriptedChooser([PlaceStone(Vec2(4, 3)), PlaceStone(Vec2(7, 2))])

    assert chooser.choose(candidates) == PlaceStone(Vec2(4, 3))
    with pytest.raises(ValueError):
        chooser.choose(candidates)
    with pytest.raises(ValueError):
        chooser.choose(candidates)


def test_base_chooser_is_abstract():
    with pytest.raises(NotImplementedError):
        MoveChooser().choose(MoveCandidates(PlayerId.A))
