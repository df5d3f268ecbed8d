import pytest

from stonecheck.core import (
    Board,
    Checker,
    NoAttackersError,
    OutOfBoundsError,
    PlayerId,
    Stone,
    Vec2,
)

TARGET = Vec2(4, 3)


class FixedDice:
    """Stands in for the board's generator and hands out predetermined rolls."""

    def __init__(self, rolls):
        self.rolls = list(rolls)
        self.calls = []

    def integers(self, low, high):
        self.calls.append((low, high))
        return self.rolls.pop(0)


def skirmish_board(*, rng=None, seed=None, stones=(), target_height=3) -> Board:
    board = Board(rng=rng, seed=seed)
    board.owners[:, :] = 0
    board.heights[:, :] = 0
    board.stones[:, :] = 0
    for node in stones:
        board.place_stone_at(node, Stone(PlayerId.A))
    board.place_checker_at(TARGET, Checker(PlayerId.A, target_height))
    # three attackers: one step left, two steps up, two steps diagonally
    board.place_checker_at(Vec2(3, 3), Checker(PlayerId.B, 1))
    board.place_checker_at(Vec2(4, 1), Checker(PlayerId.B, 2))
    board.place_checker_at(Vec2(6, 5), Checker(PlayerId.B, 3))
    # neither a friendly checker nor an enemy out of reach counts
    board.place_checker_at(Vec2(5, 3), Checker(PlayerId.A, 1))
    board.place_checker_at(Vec2(4, 0), Checker(PlayerId.B, 1))
    board.place_checker_at(Vec2(5, 1), Checker(PlayerId.B, 1))
    return board


def test_attackers_counted_along_eight_directions_within_two_steps():
    board = skirmish_board(seed=0)
    assert board.can_fire_checker_at(TARGET) == 3
    assert set(board.attackers_of(TARGET)) == {Vec2(3, 3), Vec2(4, 1), Vec2(6, 5)}


def test_fire_without_terrain_bonus_always_hits():
    board = skirmish_board(seed=11)
    outcome = board.fire_checker_at(TARGET)

    assert outcome.attackers == 3
    assert outcome.terrain_bonus == 0
    assert outcome.damage == 3
    assert len(outcome.rolls) == 3
    assert outcome.checker.is_empty
    assert board.checker_at(TARGET).is_empty


def test_rolls_below_terrain_bonus_are_absorbed():
    dice = FixedDice([1, 3, 4])
    stones = (Vec2(4, 3), Vec2(5, 3), Vec2(4, 4), Vec2(5, 4))
    board = skirmish_board(rng=dice, stones=stones)

    outcome = board.fire_checker_at(TARGET)

    assert outcome.terrain_bonus == 4
    assert outcome.rolls == (1, 3, 4)
    assert outcome.damage == 1
    assert board.checker_at(TARGET) == Checker(PlayerId.A, 2)
    assert dice.calls == [(1, 7)] * 3


def test_roll_equal_to_terrain_bonus_still_hits():
    dice = FixedDice([1, 2, 6])
    board = skirmish_board(rng=dice, stones=(Vec2(4, 3), Vec2(5, 4)))

    outcome = board.fire_checker_at(TARGET)

    assert outcome.terrain_bonus == 2
    assert outcome.damage == 2
    assert board.checker_at(TARGET) == Checker(PlayerId.A, 1)


def test_no_attackers_leaves_board_untouched():
    dice = FixedDice([6])
    board = Board(rng=dice)
    before = board.as_string()
    with pytest.raises(NoAttackersError):
        board.fire_checker_at(Vec2(7, 2))
    assert board.as_string() == before
    assert dice.calls == []


def test_can_fire_does_not_roll_or_mutate():
    dice = FixedDice([6, 6, 6])
    board = skirmish_board(rng=dice)
    before = board.as_string()
    assert board.can_fire_checker_at(TARGET) == 3
    assert board.as_string() == before
    assert dice.calls == []


def test_fire_out_of_range():
    board = Board()
    with pytest.raises(OutOfBoundsError):
        board.fire_checker_at(Vec2(8, 0))
    with pytest.raises(OutOfBoundsError):
        board.can_fire_checker_at(Vec2(0, -1))


@pytest.mark.parametrize("seed", range(20))
def test_fire_damage_is_bounded_and_floored(seed):
    board = skirmish_board(seed=seed, stones=(Vec2(4, 3), Vec2(5, 4)), target_height=2)
    outcome = board.fire_checker_at(TARGET)

    assert all(1 <= roll <= 6 for roll in outcome.rolls)
    assert outcome.damage == sum(1 for roll in outcome.rolls if roll >= 2)
    assert 0 <= outcome.damage <= outcome.attackers
    expected_height = max(0, 2 - outcome.damage)
    assert board.checker_at(TARGET).height == expected_height
    if expected_height == 0:
        assert board.checker_at(TARGET).owner == PlayerId.EMPTY
    else:
        assert board.checker_at(TARGET).owner == PlayerId.A


def test_seeded_boards_replay_identically():
    first = skirmish_board(seed=42, stones=(Vec2(4, 3), Vec2(5, 3), Vec2(4, 4)))
    second = skirmish_board(seed=42, stones=(Vec2(4, 3), Vec2(5, 3), Vec2(4, 4)))
    assert first.fire_checker_at(TARGET) == second.fire_checker_at(TARGET)
