from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Deque, Dict, Optional

import numpy as np

from .board import Board, FireOutcome
from .config import GameConfig
from .errors import BoardError, IllegalMoveError, NoAttackersError
from .moves import FireChecker, Move, MoveCandidates, MoveChecker, PlaceStone, SlideStone
from .state import CARDINAL_DIRECTIONS, PLAYERS, GameResult, Player, PlayerId, Stone, Vec2, WinReason

if TYPE_CHECKING:
    from stonecheck.choosers import MoveChooser

logger = logging.getLogger(__name__)

HISTORY_DEPTH = 2


@dataclass(frozen=True)
class MoveRecord:
    """An applied move; slides also keep the node the stone actually stopped on."""

    move: Move
    landing: Optional[Vec2] = None

    def returns_from(self, earlier: "MoveRecord") -> bool:
        """True when this slide carries the stone of ``earlier`` back to where it started."""
        if not (isinstance(self.move, SlideStone) and isinstance(earlier.move, SlideStone)):
            return False
        return self.move.from_node == earlier.landing and self.landing == earlier.move.from_node


class Game:
    """Turn sequencing, legal-move generation and win detection for one board.

    Player A moves first. The game stays ``ONGOING`` until one of the three
    win checks fires inside :meth:`check_winner`; only :meth:`reset` brings it
    back.
    """

    def __init__(
        self,
        chooser_a: Optional["MoveChooser"] = None,
        chooser_b: Optional["MoveChooser"] = None,
        config: Optional[GameConfig] = None,
        *,
        board: Optional[Board] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config or GameConfig()
        if board is None:
            board = Board(self.config.width, self.config.height, seed=self.config.seed, rng=rng)
        elif rng is not None:
            raise ValueError("Pass either a board or a generator for it, not both.")
        elif (board.width, board.height) != (self.config.width, self.config.height):
            raise ValueError(
                f"Board is {board.width}x{board.height} but the config asks for "
                f"{self.config.width}x{self.config.height}."
            )
        self.board = board
        self.choosers: Dict[PlayerId, Optional["MoveChooser"]] = {PlayerId.A: chooser_a, PlayerId.B: chooser_b}
        self.players: Dict[PlayerId, Player] = {pid: Player(pid, self.config.starting_stones) for pid in PLAYERS}
        # most recent move first
        self.history: Dict[PlayerId, Deque[MoveRecord]] = {pid: deque(maxlen=HISTORY_DEPTH) for pid in PLAYERS}
        self.last_mover: Optional[PlayerId] = None
        self.result = GameResult.ONGOING
        self.win_reason: Optional[WinReason] = None
        self.current_player = PlayerId.A
        self.turn_count = 0
        self.consecutive_passes = 0

    @property
    def is_over(self) -> bool:
        return self.result != GameResult.ONGOING

    @property
    def winner(self) -> Optional[PlayerId]:
        return self.result.winner

    def reset(self) -> None:
        self.board.reset()
        for player in self.players.values():
            player.reset()
        for recent in self.history.values():
            recent.clear()
        self.last_mover = None
        self.result = GameResult.ONGOING
        self.win_reason = None
        self.current_player = PlayerId.A
        self.turn_count = 0
        self.consecutive_passes = 0

    # ------------------------------------------------------------------
    # Move generation and application
    # ------------------------------------------------------------------
    def legal_moves(self, player: PlayerId) -> MoveCandidates:
        if player not in PLAYERS:
            raise ValueError(f"{player!r} does not take turns.")
        board = self.board
        candidates = MoveCandidates(player)

        for cell in board.checkers_for_player(player):
            for neighbour in board.cells_around_cell(cell):
                if board.checker_at(neighbour).is_empty:
                    candidates.checker_moves.append(MoveChecker(cell, neighbour))

        for cell in board.checkers_for_player(player.opponent):
            try:
                board.can_fire_checker_at(cell)
            except NoAttackersError:
                continue
            candidates.checker_fires.append(FireChecker(cell))

        if self.players[player].stones_remaining > 0:
            for node in board.stones_for_player(PlayerId.EMPTY):
                if not board.touches_checker(node):
                    candidates.stone_placements.append(PlaceStone(node))

        for node in board.stones_for_player(player):
            for direction in CARDINAL_DIRECTIONS:
                step = node + direction
                if board.node_in_bounds(step) and board.stone_at(step).is_empty:
                    candidates.stone_slides.append(SlideStone(node, direction))

        return candidates

    def apply_move(self, player: PlayerId, move: Move) -> Optional[FireOutcome]:
        if self.is_over:
            raise IllegalMoveError("The game is already decided.")
        if player not in PLAYERS:
            raise ValueError(f"{player!r} does not take turns.")

        outcome: Optional[FireOutcome] = None
        landing: Optional[Vec2] = None
        try:
            if isinstance(move, MoveChecker):
                self.board.move_checker(move.from_cell, move.to_cell)
            elif isinstance(move, FireChecker):
                outcome = self.board.fire_checker_at(move.target)
            elif isinstance(move, PlaceStone):
                self.board.place_stone_at(move.target, Stone(player))
                self.players[player].take_stone()
            elif isinstance(move, SlideStone):
                landing = self.board.slide_stone(move.from_node, move.direction)
            else:
                raise TypeError(f"Not a move: {move!r}")
        except BoardError as exc:
            raise IllegalMoveError(f"Player {player.name} cannot apply {move}: {exc}") from exc

        self.history[player].appendleft(MoveRecord(move, landing))
        self.last_mover = player
        logger.debug("turn %d: player %s applied %s", self.turn_count, player.name, move)
        return outcome

    # ------------------------------------------------------------------
    # Win detection
    # ------------------------------------------------------------------
    def check_winner(self) -> Optional[PlayerId]:
        if self.is_over:
            return self.winner
        checks = (
            (WinReason.BREAKTHROUGH, self.breakthrough_winner),
            (WinReason.CIRCULARITY, self.circularity_winner),
            (WinReason.CONNECTION, self.connection_winner),
        )
        for reason, evaluate in checks:
            winner = evaluate()
            if winner is not None:
                self.result = GameResult.for_winner(winner)
                self.win_reason = reason
                logger.info("player %s wins by %s after %d turns", winner.name, reason.value, self.turn_count)
                return winner
        return None

    def breakthrough_winner(self) -> Optional[PlayerId]:
        """A checker standing on the opponent's home column wins for its owner."""
        for player in PLAYERS:
            column = self.board.home_column(player.opponent)
            if np.any(self.board.owners[:, column] == int(player)):
                return player
        return None

    def circularity_winner(self) -> Optional[PlayerId]:
        """Two slides that bring a stone back to where it started forfeit to the opponent.

        Only the player who applied the latest move is judged, against the
        landings recorded when the slides were applied. The board is left as
        it is; the round trip is not undone.
        """
        player = self.last_mover
        if player is None:
            return None
        recent = self.history[player]
        if len(recent) == HISTORY_DEPTH and recent[0].returns_from(recent[1]):
            return player.opponent
        return None

    def connection_winner(self) -> Optional[PlayerId]:
        for player in PLAYERS:
            if self._stones_connect(player):
                return player
        return None

    def _stones_connect(self, player: PlayerId) -> bool:
        """Flood fill from the player's stones on row 0 towards the far row."""
        board = self.board
        frontier = [node for node in board.stones_for_player(player) if node.y == 0]
        seen = set(frontier)
        while frontier:
            node = frontier.pop()
            if node.y == board.height:
                return True
            for neighbour in board.nodes_around_node(node):
                if neighbour not in seen and board.stone_at(neighbour).owner == player:
                    seen.add(neighbour)
                    frontier.append(neighbour)
        return False

    # ------------------------------------------------------------------
    # Turn loop
    # ------------------------------------------------------------------
    def play_move(self, move: Move) -> Optional[PlayerId]:
        """Apply ``move`` for the current player and hand the turn over."""
        player = self.current_player
        self.apply_move(player, move)
        self.consecutive_passes = 0
        return self._end_turn(player)

    def pass_turn(self) -> Optional[PlayerId]:
        player = self.current_player
        if self.is_over:
            raise IllegalMoveError("The game is already decided.")
        self.consecutive_passes += 1
        logger.debug("turn %d: player %s has no legal moves and passes", self.turn_count, player.name)
        return self._end_turn(player)

    def _end_turn(self, player: PlayerId) -> Optional[PlayerId]:
        self.turn_count += 1
        winner = self.check_winner()
        if winner is None:
            self.current_player = player.opponent
        return winner

    def take_turn(self) -> Optional[PlayerId]:
        """Let the current player move once; returns the winner if this decided the game."""
        if self.is_over:
            return self.winner
        player = self.current_player
        candidates = self.legal_moves(player)
        if candidates.is_empty:
            return self.pass_turn()
        chooser = self.choosers[player]
        if chooser is None:
            raise RuntimeError(f"No move chooser attached for player {player.name}.")
        return self.play_move(chooser.choose(candidates))

    @property
    def stalled(self) -> bool:
        return self.consecutive_passes >= len(PLAYERS)

    def play(self, max_turns: Optional[int] = None) -> Optional[PlayerId]:
        limit = max_turns if max_turns is not None else self.config.max_turns
        while not self.is_over:
            if limit is not None and self.turn_count >= limit:
                logger.info("stopping undecided game at the %d turn limit", limit)
                return None
            if self.stalled:
                logger.info("stopping undecided game: neither player can move")
                return None
            self.take_turn()
        return self.winner
