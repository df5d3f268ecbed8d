from __future__ import annotations

import logging
from copy import deepcopy
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .config import DEFAULT_HEIGHT, DEFAULT_WIDTH, MIN_BOARD_DIM
from .errors import (
    BlockedError,
    NegationError,
    NoAttackersError,
    OccupiedError,
    OutOfBoundsError,
)
from .state import ALL_DIRECTIONS, CARDINAL_DIRECTIONS, Checker, PlayerId, Stone, Vec2

logger = logging.getLogger(__name__)

GridArray = NDArray[np.int8]

DIE_FACES = 6
FIRE_REACH: Tuple[int, ...] = (1, 2)

EMPTY_CELL_GLYPH = "."
CHECKER_GLYPHS = {PlayerId.A: " ░▒▓", PlayerId.B: " ▁▃▇"}
STONE_GLYPHS = {PlayerId.EMPTY: "+", PlayerId.A: "a", PlayerId.B: "b"}

# (columns in from the home edge, row offset from the middle row, height)
_START_CLUSTER: Tuple[Tuple[int, int, int], ...] = (
    (1, -1, 1),
    (1, 0, 1),
    (0, -2, 2),
    (0, 1, 2),
    (0, -1, 3),
    (0, 0, 3),
)


def starting_layout(width: int, height: int) -> List[Tuple[Vec2, Checker]]:
    """Mirrored starting clusters: player A on the right edge, player B on the left."""
    middle = height // 2
    pieces: List[Tuple[Vec2, Checker]] = []
    for depth, row_offset, stack in _START_CLUSTER:
        y = middle + row_offset
        pieces.append((Vec2(width - 1 - depth, y), Checker(PlayerId.A, stack)))
        pieces.append((Vec2(depth, y), Checker(PlayerId.B, stack)))
    return pieces


@dataclass(frozen=True)
class FireOutcome:
    target: Vec2
    attackers: int
    terrain_bonus: int
    rolls: Tuple[int, ...]
    damage: int
    checker: Checker


class Board:
    """Cell grid of checkers plus the intersection grid of stones around it.

    Grids are numpy arrays indexed ``[y, x]``: ``owners`` and ``heights`` have
    shape ``(height, width)``, ``stones`` has shape ``(height + 1, width + 1)``.
    They are exposed for feature extraction and must only be mutated through
    the methods below.
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        *,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        if width < MIN_BOARD_DIM or height < MIN_BOARD_DIM:
            raise ValueError(f"Board must be at least {MIN_BOARD_DIM}x{MIN_BOARD_DIM}.")
        self.width = width
        self.height = height
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self.owners: GridArray = np.zeros((height, width), dtype=np.int8)
        self.heights: GridArray = np.zeros((height, width), dtype=np.int8)
        self.stones: GridArray = np.zeros((height + 1, width + 1), dtype=np.int8)
        self._place_start_pieces()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def reset(self) -> None:
        self._clear()
        self._place_start_pieces()

    def reseed(self, seed: Optional[int]) -> None:
        self._rng = np.random.default_rng(seed)

    def copy(self) -> "Board":
        clone = Board(self.width, self.height, rng=deepcopy(self._rng))
        clone.owners = self.owners.copy()
        clone.heights = self.heights.copy()
        clone.stones = self.stones.copy()
        return clone

    def _clear(self) -> None:
        self.owners.fill(0)
        self.heights.fill(0)
        self.stones.fill(0)

    def _place_start_pieces(self) -> None:
        for pos, checker in starting_layout(self.width, self.height):
            self.place_checker_at(pos, checker)

    # ------------------------------------------------------------------
    # Coordinates
    # ------------------------------------------------------------------
    def cell_in_bounds(self, pos: Vec2) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def node_in_bounds(self, pos: Vec2) -> bool:
        return 0 <= pos.x <= self.width and 0 <= pos.y <= self.height

    def checker_index(self, pos: Vec2) -> int:
        self._require_cell(pos)
        return pos.y * self.width + pos.x

    def stone_index(self, pos: Vec2) -> int:
        self._require_node(pos)
        return pos.y * (self.width + 1) + pos.x

    def checker_coord(self, index: int) -> Vec2:
        if not 0 <= index < self.width * self.height:
            raise OutOfBoundsError(f"Cell index {index} out of range.")
        return Vec2(index % self.width, index // self.width)

    def stone_coord(self, index: int) -> Vec2:
        if not 0 <= index < (self.width + 1) * (self.height + 1):
            raise OutOfBoundsError(f"Node index {index} out of range.")
        return Vec2(index % (self.width + 1), index // (self.width + 1))

    def home_column(self, player: PlayerId) -> int:
        if player == PlayerId.A:
            return self.width - 1
        if player == PlayerId.B:
            return 0
        raise ValueError("The empty player has no home column.")

    def _require_cell(self, pos: Vec2) -> None:
        if not self.cell_in_bounds(pos):
            raise OutOfBoundsError(f"Cell {pos.as_tuple()} outside the {self.width}x{self.height} cell grid.")

    def _require_node(self, pos: Vec2) -> None:
        if not self.node_in_bounds(pos):
            raise OutOfBoundsError(
                f"Node {pos.as_tuple()} outside the {self.width + 1}x{self.height + 1} intersection grid."
            )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def checker_at(self, pos: Vec2) -> Checker:
        self._require_cell(pos)
        return Checker(PlayerId(int(self.owners[pos.y, pos.x])), int(self.heights[pos.y, pos.x]))

    def stone_at(self, pos: Vec2) -> Stone:
        self._require_node(pos)
        return Stone(PlayerId(int(self.stones[pos.y, pos.x])))

    def checkers_for_player(self, player: PlayerId) -> List[Vec2]:
        return [Vec2(int(x), int(y)) for y, x in np.argwhere(self.owners == int(player))]

    def stones_for_player(self, player: PlayerId) -> List[Vec2]:
        return [Vec2(int(x), int(y)) for y, x in np.argwhere(self.stones == int(player))]

    def cells_around_node(self, pos: Vec2) -> List[Vec2]:
        candidates = (
            Vec2(pos.x - 1, pos.y - 1),
            Vec2(pos.x, pos.y - 1),
            Vec2(pos.x - 1, pos.y),
            pos,
        )
        return [cell for cell in candidates if self.cell_in_bounds(cell)]

    def nodes_around_cell(self, pos: Vec2) -> List[Vec2]:
        candidates = (
            pos,
            Vec2(pos.x + 1, pos.y),
            Vec2(pos.x, pos.y + 1),
            Vec2(pos.x + 1, pos.y + 1),
        )
        return [node for node in candidates if self.node_in_bounds(node)]

    def cells_around_cell(self, pos: Vec2) -> List[Vec2]:
        return [pos + direction for direction in ALL_DIRECTIONS if self.cell_in_bounds(pos + direction)]

    def nodes_around_node(self, pos: Vec2) -> List[Vec2]:
        return [pos + direction for direction in CARDINAL_DIRECTIONS if self.node_in_bounds(pos + direction)]

    def touches_checker(self, node: Vec2) -> bool:
        """True when any cell bordering ``node`` holds a checker."""
        return any(self.owners[cell.y, cell.x] != PlayerId.EMPTY for cell in self.cells_around_node(node))

    def _node_free(self, pos: Vec2) -> bool:
        return self.node_in_bounds(pos) and self.stones[pos.y, pos.x] == PlayerId.EMPTY

    # ------------------------------------------------------------------
    # Placement and movement
    # ------------------------------------------------------------------
    def place_checker_at(self, pos: Vec2, checker: Checker) -> None:
        self._require_cell(pos)
        if not checker.is_empty and self.owners[pos.y, pos.x] != PlayerId.EMPTY:
            raise OccupiedError(f"Cell {pos.as_tuple()} already holds a checker.")
        self._write_checker(pos, checker)

    def place_stone_at(self, pos: Vec2, stone: Stone) -> None:
        self._require_node(pos)
        if self.stones[pos.y, pos.x] != PlayerId.EMPTY:
            raise OccupiedError(f"Node {pos.as_tuple()} already holds a stone.")
        if self.touches_checker(pos):
            raise NegationError(f"Node {pos.as_tuple()} borders an occupied cell.")
        self.stones[pos.y, pos.x] = int(stone.owner)

    def move_checker(self, from_cell: Vec2, to_cell: Vec2) -> None:
        self._require_cell(from_cell)
        self._require_cell(to_cell)
        if self.owners[to_cell.y, to_cell.x] != PlayerId.EMPTY:
            raise OccupiedError(f"Cell {to_cell.as_tuple()} already holds a checker.")
        moving = self.checker_at(from_cell)
        self._write_checker(from_cell, self.checker_at(to_cell))
        self._write_checker(to_cell, moving)

    def slide_stone_result(self, from_node: Vec2, direction: Vec2) -> Vec2:
        """Landing node of a slide from ``from_node``, without moving anything."""
        self._require_node(from_node)
        if direction not in CARDINAL_DIRECTIONS:
            raise ValueError(f"Stones slide along the four cardinal directions, not {direction.as_tuple()}.")
        landing = from_node + direction
        if not self._node_free(landing):
            raise BlockedError(f"Stone at {from_node.as_tuple()} cannot slide {direction.as_tuple()}.")
        while self._node_free(landing + direction):
            landing = landing + direction
        return landing

    def slide_stone(self, from_node: Vec2, direction: Vec2) -> Vec2:
        landing = self.slide_stone_result(from_node, direction)
        origin_value = self.stones[from_node.y, from_node.x]
        self.stones[from_node.y, from_node.x] = self.stones[landing.y, landing.x]
        self.stones[landing.y, landing.x] = origin_value
        return landing

    def _write_checker(self, pos: Vec2, checker: Checker) -> None:
        self.owners[pos.y, pos.x] = int(checker.owner)
        self.heights[pos.y, pos.x] = checker.height

    # ------------------------------------------------------------------
    # Combat
    # ------------------------------------------------------------------
    def attackers_of(self, pos: Vec2) -> List[Vec2]:
        """Enemy checkers one or two steps away along the eight directions."""
        self._require_cell(pos)
        target_owner = self.owners[pos.y, pos.x]
        if target_owner == PlayerId.EMPTY:
            return []
        attackers: List[Vec2] = []
        for direction in ALL_DIRECTIONS:
            for reach in FIRE_REACH:
                cell = pos + direction * reach
                if not self.cell_in_bounds(cell):
                    continue
                owner = self.owners[cell.y, cell.x]
                if owner != PlayerId.EMPTY and owner != target_owner:
                    attackers.append(cell)
        return attackers

    def terrain_bonus(self, pos: Vec2) -> int:
        self._require_cell(pos)
        return sum(1 for node in self.nodes_around_cell(pos) if self.stones[node.y, node.x] != PlayerId.EMPTY)

    def can_fire_checker_at(self, pos: Vec2) -> int:
        attackers = self.attackers_of(pos)
        if not attackers:
            raise NoAttackersError(f"No checker can attack cell {pos.as_tuple()}.")
        return len(attackers)

    def fire_checker_at(self, pos: Vec2) -> FireOutcome:
        attackers = self.can_fire_checker_at(pos)
        bonus = self.terrain_bonus(pos)
        rolls = tuple(int(self._rng.integers(1, DIE_FACES + 1)) for _ in range(attackers))
        # rolls below the terrain bonus are absorbed by the surrounding stones
        damage = sum(1 for roll in rolls if roll >= bonus)

        target = self.checker_at(pos)
        remaining = max(0, target.height - damage)
        result = Checker(target.owner, remaining) if remaining else Checker.empty()
        self._write_checker(pos, result)

        logger.debug(
            "fire at %s: attackers=%d bonus=%d rolls=%s damage=%d height %d -> %d",
            pos.as_tuple(),
            attackers,
            bonus,
            rolls,
            damage,
            target.height,
            remaining,
        )
        return FireOutcome(pos, attackers, bonus, rolls, damage, result)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def as_string(self) -> str:
        lines: List[str] = []
        for y in range(self.height + 1):
            lines.append(" ".join(STONE_GLYPHS[PlayerId(int(value))] for value in self.stones[y]))
            if y < self.height:
                lines.append(" " + " ".join(self._checker_glyph(x, y) for x in range(self.width)))
        return "\n".join(lines) + "\n"

    def _checker_glyph(self, x: int, y: int) -> str:
        owner = int(self.owners[y, x])
        if owner == PlayerId.EMPTY:
            return EMPTY_CELL_GLYPH
        return CHECKER_GLYPHS[PlayerId(owner)][int(self.heights[y, x])]

    def __str__(self) -> str:
        return self.as_string()

    def __repr__(self) -> str:
        return f"Board(width={self.width}, height={self.height})\n{self.as_string()}"
