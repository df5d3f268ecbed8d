from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Union

from .state import ALL_DIRECTIONS, CARDINAL_DIRECTIONS, PlayerId, Vec2


@dataclass(frozen=True)
class MoveChecker:
    from_cell: Vec2
    to_cell: Vec2


@dataclass(frozen=True)
class FireChecker:
    target: Vec2


@dataclass(frozen=True)
class PlaceStone:
    target: Vec2


@dataclass(frozen=True)
class SlideStone:
    from_node: Vec2
    direction: Vec2


Move = Union[MoveChecker, FireChecker, PlaceStone, SlideStone]


@dataclass
class MoveCandidates:
    """The four candidate lists offered to a player for one turn."""

    player: PlayerId
    checker_moves: List[MoveChecker] = field(default_factory=list)
    checker_fires: List[FireChecker] = field(default_factory=list)
    stone_placements: List[PlaceStone] = field(default_factory=list)
    stone_slides: List[SlideStone] = field(default_factory=list)

    def all(self) -> List[Move]:
        return [*self.checker_moves, *self.checker_fires, *self.stone_placements, *self.stone_slides]

    @property
    def is_empty(self) -> bool:
        return len(self) == 0

    def __len__(self) -> int:
        return (
            len(self.checker_moves)
            + len(self.checker_fires)
            + len(self.stone_placements)
            + len(self.stone_slides)
        )

    def __iter__(self) -> Iterator[Move]:
        return iter(self.all())

    def __contains__(self, move: object) -> bool:
        if isinstance(move, MoveChecker):
            return move in self.checker_moves
        if isinstance(move, FireChecker):
            return move in self.checker_fires
        if isinstance(move, PlaceStone):
            return move in self.stone_placements
        if isinstance(move, SlideStone):
            return move in self.stone_slides
        return False


class MoveCodec:
    """Dense integer encoding of every move on a ``width`` x ``height`` board.

    Layout: checker moves (cell x 8 directions), fires (cell), stone
    placements (node), stone slides (node x 4 directions).
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.num_cells = width * height
        self.num_nodes = (width + 1) * (height + 1)
        self.move_offset = 0
        self.fire_offset = self.num_cells * len(ALL_DIRECTIONS)
        self.place_offset = self.fire_offset + self.num_cells
        self.slide_offset = self.place_offset + self.num_nodes
        self.size = self.slide_offset + self.num_nodes * len(CARDINAL_DIRECTIONS)

    def encode(self, move: Move) -> int:
        if isinstance(move, MoveChecker):
            direction = move.to_cell - move.from_cell
            if direction not in ALL_DIRECTIONS:
                raise ValueError("Checker moves travel exactly one step.")
            base = self._cell(move.from_cell) * len(ALL_DIRECTIONS)
            return self.move_offset + base + ALL_DIRECTIONS.index(direction)
        if isinstance(move, FireChecker):
            return self.fire_offset + self._cell(move.target)
        if isinstance(move, PlaceStone):
            return self.place_offset + self._node(move.target)
        if isinstance(move, SlideStone):
            if move.direction not in CARDINAL_DIRECTIONS:
                raise ValueError("Stones slide along the four cardinal directions.")
            base = self._node(move.from_node) * len(CARDINAL_DIRECTIONS)
            return self.slide_offset + base + CARDINAL_DIRECTIONS.index(move.direction)
        raise TypeError(f"Not a move: {move!r}")

    def decode(self, index: int) -> Move:
        if not 0 <= index < self.size:
            raise ValueError("Move index out of range.")
        if index < self.fire_offset:
            cell, direction_index = divmod(index - self.move_offset, len(ALL_DIRECTIONS))
            origin = self._cell_coord(cell)
            return MoveChecker(origin, origin + ALL_DIRECTIONS[direction_index])
        if index < self.place_offset:
            return FireChecker(self._cell_coord(index - self.fire_offset))
        if index < self.slide_offset:
            return PlaceStone(self._node_coord(index - self.place_offset))
        node, direction_index = divmod(index - self.slide_offset, len(CARDINAL_DIRECTIONS))
        return SlideStone(self._node_coord(node), CARDINAL_DIRECTIONS[direction_index])

    def _cell(self, pos: Vec2) -> int:
        if not (0 <= pos.x < self.width and 0 <= pos.y < self.height):
            raise ValueError(f"Cell {pos.as_tuple()} outside the board.")
        return pos.y * self.width + pos.x

    def _node(self, pos: Vec2) -> int:
        if not (0 <= pos.x <= self.width and 0 <= pos.y <= self.height):
            raise ValueError(f"Node {pos.as_tuple()} outside the board.")
        return pos.y * (self.width + 1) + pos.x

    def _cell_coord(self, index: int) -> Vec2:
        return Vec2(index % self.width, index // self.width)

    def _node_coord(self, index: int) -> Vec2:
        return Vec2(index % (self.width + 1), index // (self.width + 1))
