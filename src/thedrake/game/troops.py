"""Troop definitions and the per-side placement ledger."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING

from thedrake.game.actions import TroopAction
from thedrake.game.errors import IllegalArgumentError, IllegalGameStateError
from thedrake.game.moves import Move
from thedrake.game.positions import OFF_BOARD, BoardPos, Offset, PlayingSide, TilePos

if TYPE_CHECKING:
    from thedrake.game.state import GameState

logger = logging.getLogger(__name__)

# Number of troops that must be placed next to the leader before the game proper starts
GUARD_COUNT = 2

DEFAULT_PIVOT = Offset(1, 1)


class TroopFace(Enum):
    """Which side of a troop tile is face up."""

    AVERS = "AVERS"
    REVERS = "REVERS"

    def __str__(self) -> str:
        return self.value

    @property
    def flipped(self) -> "TroopFace":
        return TroopFace.REVERS if self is TroopFace.AVERS else TroopFace.AVERS


@dataclass(frozen=True)
class Troop:
    """Definition of a troop type.

    Attributes:
        name: Troop name, also its serialized form
        avers_actions: Actions available while face up
        revers_actions: Actions available after the first flip
        avers_pivot: Layout pivot of the avers face
        revers_pivot: Layout pivot of the revers face (defaults to the avers pivot)
    """

    name: str
    avers_actions: tuple[TroopAction, ...] = ()
    revers_actions: tuple[TroopAction, ...] = ()
    avers_pivot: Offset = DEFAULT_PIVOT
    revers_pivot: Offset | None = None

    def pivot(self, face: TroopFace) -> Offset:
        if face is TroopFace.AVERS or self.revers_pivot is None:
            return self.avers_pivot
        return self.revers_pivot

    def actions(self, face: TroopFace) -> tuple[TroopAction, ...]:
        return self.avers_actions if face is TroopFace.AVERS else self.revers_actions

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class TroopTile:
    """A troop placed on the board.

    Attributes:
        troop: The troop definition
        side: Owning side
        face: Face currently up
    """

    troop: Troop
    side: PlayingSide
    face: TroopFace = TroopFace.AVERS

    def flipped(self) -> "TroopTile":
        return TroopTile(self.troop, self.side, self.face.flipped)

    def moves_from(self, pos: BoardPos, state: "GameState") -> list[Move]:
        """Collect the moves of every action of the current face."""
        moves: list[Move] = []
        for action in self.troop.actions(self.face):
            moves.extend(action.moves_from(pos, self.side, state))
        return moves


@dataclass(frozen=True)
class BoardTroops:
    """Troops of one side that are on the board.

    The first troop ever placed is the leader. The next ``GUARD_COUNT``
    placements are its guards; troops cannot move until all guards are
    placed.

    Attributes:
        side: Owning side
        troop_map: Placed troops by position
        leader_position: Position of the leader, OFF_BOARD until placed or after capture
        guards: Number of guards placed so far
    """

    side: PlayingSide
    troop_map: Mapping[BoardPos, TroopTile] = field(default_factory=lambda: MappingProxyType({}))
    leader_position: TilePos = OFF_BOARD
    guards: int = 0

    def at(self, pos: TilePos) -> TroopTile | None:
        """Get the troop at a position, if any."""
        return self.troop_map.get(pos)

    @property
    def is_leader_placed(self) -> bool:
        return self.leader_position != OFF_BOARD

    @property
    def is_placing_guards(self) -> bool:
        return self.is_leader_placed and self.guards < GUARD_COUNT

    @property
    def troop_positions(self) -> frozenset[BoardPos]:
        return frozenset(self.troop_map)

    def place_troop(self, troop: Troop, target: BoardPos) -> "BoardTroops":
        """Place a new troop, face up.

        Raises:
            IllegalArgumentError: If the target is already occupied
        """
        if self.at(target) is not None:
            raise IllegalArgumentError(f"Target position {target} is already occupied")

        troops = dict(self.troop_map)
        troops[target] = TroopTile(troop, self.side, TroopFace.AVERS)
        leader_position = self.leader_position if self.is_leader_placed else target
        guards = self.guards + 1 if self.is_placing_guards else self.guards
        if not self.is_leader_placed:
            logger.debug(f"{self.side} leader {troop} placed at {target}")
        return self._replace(troops, leader_position, guards)

    def troop_step(self, origin: BoardPos, target: BoardPos) -> "BoardTroops":
        """Move a troop to an empty cell and flip it.

        Raises:
            IllegalGameStateError: If the leader or its guards are not placed yet
            IllegalArgumentError: If the origin is empty or the target is occupied
        """
        self._check_can_move()
        if self.at(origin) is None:
            raise IllegalArgumentError(f"No troop at origin position {origin}")
        if self.at(target) is not None:
            raise IllegalArgumentError(f"Target position {target} is already occupied")

        troops = dict(self.troop_map)
        tile = troops.pop(origin)
        troops[target] = tile.flipped()
        leader_position = target if origin == self.leader_position else self.leader_position
        return self._replace(troops, leader_position, self.guards)

    def troop_flip(self, origin: BoardPos) -> "BoardTroops":
        """Flip a troop in place.

        Raises:
            IllegalGameStateError: If the leader or its guards are not placed yet
            IllegalArgumentError: If the origin is empty
        """
        self._check_can_move()
        tile = self.at(origin)
        if tile is None:
            raise IllegalArgumentError(f"No troop at origin position {origin}")

        troops = dict(self.troop_map)
        troops[origin] = tile.flipped()
        return self._replace(troops, self.leader_position, self.guards)

    def remove_troop(self, target: BoardPos) -> "BoardTroops":
        """Remove a troop from the board.

        Removing the leader puts the leader position back to OFF_BOARD.

        Raises:
            IllegalGameStateError: If the leader or its guards are not placed yet
            IllegalArgumentError: If the target is empty
        """
        self._check_can_move()
        if self.at(target) is None:
            raise IllegalArgumentError(f"No troop at target position {target}")

        troops = dict(self.troop_map)
        del troops[target]
        leader_position = OFF_BOARD if target == self.leader_position else self.leader_position
        return self._replace(troops, leader_position, self.guards)

    def _check_can_move(self) -> None:
        if not self.is_leader_placed:
            raise IllegalGameStateError("Cannot move troops before the leader is placed")
        if self.is_placing_guards:
            raise IllegalGameStateError("Cannot move troops before guards are placed")

    def _replace(
        self,
        troops: dict[BoardPos, TroopTile],
        leader_position: TilePos,
        guards: int,
    ) -> "BoardTroops":
        return BoardTroops(self.side, MappingProxyType(troops), leader_position, guards)
