"""Tests for move generation."""

from thedrake.game.catalog import CLUBMAN, DRAKE, SPEARMAN
from thedrake.game.moves import CaptureOnly, PlaceFromStack, StepOnly
from thedrake.game.positions import PositionFactory
from thedrake.game.state import GameState
from thedrake.game.valid_moves import ValidMoves


class TestBoardMoves:
    """Tests for moves of troops on the board."""

    def test_clubman_moves(self, opened_state: GameState, pos: PositionFactory):
        """Test the moves of a Clubman."""
        moves = ValidMoves(opened_state).board_moves(pos.parse("a2"))
        assert moves == [
            StepOnly(pos.parse("a2"), pos.parse("b2")),
            StepOnly(pos.parse("a2"), pos.parse("a3")),
        ]

    def test_moves_in_action_order(self, opened_state: GameState, pos: PositionFactory):
        """Test that moves follow the order of the troop's actions."""
        moves = ValidMoves(opened_state).board_moves(pos.parse("b1"))
        assert moves == [
            StepOnly(pos.parse("b1"), pos.parse("c1")),
            StepOnly(pos.parse("b1"), pos.parse("b2")),
        ]

    def test_blocked_leader(self, opened_state: GameState, pos: PositionFactory):
        """Test a leader boxed in by its own troops."""
        assert ValidMoves(opened_state).board_moves(pos.parse("a1")) == []

    def test_enemy_troop(self, opened_state: GameState, pos: PositionFactory):
        """Test that enemy troops have no moves."""
        assert ValidMoves(opened_state).board_moves(pos.parse("d4")) == []

    def test_empty_cell(self, opened_state: GameState, pos: PositionFactory):
        """Test that empty cells have no moves."""
        assert ValidMoves(opened_state).board_moves(pos.parse("c2")) == []

    def test_strike(self, build_state, pos: PositionFactory):
        """Test that strikes are listed."""
        state = build_state({"a1": DRAKE, "b1": SPEARMAN}, {"d4": DRAKE, "c3": CLUBMAN})
        moves = ValidMoves(state).board_moves(pos.parse("b1"))
        assert moves == [
            StepOnly(pos.parse("b1"), pos.parse("b2")),
            CaptureOnly(pos.parse("b1"), pos.parse("c3")),
        ]

    def test_moves_are_executable(self, opened_state: GameState, pos: PositionFactory):
        """Test that every listed move can be executed."""
        for move in ValidMoves(opened_state).all_moves():
            new_state = move.execute(opened_state)
            assert new_state.side_on_turn is not opened_state.side_on_turn


class TestStackMoves:
    """Tests for placement moves."""

    def test_moves_from_stack(self, opened_state: GameState, pos: PositionFactory):
        """Test listing placements from the stack."""
        assert ValidMoves(opened_state).moves_from_stack() == [
            PlaceFromStack(pos.parse("a3")),
            PlaceFromStack(pos.parse("b2")),
            PlaceFromStack(pos.parse("c1")),
        ]

    def test_all_moves(self, opened_state: GameState, pos: PositionFactory):
        """Test listing all moves."""
        assert [str(move) for move in ValidMoves(opened_state).all_moves()] == [
            "StepOnly(a2->b2)",
            "StepOnly(a2->a3)",
            "StepOnly(b1->c1)",
            "StepOnly(b1->b2)",
            "PlaceFromStack(->a3)",
            "PlaceFromStack(->b2)",
            "PlaceFromStack(->c1)",
        ]
