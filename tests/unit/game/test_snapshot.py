"""Tests for the JSON export."""

import json

from thedrake.game.board import Board
from thedrake.game.catalog import CLUBMAN, DRAKE, StandardDrakeSetup, sample_board
from thedrake.game.positions import PositionFactory
from thedrake.game.snapshot import BoardSnapshot, GameSnapshot
from thedrake.game.state import GameState


class TestGameSnapshot:
    """Tests for exporting game states."""

    def test_json_layout(self, opened_state: GameState):
        """Test the top-level JSON layout."""
        data = opened_state.to_json()
        assert data.startswith('{"result":"IN_PLAY","board":{"dimension":4,"tiles":[')
        assert list(json.loads(data)) == ["result", "board", "blueArmy", "orangeArmy"]

    def test_camel_case_keys(self, opened_state: GameState):
        """Test that keys are exported in camelCase."""
        data = opened_state.to_dict()
        blue = data["blueArmy"]

        assert blue["boardTroops"]["side"] == "BLUE"
        assert blue["boardTroops"]["leaderPosition"] == "a1"
        assert blue["boardTroops"]["guards"] == 2
        assert blue["stack"] == ["Monk", "Spearman", "Swordsman", "Archer"]
        assert blue["captured"] == []

    def test_troop_map(self, opened_state: GameState):
        """Test exporting placed troops."""
        troop_map = opened_state.to_dict()["orangeArmy"]["boardTroops"]["troopMap"]

        assert list(troop_map) == ["c4", "d3", "d4"]
        assert troop_map["d4"] == {"troop": "Drake", "side": "ORANGE", "face": "AVERS"}

    def test_troop_map_sorted_as_strings(self, build_state):
        """Test that troop map keys sort as strings."""
        state = build_state({"a2": DRAKE, "a10": CLUBMAN}, {"j10": DRAKE}, board=Board(10))
        troop_map = state.to_dict()["blueArmy"]["boardTroops"]["troopMap"]
        assert list(troop_map) == ["a10", "a2"]

    def test_leader_off_board(self, board: Board):
        """Test exporting a leader that is not placed."""
        data = StandardDrakeSetup().start_state(board).to_dict()
        assert data["blueArmy"]["boardTroops"]["leaderPosition"] == "off-board"
        assert data["blueArmy"]["boardTroops"]["troopMap"] == {}

    def test_captured_and_result(self, build_state, pos: PositionFactory):
        """Test exporting captures and a victory."""
        state = build_state({"a1": DRAKE, "b2": CLUBMAN}, {"b3": DRAKE, "c3": CLUBMAN})
        data = state.step_and_capture(pos.parse("b2"), pos.parse("b3")).to_dict()

        assert data["result"] == "VICTORY"
        assert data["blueArmy"]["captured"] == ["Drake"]
        assert data["orangeArmy"]["boardTroops"]["leaderPosition"] == "off-board"
        assert data["blueArmy"]["boardTroops"]["troopMap"]["b3"]["face"] == "REVERS"

    def test_from_state_matches_to_dict(self, opened_state: GameState):
        """Test that to_dict matches the snapshot model."""
        snapshot = GameSnapshot.from_state(opened_state)
        assert snapshot.model_dump(by_alias=True) == opened_state.to_dict()


class TestBoardSnapshot:
    """Tests for board export."""

    def test_tiles_by_row(self):
        """Test exporting tiles row by row."""
        snapshot = BoardSnapshot.from_board(sample_board(3, ["b1", "a2"]))
        assert snapshot.tiles == [
            "empty", "mountain", "empty",
            "mountain", "empty", "empty",
            "empty", "empty", "empty",
        ]
