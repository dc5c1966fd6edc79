"""
Tests for the exchange notation.

Tests:
- YEN snapshots of ongoing and finished games
- Malformed YEN rejection
- Game records and save/load
"""

import random

import pytest
from pydantic import ValidationError

from ..engine_core.action import GameStatus, Movement
from ..engine_core.errors import NotationError, WrongTurn
from ..engine_core.notation import YEN, GameRecord, MoveRecord, load_game, save_game
from ..engine_core.state import GameState
from .conftest import place


class TestYEN:
    """Tests for occupancy snapshots."""

    def test_empty_game(self, small_game):
        yen = YEN.from_game(small_game)
        assert yen.size == 3
        assert yen.turn == 0
        assert yen.players == ["B", "R"]
        assert yen.layout == "./../..."

    def test_layout_rows(self, mid_game):
        yen = YEN.from_game(mid_game)
        rows = yen.layout.split("/")
        assert [len(row) for row in rows] == [1, 2, 3, 4, 5]
        assert rows[0] == "R"
        assert rows[2] == ".B."
        assert yen.turn == 0

    def test_rebuild_keeps_cells_and_status(self, mid_game):
        rebuilt = YEN.from_game(mid_game).to_game()
        assert rebuilt.cells == mid_game.cells
        assert rebuilt.status == mid_game.status
        assert rebuilt.trackers == mid_game.trackers
        assert rebuilt.history == []

    def test_finished_game(self, won_game):
        yen = YEN.from_game(won_game)
        assert yen.layout == "R/R./BBB"
        assert yen.turn == 1
        rebuilt = yen.to_game()
        assert rebuilt.status == GameStatus.finished(0)

    def test_json_shape(self, small_game):
        place(small_game, 0)
        data = YEN.from_game(small_game).model_dump()
        assert data == {"size": 3, "turn": 1, "players": ["B", "R"], "layout": "B/../..."}

    def test_custom_symbols(self):
        state = YEN(size=2, turn=1, players=["X", "O"], layout="X/..").to_game()
        assert state.cell_owner(0) == 0
        assert state.next_player == 1

    @pytest.mark.parametrize("turn, layout", [
        (0, "./.."),          # too few rows
        (0, "./.../..."),     # wrong row length
        (0, "./../..Z"),      # unknown symbol
        (5, "./../..."),      # turn is not a player
    ])
    def test_malformed(self, turn, layout):
        with pytest.raises(NotationError) as exc_info:
            YEN(size=3, turn=turn, layout=layout).to_game()
        assert exc_info.value.code == "INVALID_NOTATION"

    def test_finished_layout_is_detected(self):
        """A winning group is found whatever the cells' index order."""
        state = YEN(size=2, turn=1, layout="B/B.").to_game()
        assert state.status == GameStatus.finished(0)

    def test_played_win_survives_snapshot(self):
        state = GameState.new(2)
        for index in (0, 2, 1):
            place(state, index)
        rebuilt = YEN.from_game(state).to_game()
        assert rebuilt.status == state.status == GameStatus.finished(0)

    def test_duplicate_symbols(self):
        with pytest.raises(NotationError):
            YEN(size=2, players=["B", "B"], layout="./..").to_game()


class TestGameRecord:
    """Tests for move-list records."""

    def test_replay_restores_history(self, mid_game):
        record = GameRecord.from_game(mid_game)
        assert [m.cell for m in record.moves] == [4, 7, 12, 0]
        replayed = record.to_game()
        assert replayed.history == mid_game.history
        assert replayed.cells == mid_game.cells
        assert replayed.status == mid_game.status

    def test_resign_preserved(self, mid_game):
        mid_game.add_move(Movement.resign(1))
        record = GameRecord.from_game(mid_game)
        assert record.moves[-1] == MoveRecord(player=1, resign=True)
        assert record.to_game().winner == 0

    def test_illegal_record(self):
        record = GameRecord(size=3, moves=[MoveRecord(player=1, cell=0)])
        with pytest.raises(WrongTurn):
            record.to_game()

    def test_unknown_player(self):
        with pytest.raises(ValidationError):
            MoveRecord(player=7, resign=True)

    def test_move_without_cell(self):
        record = GameRecord(size=3, moves=[MoveRecord(player=0)])
        with pytest.raises(NotationError):
            record.to_game()


class TestSaveLoad:
    """Tests for JSON files."""

    def test_round_trip(self, tmp_path, mid_game):
        path = tmp_path / "game.json"
        save_game(mid_game, path)
        loaded = load_game(path)
        assert loaded.history == mid_game.history
        assert loaded.next_player == mid_game.next_player

    def test_loaded_game_can_undo(self, tmp_path, mid_game):
        path = tmp_path / "game.json"
        save_game(mid_game, str(path))
        loaded = load_game(str(path))
        loaded.undo()
        assert loaded.cell_owner(0) is None
        assert loaded.next_player == 1

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(NotationError):
            load_game(path)

    @pytest.mark.parametrize("content", [
        '{"size": "seven", "moves": []}',
        '{"size": 3, "moves": [{"player": 7, "resign": true}]}',
        "[]",
    ])
    def test_wrong_schema(self, tmp_path, content):
        path = tmp_path / "bad.json"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(NotationError) as exc_info:
            load_game(path)
        assert exc_info.value.code == "INVALID_NOTATION"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_game(tmp_path / "missing.json")

    def test_empty_game(self, tmp_path):
        path = tmp_path / "empty.json"
        save_game(GameState.new(4), path)
        assert load_game(path).available_cells() == list(range(10))


class TestRandomGames:
    """Both notations rebuild any reachable position."""

    @staticmethod
    def _random_position(size: int, rng: random.Random) -> GameState:
        state = GameState.new(size)
        order = list(range(state.total_cells))
        rng.shuffle(order)
        stop = rng.randint(0, len(order))
        for index in order[:stop]:
            if state.is_finished:
                break
            place(state, index)
        return state

    @pytest.mark.parametrize("size", range(2, 10))
    def test_round_trips(self, size):
        rng = random.Random(1000 + size)
        for _ in range(25):
            state = self._random_position(size, rng)

            from_yen = YEN.from_game(state).to_game()
            assert from_yen.cells == state.cells
            assert from_yen.status == state.status
            assert from_yen.next_player == state.next_player
            assert from_yen.trackers == state.trackers

            from_record = GameRecord.from_game(state).to_game()
            assert from_record.cells == state.cells
            assert from_record.status == state.status
            assert from_record.history == state.history
            assert from_record.trackers == state.trackers
