"""
Tests for the text board rendering.
"""

from ..render import RenderOptions, render_board
from .conftest import place


class TestRenderBoard:
    """Tests for render_board."""

    def test_empty_board(self, small_game):
        lines = render_board(small_game, RenderOptions(show_colors=False)).splitlines()
        assert [line.strip() for line in lines[:3]] == [".", ". .", ". . ."]
        assert lines[-1] == "Next: B (player 0)"

    def test_rows_are_centered(self, small_game):
        lines = render_board(small_game, RenderOptions(show_colors=False)).splitlines()
        indents = [len(line) - len(line.lstrip()) for line in lines[:3]]
        assert indents == sorted(indents, reverse=True)

    def test_stones_and_winner(self, won_game):
        lines = render_board(won_game, RenderOptions(show_colors=False)).splitlines()
        assert lines[2].strip() == "B B B"
        assert lines[-1] == "Winner: B (player 0)"

    def test_indices(self, small_game):
        text = render_board(small_game, RenderOptions(show_idx=True, show_colors=False))
        for index in range(6):
            assert f".{index}" in text

    def test_coordinates(self, small_game):
        text = render_board(small_game, RenderOptions(show_3d_coords=True, show_colors=False))
        assert "(200)" in text
        assert "(020)" in text

    def test_colors(self, small_game):
        place(small_game, 0)
        assert "\033[" in render_board(small_game)
        assert "\033[" not in render_board(small_game, RenderOptions(show_colors=False))
