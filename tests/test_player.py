import pytest

from seeschlacht.board import WATER
from seeschlacht.player import Player


def test_create_sets_rules_and_empty_board():
    player = Player.create(1, 10, 12, 3)
    assert player.number == 1
    assert player.ship_count == 3
    assert player.board.rows == 10
    assert player.board.cols == 12
    assert all(value == WATER for row in player.board for value in row)


def test_create_starts_without_shots():
    player = Player.create(2, 10, 10, 1)
    assert (player.last_y, player.last_x, player.attempts) == (0, 0, 0)


def test_players_have_independent_boards():
    first = Player.create(1, 10, 10, 1)
    second = Player.create(2, 10, 10, 1)
    first.board[0, 0] = 1
    assert second.board[0, 0] == WATER
    assert first.board[0, 0] == 1


def test_progress_can_be_updated():
    player = Player.create(1, 10, 10, 1)
    player.attempts += 1
    player.last_y, player.last_x = 4, 7
    assert (player.last_y, player.last_x, player.attempts) == (4, 7, 1)


def test_create_rejects_negative_dimensions():
    with pytest.raises(ValueError):
        Player.create(1, -1, 10, 1)