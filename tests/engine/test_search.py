"""Tests for the minimax search engine."""

import random

import pytest

from checkie.core.board import Board, create_initial_board
from checkie.core.enums import Player
from checkie.core.move import Move
from checkie.core.move_generator import legal_moves
from checkie.core.piece import Piece
from checkie.core.rules import apply_move
from checkie.engine import MinimaxSearchEngine, SearchLimits, minimax_search
from checkie.engine.evaluate import evaluate
from checkie.engine.minimax_search import choose_best_lookahead_move


def _zero() -> float:
    return 0.0


def _plain_minimax(
    board: Board,
    player: Player,
    forced_piece_id: int | None,
    maximizing: Player,
    depth: int,
) -> float:
    """Unpruned minimax without leaf jitter."""
    moves = legal_moves(board, player, forced_piece_id)
    if not moves:
        return -1000 - depth if player == maximizing else 1000 + depth
    if depth <= 0:
        return evaluate(board, maximizing)
    scores = []
    for move in moves:
        nxt = apply_move(board, move, player)
        scores.append(
            _plain_minimax(
                nxt.board,
                nxt.current_player,
                nxt.forced_piece_id,
                maximizing,
                depth - 1,
            )
        )
    return max(scores) if player == maximizing else min(scores)


def _midgame(seed: int, plies: int = 14) -> tuple[Board, Player, int | None]:
    rng = random.Random(seed)
    board, _ = create_initial_board()
    player = Player.LIGHT
    forced: int | None = None
    for _ in range(plies):
        moves = legal_moves(board, player, forced)
        if not moves:
            break
        result = apply_move(board, rng.choice(moves), player)
        board, player, forced = (
            result.board,
            result.current_player,
            result.forced_piece_id,
        )
    return board, player, forced


class _CountingRandom:
    def __init__(self, value: float) -> None:
        self.value = value
        self.calls = 0

    def __call__(self) -> float:
        self.calls += 1
        return self.value


class TestMinimaxSearchEngine:
    @pytest.mark.slow
    def test_returns_legal_move_from_start(self) -> None:
        board, _ = create_initial_board()
        engine = MinimaxSearchEngine()

        result = engine.search(board, Player.LIGHT, random=_zero)

        assert result.best_move in legal_moves(board, Player.LIGHT)
        assert result.depth == 4
        assert result.nodes > 0

    def test_no_moves_returns_none(self) -> None:
        board = Board.from_pieces({(0, 1): Piece(1, Player.DARK)})
        result = MinimaxSearchEngine().search(board, Player.LIGHT, random=_zero)
        assert result.best_move is None

    def test_rejects_zero_depth(self) -> None:
        board, _ = create_initial_board()
        with pytest.raises(ValueError):
            MinimaxSearchEngine().search(
                board, Player.LIGHT, limits=SearchLimits(max_depth=0)
            )

    def test_immediate_win_scores_by_depth(self) -> None:
        board = Board.from_pieces(
            {(5, 2): Piece(1, Player.LIGHT), (4, 3): Piece(2, Player.DARK)}
        )
        result = MinimaxSearchEngine().search(board, Player.LIGHT, random=_zero)

        assert result.best_move == Move(1, (5, 2), (3, 4), (4, 3))
        assert result.score == 1003

    def test_chain_capture_keeps_mover(self) -> None:
        board = Board.from_pieces(
            {
                (5, 0): Piece(10, Player.LIGHT),
                (4, 1): Piece(20, Player.DARK),
                (2, 3): Piece(21, Player.DARK),
            }
        )
        result = MinimaxSearchEngine().search(board, Player.LIGHT, random=_zero)

        # Second jump is searched for light, then dark has nothing left.
        assert result.score == 1002

    def test_forced_piece_at_root(self) -> None:
        board = Board.from_pieces(
            {
                (3, 2): Piece(10, Player.LIGHT),
                (2, 3): Piece(21, Player.DARK),
                (5, 6): Piece(11, Player.LIGHT),
                (4, 5): Piece(22, Player.DARK),
            }
        )
        result = MinimaxSearchEngine().search(
            board, Player.LIGHT, forced_piece_id=10, random=_zero
        )
        assert result.best_move == Move(10, (3, 2), (1, 4), (2, 3))

    def test_avoids_one_ply_blunder(self) -> None:
        board = Board.from_pieces(
            {(2, 1): Piece(60, Player.DARK), (4, 3): Piece(61, Player.LIGHT)}
        )
        moves = legal_moves(board, Player.DARK)
        best = choose_best_lookahead_move(moves, board, Player.DARK, _zero)
        assert best is not None
        assert best.to_sq == (3, 0)

    @pytest.mark.slow
    def test_same_random_sequence_same_move(self) -> None:
        board, _ = create_initial_board()
        moves = legal_moves(board, Player.DARK)
        first = choose_best_lookahead_move(
            moves, board, Player.DARK, random.Random(11).random
        )
        second = choose_best_lookahead_move(
            moves, board, Player.DARK, random.Random(11).random
        )
        assert first == second

    def test_terminal_nodes_skip_jitter(self) -> None:
        board = Board.from_pieces(
            {(5, 2): Piece(1, Player.LIGHT), (4, 3): Piece(2, Player.DARK)}
        )
        rnd = _CountingRandom(0.0)
        MinimaxSearchEngine().search(board, Player.LIGHT, random=rnd)
        assert rnd.calls == 0

    def test_empty_move_list_helper(self) -> None:
        board, _ = create_initial_board()
        assert choose_best_lookahead_move([], board, Player.LIGHT) is None


class TestRootTieBreak:
    def _board(self) -> Board:
        return Board.from_pieces(
            {
                (4, 3): Piece(1, Player.LIGHT, king=True),
                (0, 1): Piece(2, Player.DARK),
            }
        )

    def test_high_draw_replaces_with_tied_move(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(minimax_search, "evaluate", lambda board, player: 0.0)
        board = self._board()
        moves = legal_moves(board, Player.LIGHT)
        assert len(moves) == 4

        result = MinimaxSearchEngine().search(
            board, Player.LIGHT, limits=SearchLimits(max_depth=1), random=lambda: 0.9
        )
        assert result.best_move == moves[-1]

    def test_low_draw_keeps_first_move(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(minimax_search, "evaluate", lambda board, player: 0.0)
        board = self._board()
        moves = legal_moves(board, Player.LIGHT)

        result = MinimaxSearchEngine().search(
            board, Player.LIGHT, limits=SearchLimits(max_depth=1), random=lambda: 0.1
        )
        assert result.best_move == moves[0]


class TestAlphaBeta:
    @pytest.mark.parametrize("seed", [1, 2, 3, 4, 5, 6])
    def test_pruned_value_matches_full_minimax(self, seed: int) -> None:
        board, player, forced = _midgame(seed)
        engine = MinimaxSearchEngine()
        engine._random = _zero

        for move in legal_moves(board, player, forced):
            nxt = apply_move(board, move, player)
            pruned = engine._minimax(
                nxt.board,
                nxt.current_player,
                nxt.forced_piece_id,
                player,
                2,
                float("-inf"),
                float("inf"),
            )
            full = _plain_minimax(
                nxt.board, nxt.current_player, nxt.forced_piece_id, player, 2
            )
            assert pruned == pytest.approx(full)

    @pytest.mark.parametrize("seed", [7, 8])
    def test_root_score_matches_full_minimax(self, seed: int) -> None:
        board, player, forced = _midgame(seed)
        moves = legal_moves(board, player, forced)
        if not moves:
            pytest.skip("playout ended the game")

        result = MinimaxSearchEngine().search(
            board,
            player,
            forced_piece_id=forced,
            limits=SearchLimits(max_depth=3),
            random=_zero,
        )
        expected = max(
            _plain_minimax(nxt.board, nxt.current_player, nxt.forced_piece_id, player, 2)
            for nxt in (apply_move(board, m, player) for m in moves)
        )
        assert result.score == pytest.approx(expected)
