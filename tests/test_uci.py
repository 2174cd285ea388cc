"""
Unit Tests for the Text Protocol Driver

Tests for the UCI-style command loop, focusing on:
    - Command parsing: uci, isready, ucinewgame, position, go, d, quit
    - Position setup: startpos, FEN and move application
    - Search invocation and output format
    - Error handling: invalid FEN, illegal moves, unknown commands
"""

from io import StringIO

import chess
import pytest

from pawnstorm.board import board_from_fen, starting_board
from pawnstorm.config import EngineConfig
from pawnstorm.uci import UCIEngine


class TestUCICommands:
    """Tests for command handling."""

    @pytest.fixture
    def engine(self, tmp_path):
        """Create an engine logging into a temporary directory."""
        return UCIEngine(EngineConfig(depth=1, log_dir=tmp_path))

    def test_handle_uci(self, engine, capsys):
        engine.handle_uci()

        output = capsys.readouterr().out

        assert "id name Pawnstorm" in output, "Should include engine name"
        assert "id author" in output, "Should include author"
        assert output.strip().endswith("uciok"), "Should end with uciok"

    def test_handle_isready(self, engine, capsys):
        engine.handle_isready()
        assert "readyok" in capsys.readouterr().out

    def test_handle_ucinewgame(self, engine):
        engine.session.play_uci("e2e4")

        engine.handle_ucinewgame()

        assert engine.board == starting_board(), "Board should be reset"
        assert engine.session.turn == chess.WHITE

    def test_handle_position_startpos(self, engine):
        engine.session.play_uci("e2e4")

        engine.handle_position(["position", "startpos"])

        assert engine.board == starting_board()

    def test_handle_position_with_moves(self, engine):
        engine.handle_position(["position", "startpos", "moves", "e2e4", "e7e5"])

        expected = starting_board()
        expected.move_piece(4, 6, 4, 4)
        expected.move_piece(4, 1, 4, 3)
        assert engine.board == expected
        assert engine.session.turn == chess.WHITE

    def test_handle_position_fen(self, engine):
        fen = "k7/8/8/3q4/8/8/3Q4/K7 b - - 0 1"
        engine.handle_position(["position", "fen"] + fen.split())

        assert engine.board == board_from_fen(fen)
        assert engine.session.turn == chess.BLACK

    def test_handle_position_fen_with_moves(self, engine):
        fen = "k7/8/8/3q4/8/8/3Q4/K7 b - - 0 1"
        engine.handle_position(["position", "fen"] + fen.split() + ["moves", "d5d2"])

        assert engine.board.piece_at(3, 6).value == -9
        assert engine.session.turn == chess.WHITE

    def test_illegal_move_stops_sequence(self, engine, capsys):
        engine.handle_position(["position", "startpos", "moves", "e2e4", "e7e4", "e7e5"])

        assert "Illegal move" in capsys.readouterr().err
        expected = starting_board()
        expected.move_piece(4, 6, 4, 4)
        assert engine.board == expected
        assert engine.session.turn == chess.BLACK

    def test_invalid_fen(self, engine, capsys):
        engine.handle_position(["position", "fen", "not/a/fen", "w"])

        assert "Invalid FEN" in capsys.readouterr().err
        assert engine.board == starting_board(), "Position should be unchanged"

    def test_handle_go_black(self, engine, capsys):
        fen = "k7/8/8/3q4/8/8/3Q4/K7 b - - 0 1"
        engine.handle_position(["position", "fen"] + fen.split())

        engine.handle_go(["go", "depth", "1"])

        lines = capsys.readouterr().out.strip().splitlines()
        assert lines[0].startswith("info depth 1 score cp ")
        assert "nodes" in lines[0]
        assert lines[-1] == "bestmove d5d2"

    def test_handle_go_white(self, engine, capsys):
        engine.handle_position(["position", "fen", "7k/8/8/8/8/8/8/K7", "w"])

        engine.handle_go(["go"])

        output = capsys.readouterr().out
        assert "bestmove a1b1" in output, "Last of the tied king moves"

    def test_handle_go_mate_score(self, engine, capsys):
        fen = "r5k1/5ppp/8/8/8/8/5PPP/6K1 b - - 0 1"
        engine.handle_position(["position", "fen"] + fen.split())

        engine.handle_go(["go", "depth", "2"])

        output = capsys.readouterr().out
        assert "score cp 1000000" in output
        assert "bestmove a8a1" in output

    def test_black_score_from_side_to_move(self, engine, capsys):
        fen = "k7/8/8/3q4/8/8/3Q4/K7 b - - 0 1"
        engine.handle_position(["position", "fen"] + fen.split())

        engine.handle_go(["go", "depth", "1"])

        info = capsys.readouterr().out.splitlines()[0]
        centipawns = int(info.split("score cp ")[1].split()[0])
        assert centipawns >= 900, "Winning the queen is good for Black, the side to move"

    def test_white_mate_score_unchanged(self, engine, capsys):
        fen = "6k1/5ppp/8/8/8/8/5PPP/R5K1 w - - 0 1"
        engine.handle_position(["position", "fen"] + fen.split())

        engine.handle_go(["go", "depth", "2"])

        output = capsys.readouterr().out
        assert "score cp 1000000" in output
        assert "bestmove a1a8" in output

    def test_handle_go_without_moves(self, engine, capsys):
        fen = "k7/2Q5/1K6/8/8/8/8/8 b - - 0 1"
        engine.handle_position(["position", "fen"] + fen.split())

        engine.handle_go(["go", "depth", "1"])

        assert "bestmove 0000" in capsys.readouterr().out

    def test_handle_display(self, engine, capsys):
        engine.handle_display()

        output = capsys.readouterr().out
        assert "r n b q k b n r" in output
        assert "White to move" in output

    def test_unknown_command_ignored(self, engine, capsys):
        assert engine.handle_command("foobar") is True
        assert capsys.readouterr().out == ""

    def test_command_error_reported(self, engine, capsys):
        assert engine.handle_command("go depth x") is True
        assert "# Error" in capsys.readouterr().err

    def test_quit_stops_loop(self, engine):
        assert engine.handle_command("quit") is False


class TestCommandLoop:
    """Tests for run()."""

    @pytest.fixture
    def engine(self, tmp_path):
        return UCIEngine(EngineConfig(depth=1, log_dir=tmp_path))

    def test_run_until_quit(self, engine, capsys):
        engine.run(StringIO("isready\n\nquit\nisready\n"))

        output = capsys.readouterr().out
        assert output.count("readyok") == 1, "Commands after quit are not read"

    def test_run_until_eof(self, engine, capsys):
        engine.run(StringIO("uci\nisready\n"))

        output = capsys.readouterr().out
        assert "uciok" in output
        assert "readyok" in output

    def test_log_file_written(self, engine, tmp_path):
        engine.run(StringIO("isready\nquit\n"))

        log = (tmp_path / "engine.log").read_text()
        assert "Engine Started" in log
        assert "Handling: isready" in log
