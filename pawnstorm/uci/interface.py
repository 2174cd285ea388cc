"""
Text Protocol Driver

A small UCI-style command loop so the engine can be driven from a terminal
or a script. The board model does not implement castling or en passant, so
this is not a complete UCI engine: those moves are rejected as illegal.

Commands Supported:
    - uci: Identify engine
    - isready: Synchronization check
    - ucinewgame: Start new game
    - position startpos [moves ...]
    - position fen <FEN> [moves ...]
    - go [depth N]: Search the side to move and print the best move
    - d: Print the board and the game state
    - quit: Exit

Searches run synchronously on the command loop's thread: a 'go' command
returns only after the whole search is done. Moves use coordinate notation
(e2e4); a promotion suffix (e7e8q) is accepted and always means a queen.
"""

import logging
import sys
import time
from typing import List, Optional

import chess

from pawnstorm.board.representation import board_from_fen, to_chess_board
from pawnstorm.config import EngineConfig
from pawnstorm.game.session import GameSession, IllegalMoveError
from pawnstorm.search.minimax import NoLegalMovesError

DEFAULT_FEN_TURN = "w"


def setup_logger(config: EngineConfig) -> logging.Logger:
    """
    Setup file-based logger for protocol debugging.

    Args:
        config: Engine configuration (log directory and level)

    Returns:
        Configured "pawnstorm" logger; module loggers propagate to it
    """
    config.log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("pawnstorm")
    logger.setLevel(logging.DEBUG if config.debug else logging.INFO)

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    handler = logging.FileHandler(config.log_file, mode='w')
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


class UCIEngine:
    """
    Command loop around a GameSession.

    Attributes:
        config: Engine configuration
        session: Current game (board and side to move)
        logger: Protocol logger

    Methods:
        run: Main command loop
        handle_uci / handle_isready / handle_ucinewgame
        handle_position / handle_go / handle_display / handle_quit
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config if config else EngineConfig()
        self.logger = setup_logger(self.config)
        self.session = GameSession(config=self.config)

        self.logger.info(f"=== {self.config.name} Engine Started ===")
        self.logger.info(f"Log file: {self.config.log_file}")

    @property
    def board(self):
        return self.session.board

    def run(self, stream=None):
        """
        Main command loop.

        Reads commands from `stream` (default: stdin) until 'quit' or EOF.
        """
        stream = stream if stream is not None else sys.stdin
        for line in stream:
            command = line.strip()
            if not command:
                continue

            self.logger.debug(f">>> {command}")
            if not self.handle_command(command):
                break
        else:
            self.logger.info("EOF received, shutting down")

    def handle_command(self, command: str) -> bool:
        """
        Dispatch one command line.

        Returns:
            False once the loop should stop, True otherwise
        """
        tokens = command.split()
        cmd = tokens[0].lower()

        try:
            if cmd == "uci":
                self.handle_uci()
            elif cmd == "isready":
                self.handle_isready()
            elif cmd == "ucinewgame":
                self.handle_ucinewgame()
            elif cmd == "position":
                self.handle_position(tokens)
            elif cmd == "go":
                self.handle_go(tokens)
            elif cmd == "d":
                self.handle_display()
            elif cmd == "quit":
                self.handle_quit()
                return False
            else:
                # Unknown command - UCI says to ignore
                self.logger.debug(f"Unknown command ignored: {command}")
        except Exception as e:
            self.logger.error(f"Command error: {e}", exc_info=True)
            print(f"# Error: {e}", file=sys.stderr)

        return True

    def _send(self, message: str):
        print(message)
        sys.stdout.flush()
        self.logger.debug(f"<<< {message}")

    def handle_uci(self):
        """Identify the engine."""
        self.logger.info("Handling: uci")
        self._send(f"id name {self.config.name}")
        self._send(f"id author {self.config.author}")
        self._send(f"option name Depth type spin default {self.config.depth} min 1 max 6")
        self._send("uciok")

    def handle_isready(self):
        self.logger.info("Handling: isready")
        self._send("readyok")

    def handle_ucinewgame(self):
        """Reset to the starting position."""
        self.logger.info("Handling: ucinewgame - resetting board")
        self.session = self._new_session()

    def handle_position(self, tokens: List[str]):
        """
        Set the position.

        Formats:
            position startpos
            position startpos moves e2e4 e7e5
            position fen <FEN string>
            position fen <FEN string> moves e2e4

        Moves are applied until the first illegal one, which is reported on
        stderr and stops the sequence.
        """
        self.logger.info(f"Handling: position {' '.join(tokens[1:])}")

        if len(tokens) < 2:
            self.logger.warning("Position command with insufficient arguments")
            return

        if tokens[1] == "startpos":
            session = self._new_session()
            move_index = 2
        elif tokens[1] == "fen":
            if "moves" in tokens:
                move_index = tokens.index("moves")
            else:
                move_index = len(tokens)
            fields = tokens[2:move_index]

            try:
                board = board_from_fen(" ".join(fields))
            except ValueError as e:
                self.logger.error(f"Invalid FEN: {e}")
                print(f"# Invalid FEN: {e}", file=sys.stderr)
                return

            turn = fields[1] if len(fields) > 1 else DEFAULT_FEN_TURN
            session = self._new_session(board, chess.WHITE if turn == "w" else chess.BLACK)
        else:
            self.logger.warning(f"Unknown position type: {tokens[1]}")
            return

        self.session = session

        if move_index < len(tokens) and tokens[move_index] == "moves":
            for move_str in tokens[move_index + 1:]:
                try:
                    self.session.play_uci(move_str)
                except IllegalMoveError as e:
                    self.logger.error(str(e))
                    print(f"# {e}", file=sys.stderr)
                    break

        self.logger.debug(f"Position key: {self.session.board.to_key()}")

    def handle_go(self, tokens: List[str]):
        """
        Search the side to move.

        Formats:
            go
            go depth 3

        Output:
            info depth X score cp Y nodes Z time T
            bestmove <move>
        """
        self.logger.info(f"Handling: go {' '.join(tokens[1:])}")

        depth = self.config.depth
        if "depth" in tokens:
            index = tokens.index("depth")
            if index + 1 < len(tokens):
                depth = int(tokens[index + 1])

        for unsupported in ("movetime", "wtime", "btime", "infinite"):
            if unsupported in tokens:
                self.logger.debug(f"{unsupported} ignored: searches are depth-limited only")

        start_time = time.time()
        try:
            result = self.session.search(depth)
        except NoLegalMovesError as e:
            self.logger.info(f"No move to search: {e}")
            self._send("bestmove 0000")
            return

        elapsed_ms = int((time.time() - start_time) * 1000)
        self.logger.info(
            f"Search complete: best_move={result.uci}, score={result.score}, "
            f"nodes={result.nodes}, time={elapsed_ms}ms"
        )

        info_parts = ["info", f"depth {depth}"]
        if result.score is not None:
            info_parts.append(f"score cp {self._centipawns(result.score, self.session.turn)}")
        info_parts.append(f"nodes {result.nodes}")
        info_parts.append(f"time {elapsed_ms}")

        self._send(" ".join(info_parts))
        self._send(f"bestmove {result.uci}")

    def handle_display(self):
        """Print the board and the game state."""
        turn = self.session.turn
        print(to_chess_board(self.session.board, turn))
        print(self.session.describe_status())
        sys.stdout.flush()

    def handle_quit(self):
        self.logger.info(f"=== {self.config.name} Engine Stopped ===")

    @staticmethod
    def _centipawns(score: float, turn: chess.Color) -> int:
        """
        Score in centipawns from the side to move's view.

        Search scores are from White's view, so they are negated when Black
        is to move. Infinite scores are clamped.
        """
        if turn == chess.BLACK:
            score = -score
        if score == float("inf"):
            return 1_000_000
        if score == -float("inf"):
            return -1_000_000
        return int(score * 100)

    def _new_session(self, board=None, turn: chess.Color = chess.WHITE) -> GameSession:
        """Fresh game sharing the current session's stores."""
        return GameSession(
            board,
            turn=turn,
            config=self.config,
            store=self.session.store,
            score_store=self.session.score_store,
        )
