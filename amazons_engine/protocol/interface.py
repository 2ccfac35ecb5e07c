"""
Text Protocol Implementation

This module implements a line-oriented command protocol for playing games
against the engine from a terminal, or driving it from another program.

Commands Supported:
    - new: Start a new game (White manual, Black automated)
    - auto <side>: Let the engine play <side>
    - manual <side>: Let the user play <side>
    - <move>: Play a move for the side to move (d1-d7(g7) or d1 d7 g7)
    - go: Let the engine play one move for the side to move
    - undo: Take back the last move, and keep taking back moves while an
      automated side is to move
    - moves: Print the number of legal moves for the side to move
    - dump: Print the board
    - quit: Leave the command loop

After every command, automated sides to move play until a manual side is
to move or the game is over. Engine moves are printed as `* <move>`.
"""

import logging
import sys
from pathlib import Path
from typing import Dict, Optional, TextIO

from amazons_engine.board.board import Board
from amazons_engine.board.move import Piece, is_move_text, parse_move
from amazons_engine.config import EngineConfig
from amazons_engine.exceptions import AmazonsError
from amazons_engine.search.minimax import SearchAgent

AUTO = "auto"
MANUAL = "manual"

SIDES = {"white": Piece.WHITE, "black": Piece.BLACK}


def setup_logger(level: str = "INFO", log_file: Optional[Path] = None):
    """
    Configure the package logger.

    Args:
        level: Logging level name
        log_file: Write to this file; stderr when None

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger("amazons_engine")
    logger.setLevel(level)

    logger.handlers.clear()

    if log_file is not None:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, mode='w')
    else:
        handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


logger = logging.getLogger(__name__)


class GameController:
    """
    Turn-taking controller for one game at a time.

    Attributes:
        board: Authoritative game position
        agent: Engine used for automated sides
        players: AUTO or MANUAL for each side
        input: Command stream
        output: Response stream
    """

    def __init__(
        self,
        agent: Optional[SearchAgent] = None,
        config: Optional[EngineConfig] = None,
        input: Optional[TextIO] = None,
        output: Optional[TextIO] = None,
    ):
        self.config = config or EngineConfig()
        self.agent = agent or SearchAgent(config=self.config.search)
        self.input = input or sys.stdin
        self.output = output or sys.stdout
        self.board = Board()
        self.players: Dict[Piece, str] = {}
        self._announced = False
        self.handle_new()

    def run(self):
        """
        Main command loop. Runs until `quit` or end of input.
        """
        while True:
            line = self.input.readline()
            if not line:
                logger.info("EOF received, shutting down")
                break

            command = line.strip()
            if not command or command.startswith("#"):
                continue

            logger.debug(f">>> {command}")

            if not self.execute(command):
                break

    def execute(self, command: str) -> bool:
        """
        Run one command and let automated sides reply.

        Returns:
            False once `quit` has been received, True otherwise
        """
        tokens = command.split()
        cmd = tokens[0].lower()

        try:
            if cmd == "quit":
                logger.info("Handling: quit")
                return False
            elif cmd == "new":
                self.handle_new()
            elif cmd in (AUTO, MANUAL):
                self.handle_player(cmd, tokens)
            elif cmd == "go":
                self.handle_go()
            elif cmd == "undo":
                self.handle_undo()
            elif cmd == "moves":
                self.handle_moves()
            elif cmd == "dump":
                self.handle_dump()
            elif is_move_text(command):
                self.handle_move(command)
            else:
                self._error(f"unknown command: {command}")
                return True

            self._play_automatic()
        except AmazonsError as e:
            logger.error(f"Command error: {e}")
            self._error(str(e))

        return True

    def handle_new(self):
        """Start a new game: White manual, Black automated."""
        logger.info("Handling: new")
        self.board = Board()
        self.players = {Piece.WHITE: MANUAL, Piece.BLACK: AUTO}
        self._announced = False

    def handle_player(self, mode: str, tokens):
        """Handle `auto <side>` / `manual <side>`."""
        if len(tokens) != 2 or tokens[1].lower() not in SIDES:
            self._error(f"usage: {mode} white|black")
            return
        side = SIDES[tokens[1].lower()]
        self.players[side] = mode
        logger.info(f"{side.name} is now {mode}")

    def handle_move(self, text: str):
        """Apply a move typed by the user."""
        if self.board.winner() is not None:
            self._error("game is over")
            return
        move = parse_move(text)
        self.board.make_move(move)
        logger.info(f"Move {self.board.num_moves}: {move}")

    def handle_go(self):
        """Let the engine play one move for the side to move."""
        if self.board.winner() is not None:
            self._error("game is over")
            return
        self._engine_move()

    def handle_undo(self):
        """Take back moves until a manual side is to move."""
        move = self.board.undo()
        logger.info(f"Undid {move}")
        while self.board.num_moves > 0 and self.players[self.board.turn] == AUTO:
            move = self.board.undo()
            logger.info(f"Undid {move}")
        self._announced = False

    def handle_moves(self):
        count = sum(1 for _ in self.board.legal_moves())
        self._print(str(count))

    def handle_dump(self):
        self._print("===")
        self._print(str(self.board), end="")
        self._print("===")

    def _play_automatic(self):
        while (
            self.board.winner() is None
            and self.players[self.board.turn] == AUTO
        ):
            self._engine_move()
        self._announce_winner()

    def _engine_move(self):
        move = self.agent.select_move(self.board)
        self.board.make_move(move)
        self._print(f"* {move}")
        logger.info(f"Engine move {self.board.num_moves}: {move}")

    def _announce_winner(self):
        winner = self.board.winner()
        if winner is None or self._announced:
            return
        self._announced = True
        self._print(f"{winner.name.capitalize()} wins.")
        logger.info(f"Game over after {self.board.num_moves} moves: {winner.name} wins")

    def _error(self, message: str):
        self._print(f"error: {message}")

    def _print(self, text: str, end: str = "\n"):
        print(text, end=end, file=self.output)
        self.output.flush()
