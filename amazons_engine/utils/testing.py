"""
Engine Testing and Benchmarking

This module provides move generation checks, a self-play harness and a
small benchmark suite for the search.

Tools:
    1. Perft: counts the leaves of the legal-move tree to a fixed depth.
       Any change to move generation that alters the counts is a bug.
       The opening position has 2176 legal moves.

    2. Self-play: plays complete games between two agents and records
       every move, for regression tests and strength comparisons.

    3. Benchmark positions: sparse endgame-like positions where deeper
       search is affordable, timed at a given depth.

Evaluation Metrics:
    - Nodes Searched: Total positions visited
    - Time per Position: Wall time of the root search
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Protocol, Sequence

from amazons_engine.board.board import Board
from amazons_engine.board.move import Move, Piece
from amazons_engine.evaluation.base import Evaluator
from amazons_engine.search.minimax import find_best_move

logger = logging.getLogger(__name__)

OPENING_MOVE_COUNT = 2176


class Agent(Protocol):
    def select_move(self, board: Board) -> Move:
        ...


def perft(board: Board, depth: int) -> int:
    """
    Count leaf nodes of the legal-move tree.

    Args:
        board: Position to expand (restored before returning)
        depth: Plies to expand

    Returns:
        Number of move sequences of length `depth`
    """
    if depth == 0:
        return 1
    if depth == 1:
        return sum(1 for _ in board.legal_moves())
    nodes = 0
    for move in board.legal_moves():
        with board.applied(move):
            nodes += perft(board, depth - 1)
    return nodes


@dataclass
class GameRecord:
    """
    A finished (or abandoned) game.

    Attributes:
        moves: Moves in the order they were played
        winner: Winning side, None if max_moves stopped the game
        board: Final position
    """
    moves: List[Move] = field(default_factory=list)
    winner: Optional[Piece] = None
    board: Optional[Board] = None


def play_game(
    white: Agent,
    black: Agent,
    board: Optional[Board] = None,
    max_moves: Optional[int] = None,
    on_move: Optional[Callable[[Board, Move], None]] = None,
) -> GameRecord:
    """
    Play a game between two agents.

    Args:
        white: Agent for White
        black: Agent for Black
        board: Start position (default: initial layout); not modified
        max_moves: Stop after this many moves
        on_move: Called with (board, move) after each move

    Returns:
        GameRecord
    """
    board = Board() if board is None else board.copy()
    agents = {Piece.WHITE: white, Piece.BLACK: black}
    record = GameRecord()

    while board.winner() is None:
        if max_moves is not None and len(record.moves) >= max_moves:
            break
        move = agents[board.turn].select_move(board)
        board.make_move(move)
        record.moves.append(move)
        logger.debug(f"Move {board.num_moves}: {move}")
        if on_move is not None:
            on_move(board, move)

    record.winner = board.winner()
    record.board = board
    logger.info(
        f"Game finished after {len(record.moves)} moves, winner: "
        f"{record.winner.name if record.winner else 'none'}"
    )
    return record


@dataclass
class BenchmarkPosition:
    """
    A named position for timing the search.

    Attributes:
        id: Position identifier
        white: White queen squares
        black: Black queen squares
        spears: Spear squares
        turn: Side to move
        description: Human-readable description
    """
    id: str
    white: Sequence[str]
    black: Sequence[str]
    spears: Sequence[str] = ()
    turn: Piece = Piece.WHITE
    description: str = ""

    def board(self) -> Board:
        return Board.from_pieces(self.white, self.black, self.spears, self.turn)


@dataclass
class BenchmarkResult:
    """Result of searching one benchmark position."""
    position: BenchmarkPosition
    move: Move
    score: int
    nodes: int
    time_taken: float
    depth: int


BENCHMARK_POSITIONS = [
    BenchmarkPosition(
        id="AM.01",
        white=["c3"],
        black=["h8"],
        spears=["e5", "f6", "e6", "f5"],
        description="One queen each, central block",
    ),
    BenchmarkPosition(
        id="AM.02",
        white=["a1", "j1"],
        black=["a10", "j10"],
        spears=["b2", "i2", "b9", "i9", "e5", "f6"],
        turn=Piece.BLACK,
        description="Corner queens behind diagonal spears",
    ),
    BenchmarkPosition(
        id="AM.03",
        white=["b2"],
        black=["b4"],
        spears=["a1", "a2", "a3", "b1", "c1", "c2", "c3",
                "a4", "a5", "b5", "c5", "c4"],
        description="Both queens walled in around one shared exit (b3)",
    ),
]


def run_benchmark(
    depth: int,
    evaluator: Optional[Evaluator] = None,
    positions: Optional[Sequence[BenchmarkPosition]] = None,
) -> List[BenchmarkResult]:
    """
    Search every benchmark position at a fixed depth.

    Args:
        depth: Search depth
        evaluator: Position evaluation (default: MobilityEvaluator)
        positions: Positions to search (default: BENCHMARK_POSITIONS)

    Returns:
        One BenchmarkResult per position
    """
    results = []
    for position in positions or BENCHMARK_POSITIONS:
        start = time.monotonic()
        result = find_best_move(position.board(), depth, evaluator)
        time_taken = time.monotonic() - start
        results.append(BenchmarkResult(
            position=position,
            move=result.move,
            score=result.score,
            nodes=result.nodes,
            time_taken=time_taken,
            depth=depth,
        ))
        logger.info(
            f"{position.id}: {result.move} score={result.score} "
            f"nodes={result.nodes:,} time={time_taken:.2f}s"
        )
    return results
