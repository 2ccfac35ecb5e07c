"""
Minimax Search with Alpha-Beta Pruning

This module implements the move selection of the automated player: a
depth-limited minimax over the move tree, with alpha-beta pruning.

Key Concepts:
    - Sense: +1 at nodes where White moves (maximize), -1 where Black moves
    - Alpha-Beta: stop searching a node's moves once its value can no
      longer change the choice made higher up
    - Depth schedule: Amazons positions lose moves as spears pile up, so the
      search goes deeper as the game advances

Board Discipline:
    The search works on a private copy of the caller's board. Each child is
    explored inside `with board.applied(move)`, so every apply is matched by
    exactly one undo, including when a deadline unwinds the search.

Tie-Breaking:
    A move replaces the best so far when its value is >= (maximizing) or
    <= (minimizing) the best value, so the LAST equally good move in
    enumeration order is chosen. Branches are cut only when beta < alpha:
    a sibling whose value ties the bound is still searched, otherwise a
    cut-off bound could tie the best value and be chosen over it. The usual
    `beta <= alpha` cutoff is not used here on purpose; do not switch to it
    without also changing the tie-break.

Algorithm Complexity:
    - Branching factor: 2176 at the opening, shrinking as spears block lines
    - Minimax: O(b^d); Alpha-Beta: O(b^(d/2)) with good move ordering

References:
    - Minimax: https://www.chessprogramming.org/Minimax
    - Alpha-Beta: https://www.chessprogramming.org/Alpha-Beta
"""

import logging
import time
from bisect import bisect_right
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from amazons_engine.board.board import Board
from amazons_engine.board.move import Move, Piece
from amazons_engine.config import SearchConfig
from amazons_engine.evaluation.base import INFINITY, Evaluator
from amazons_engine.evaluation.mobility import MobilityEvaluator
from amazons_engine.exceptions import NoLegalMoveError

logger = logging.getLogger(__name__)

DEPTH_THRESHOLDS = (20, 30, 40, 50)


class SearchTimeout(Exception):
    """Raised inside the search when the deadline has passed."""


@dataclass
class SearchContext:
    """
    Mutable state shared by all frames of one search.

    Attributes:
        nodes: Positions visited
        deadline: time.monotonic() value after which the search stops
        best_move: Move recorded by the root frame
        best_score: Value of best_move
    """
    nodes: int = 0
    deadline: Optional[float] = None
    best_move: Optional[Move] = None
    best_score: Optional[int] = None


@dataclass
class SearchResult:
    """
    Outcome of a root search.

    Attributes:
        move: Chosen move
        score: Value of the chosen move (White's perspective)
        nodes: Positions visited
        depth: Depth searched
        elapsed: Wall time in seconds
        completed: False if the deadline cut the search short
    """
    move: Move
    score: int
    nodes: int
    depth: int
    elapsed: float
    completed: bool = True


def max_depth(
    board: Union[Board, int], thresholds: Sequence[int] = DEPTH_THRESHOLDS
) -> int:
    """
    Return the search depth for a position.

    Depth is 1 before the first threshold and grows by one at each
    threshold: with the defaults, <20 moves -> 1, [20,30) -> 2,
    [30,40) -> 3, [40,50) -> 4, 50+ -> 5.

    Args:
        board: Board, or its move count
        thresholds: Increasing move counts
    """
    num_moves = board.num_moves if isinstance(board, Board) else board
    return 1 + bisect_right(thresholds, num_moves)


def minimax(
    board: Board,
    depth: int,
    save_move: bool,
    sense: int,
    alpha: int,
    beta: int,
    evaluator: Evaluator,
    context: Optional[SearchContext] = None,
    prune: bool = True,
) -> int:
    """
    Minimax search with alpha-beta pruning.

    Args:
        board: Position to search, mutated and restored in place
        depth: Remaining search depth
        save_move: Record the best move in context (root frame only)
        sense: +1 if the side to move maximizes (White), -1 if it minimizes
        alpha: Best value the maximizer can already force
        beta: Best value the minimizer can already force
        evaluator: Static evaluation used at the leaves
        context: Node counter, deadline and root move slot
        prune: False searches the full tree (for verification)

    Returns:
        int: Value of the position from White's perspective

    Raises:
        SearchTimeout: If the context deadline has passed
    """
    if context is None:
        context = SearchContext()
    context.nodes += 1
    if context.deadline is not None and time.monotonic() >= context.deadline:
        raise SearchTimeout()

    if depth == 0 or board.winner() is not None:
        return evaluator.evaluate(board)

    best_value = -INFINITY if sense == 1 else INFINITY

    for move in board.legal_moves():
        with board.applied(move):
            value = minimax(
                board, depth - 1, False, -sense, alpha, beta, evaluator, context, prune
            )

        if sense == 1:
            if value < best_value:
                continue
            alpha = max(alpha, value)
        else:
            if value > best_value:
                continue
            beta = min(beta, value)

        best_value = value
        if save_move:
            context.best_move = move
            context.best_score = value
            logger.debug(f"Root move {move}: {value}")

        if prune and beta < alpha:
            break

    return best_value


def find_best_move(
    board: Board,
    depth: int,
    evaluator: Optional[Evaluator] = None,
    time_limit_ms: Optional[int] = None,
    prune: bool = True,
) -> SearchResult:
    """
    Find the best move for the side to move.

    The caller's board is not modified: the search runs on a copy.

    Args:
        board: Current position
        depth: Search depth (at least 1)
        evaluator: Position evaluation (default: MobilityEvaluator)
        time_limit_ms: Optional deadline; when it passes, the best root
            move found so far is returned
        prune: False disables alpha-beta cut-offs

    Returns:
        SearchResult

    Raises:
        NoLegalMoveError: If the side to move has no legal move
        ValueError: If depth < 1
    """
    if depth < 1:
        raise ValueError(f"depth must be at least 1, got {depth}")
    if not board.has_legal_move():
        raise NoLegalMoveError()

    evaluator = evaluator or MobilityEvaluator()
    search_board = board.copy()
    sense = 1 if board.turn is Piece.WHITE else -1

    context = SearchContext()
    start = time.monotonic()
    if time_limit_ms is not None:
        context.deadline = start + time_limit_ms / 1000.0

    completed = True
    try:
        score = minimax(
            search_board, depth, True, sense, -INFINITY, INFINITY,
            evaluator, context, prune,
        )
    except SearchTimeout:
        completed = False
        if context.best_move is None:
            context.best_move = next(board.legal_moves())
            context.best_score = evaluator.evaluate(board)
            logger.warning(f"Deadline hit before any move was searched, playing {context.best_move}")
        score = context.best_score

    elapsed = time.monotonic() - start
    logger.info(
        f"Search {'complete' if completed else 'stopped'}: depth={depth}, "
        f"best_move={context.best_move}, score={score}, nodes={context.nodes}, "
        f"time={elapsed * 1000:.0f}ms"
    )

    return SearchResult(
        move=context.best_move,
        score=score,
        nodes=context.nodes,
        depth=depth,
        elapsed=elapsed,
        completed=completed,
    )


class SearchAgent:
    """
    Automated player.

    Picks moves with find_best_move() at the depth given by the schedule
    (or SearchConfig.fixed_depth). The only state kept between calls is
    the last move found.

    Attributes:
        evaluator: Static evaluation
        config: Search settings
        last_found_move: Move returned by the last select_move() call
        last_result: Full SearchResult of that call
    """

    def __init__(
        self,
        evaluator: Optional[Evaluator] = None,
        config: Optional[SearchConfig] = None,
    ):
        self.evaluator = evaluator or MobilityEvaluator()
        self.config = config or SearchConfig()
        self.last_found_move: Optional[Move] = None
        self.last_result: Optional[SearchResult] = None

    def depth_for(self, board: Board) -> int:
        if self.config.fixed_depth is not None:
            return self.config.fixed_depth
        return max_depth(board, self.config.depth_thresholds)

    def select_move(self, board: Board) -> Move:
        """
        Return a move for the side to move on `board`.

        Raises:
            NoLegalMoveError: If the side to move has no legal move
        """
        result = find_best_move(
            board,
            self.depth_for(board),
            self.evaluator,
            time_limit_ms=self.config.time_limit_ms,
        )
        self.last_result = result
        self.last_found_move = result.move
        return result.move

    def __repr__(self) -> str:
        return f"SearchAgent(evaluator={self.evaluator!r}, config={self.config!r})"
