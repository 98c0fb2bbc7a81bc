"""
Minimax search with alpha-beta pruning.

O is always the maximizing player and X the minimizing one, so scores
are absolute: +1 means O wins, -1 means X wins and 0 is a draw under
best play from both sides.

The search works on one GameState in place. Every level places a mark,
recurses and takes the mark back before trying the next cell, so the
board is unchanged when a call returns.
"""

from typing import Optional
from dataclasses import dataclass

from .game_state import GameState, Player


MAX_PLAYER = Player.O
MIN_PLAYER = Player.X

WIN_SCORE = 1
LOSS_SCORE = -1
DRAW_SCORE = 0


@dataclass
class SearchResult:
    """
    Score of a position and the move that achieves it.

    best_move is None for terminal positions, where there is
    nothing left to play.
    """
    score: int
    best_move: Optional[int] = None


@dataclass
class SearchStats:
    """Counts how much of the game tree a search visited."""
    positions: int = 0
    cutoffs: int = 0


def terminal_score(state: GameState) -> Optional[int]:
    """
    Score a finished position.

    Returns:
        +1 if O has a line, -1 if X has a line, 0 if the board is
        full, or None if the game is still going.
    """
    if state.winner(MAX_PLAYER) is not None:
        return WIN_SCORE
    if state.winner(MIN_PLAYER) is not None:
        return LOSS_SCORE
    if not state.empty_cells():
        return DRAW_SCORE
    return None


def evaluate(
    state: GameState,
    maximizing: bool,
    alpha: float = float('-inf'),
    beta: float = float('inf'),
    stats: Optional[SearchStats] = None
) -> SearchResult:
    """
    Minimax algorithm with alpha-beta pruning.

    Args:
        state: Position to search. Mutated during the call and
            restored before it returns.
        maximizing: True if O is to move.
        alpha: Score O can already guarantee higher up the tree.
        beta: Score X can already guarantee higher up the tree.
        stats: Optional counters to update.

    Returns:
        SearchResult with the score and the lowest-index best move.
    """
    if stats is not None:
        stats.positions += 1

    score = terminal_score(state)
    if score is not None:
        return SearchResult(score)

    player = MAX_PLAYER if maximizing else MIN_PLAYER
    best = SearchResult(float('-inf') if maximizing else float('inf'))

    for pos in state.empty_cells():
        state.apply_move(pos, player)
        result = evaluate(state, not maximizing, alpha, beta, stats).score
        state.undo_move(pos)

        # Only a strict improvement replaces the best move,
        # so ties go to the lowest index.
        if maximizing:
            if result > best.score:
                best = SearchResult(result, pos)
            if result > alpha:
                alpha = result
        else:
            if result < best.score:
                best = SearchResult(result, pos)
            if result < beta:
                beta = result

        if alpha >= beta:
            if stats is not None:
                stats.cutoffs += 1
            break

    return best


def minimax(state: GameState, maximizing: bool) -> SearchResult:
    """
    Plain minimax without pruning.

    Visits the whole tree, so it is only useful as a reference to
    check evaluate() against.
    """
    score = terminal_score(state)
    if score is not None:
        return SearchResult(score)

    player = MAX_PLAYER if maximizing else MIN_PLAYER
    best = SearchResult(float('-inf') if maximizing else float('inf'))

    for pos in state.empty_cells():
        state.apply_move(pos, player)
        result = minimax(state, not maximizing).score
        state.undo_move(pos)

        if (maximizing and result > best.score) or (not maximizing and result < best.score):
            best = SearchResult(result, pos)

    return best


def search(state: GameState, stats: Optional[SearchStats] = None) -> SearchResult:
    """
    Search a position for the side to move, with a full window.

    Works on a copy, so the caller's board is never touched.
    """
    return evaluate(
        state.copy(),
        maximizing=state.current_player == MAX_PLAYER,
        stats=stats
    )
