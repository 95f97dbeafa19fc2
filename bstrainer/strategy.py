"""Basic strategy charts and the correct play for a given hand."""

from __future__ import annotations

from enum import IntEnum

from .settings import Settings


class Action(IntEnum):
    """A cell in a basic strategy chart."""

    HIT = 0
    STAND = 1
    DOUBLE = 2
    DOUBLE_OR_STAND = 3
    NO_SPLIT = 4
    SPLIT = 5
    SPLIT_IF_DAS = 6
    SURRENDER = 7


_H = Action.HIT
_S = Action.STAND
_D = Action.DOUBLE
_DS = Action.DOUBLE_OR_STAND
_N = Action.NO_SPLIT
_Y = Action.SPLIT
_YN = Action.SPLIT_IF_DAS

# Columns: dealer up card A, 2, 3, ..., 10. Rows: player hard total 8..17.
HARD_TOTALS_H17 = (
    (_H, _H, _H, _H, _H, _H, _H, _H, _H, _H),
    (_H, _H, _D, _D, _D, _D, _H, _H, _H, _H),
    (_H, _D, _D, _D, _D, _D, _D, _D, _D, _H),
    (_D, _D, _D, _D, _D, _D, _D, _D, _D, _D),
    (_H, _H, _S, _S, _S, _S, _H, _H, _H, _H),
    (_H, _S, _S, _S, _S, _S, _H, _H, _H, _H),
    (_H, _S, _S, _S, _S, _S, _H, _H, _H, _H),
    (_H, _S, _S, _S, _S, _S, _H, _H, _H, _H),
    (_H, _S, _S, _S, _S, _S, _H, _H, _H, _H),
    (_S, _S, _S, _S, _S, _S, _S, _S, _S, _S),
)

HARD_TOTALS_S17 = (
    (_H, _H, _H, _H, _H, _H, _H, _H, _H, _H),
    (_H, _D, _D, _D, _D, _D, _H, _H, _H, _H),
    (_H, _D, _D, _D, _D, _D, _D, _D, _D, _H),
    (_H, _D, _D, _D, _D, _D, _D, _D, _D, _D),
    (_H, _H, _S, _S, _S, _S, _H, _H, _H, _H),
    (_H, _S, _S, _S, _S, _S, _H, _H, _H, _H),
    (_H, _S, _S, _S, _S, _S, _H, _H, _H, _H),
    (_H, _S, _S, _S, _S, _S, _H, _H, _H, _H),
    (_H, _S, _S, _S, _S, _S, _H, _H, _H, _H),
    (_S, _S, _S, _S, _S, _S, _S, _S, _S, _S),
)

# Late surrender: rows are hard totals 15..17 (H17) and 14..16 (S17).
SURRENDER_H17 = (
    (True, False, False, False, False, False, False, False, False, True),
    (True, False, False, False, False, False, False, False, True, True),
    (True, False, False, False, False, False, False, False, False, False),
)
_SURRENDER_H17_FIRST = 15

SURRENDER_S17 = (
    (False, False, False, False, False, False, False, False, False, False),
    (False, False, False, False, False, False, False, False, False, True),
    (True, False, False, False, False, False, False, False, True, True),
)
_SURRENDER_S17_FIRST = 14

# Rows: A,2 .. A,9 (second card 2..9).
SOFT_TOTALS_H17 = (
    (_H, _H, _H, _H, _D, _D, _H, _H, _H, _H),
    (_H, _H, _H, _H, _D, _D, _H, _H, _H, _H),
    (_H, _H, _H, _D, _D, _D, _H, _H, _H, _H),
    (_H, _H, _H, _D, _D, _D, _H, _H, _H, _H),
    (_H, _H, _D, _D, _D, _D, _H, _H, _H, _H),
    (_H, _DS, _DS, _DS, _DS, _DS, _S, _S, _H, _H),
    (_S, _S, _S, _S, _S, _DS, _S, _S, _S, _S),
    (_S, _S, _S, _S, _S, _S, _S, _S, _S, _S),
)

SOFT_TOTALS_S17 = (
    (_H, _H, _H, _H, _D, _D, _H, _H, _H, _H),
    (_H, _H, _H, _H, _D, _D, _H, _H, _H, _H),
    (_H, _H, _H, _D, _D, _D, _H, _H, _H, _H),
    (_H, _H, _H, _D, _D, _D, _H, _H, _H, _H),
    (_H, _H, _D, _D, _D, _D, _H, _H, _H, _H),
    (_H, _S, _DS, _DS, _DS, _DS, _S, _S, _H, _H),
    (_S, _S, _S, _S, _S, _S, _S, _S, _S, _S),
    (_S, _S, _S, _S, _S, _S, _S, _S, _S, _S),
)

# Rows: pair of A, 2, ..., 10.
PAIR_SPLITTING = (
    (_Y, _Y, _Y, _Y, _Y, _Y, _Y, _Y, _Y, _Y),
    (_N, _YN, _YN, _Y, _Y, _Y, _Y, _N, _N, _N),
    (_N, _YN, _YN, _Y, _Y, _Y, _Y, _N, _N, _N),
    (_N, _N, _N, _N, _YN, _YN, _N, _N, _N, _N),
    (_N, _N, _N, _N, _N, _N, _N, _N, _N, _N),
    (_N, _YN, _Y, _Y, _Y, _Y, _N, _N, _N, _N),
    (_N, _Y, _Y, _Y, _Y, _Y, _Y, _N, _N, _N),
    (_Y, _Y, _Y, _Y, _Y, _Y, _Y, _Y, _Y, _Y),
    (_N, _Y, _Y, _Y, _Y, _Y, _N, _Y, _Y, _N),
    (_N, _N, _N, _N, _N, _N, _N, _N, _N, _N),
)

_PLAY_LETTERS = {
    Action.HIT: "H",
    Action.STAND: "S",
    Action.DOUBLE: "D",
    Action.DOUBLE_OR_STAND: "D",
}


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} must be between {low} and {high}, got {value}")


def card_label(rank: int) -> str:
    """Return the printed label of a card rank: 'A' for 1, else the number."""
    _check_range("rank", rank, 1, 10)
    return "A" if rank == 1 else str(rank)


def hard_total_answer(total: int, upcard: int, settings: Settings) -> str:
    """Return 'H', 'S', 'D' or 'R' for a hard ``total`` (8-17) against ``upcard`` (1-10)."""
    _check_range("total", total, 8, 17)
    _check_range("upcard", upcard, 1, 10)
    column = upcard - 1
    if settings.surrender:
        if settings.h17:
            table, first = SURRENDER_H17, _SURRENDER_H17_FIRST
        else:
            table, first = SURRENDER_S17, _SURRENDER_S17_FIRST
        row = total - first
        if 0 <= row < len(table) and table[row][column]:
            return "R"
    chart = HARD_TOTALS_H17 if settings.h17 else HARD_TOTALS_S17
    return _PLAY_LETTERS[chart[total - 8][column]]


def soft_total_answer(second_card: int, upcard: int, settings: Settings) -> str:
    """Return 'H', 'S' or 'D' for A plus ``second_card`` (2-9) against ``upcard`` (1-10)."""
    _check_range("second_card", second_card, 2, 9)
    _check_range("upcard", upcard, 1, 10)
    chart = SOFT_TOTALS_H17 if settings.h17 else SOFT_TOTALS_S17
    return _PLAY_LETTERS[chart[second_card - 2][upcard - 1]]


def pair_split_answer(pair_rank: int, upcard: int, settings: Settings) -> str:
    """Return 'Y' if a pair of ``pair_rank`` (1-10) should be split against ``upcard``, else 'N'."""
    _check_range("pair_rank", pair_rank, 1, 10)
    _check_range("upcard", upcard, 1, 10)
    cell = PAIR_SPLITTING[pair_rank - 1][upcard - 1]
    if cell is Action.SPLIT:
        return "Y"
    if cell is Action.SPLIT_IF_DAS:
        return "Y" if settings.das else "N"
    return "N"