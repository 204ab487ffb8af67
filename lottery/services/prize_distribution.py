"""Prize distribution for a single draw."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from decimal import Decimal

from lottery.models.winner import WinnerRecord

# Only this share of the pot is at stake in one draw; the rest rolls over.
DRAW_POT_SHARE = Decimal("0.5")


def rank_winnings(prize_pot: int, weight: float) -> int:
    """Winnings for a claimed rank, rounded up to a whole unit.

    The weight goes through ``repr`` so 0.15 means 0.15 and not the nearest
    binary float, otherwise ``ceil`` could add a unit on noise alone.
    """

    return math.ceil(Decimal(prize_pot) * DRAW_POT_SHARE * Decimal(repr(float(weight))))


def distribute_prizes(
    tickets: Mapping[int, str],
    drawn_numbers: Sequence[int],
    prize_schedule: Sequence[float],
    prize_pot: int,
) -> tuple[list[WinnerRecord], int]:
    """Match drawn numbers against sold tickets, rank by rank.

    Every rank is priced against the same pre-draw ``prize_pot``. Returns the
    winner records in rank order and the total amount paid out.
    """

    winners: list[WinnerRecord] = []
    total_payout = 0

    for number, weight in zip(drawn_numbers, prize_schedule):
        holder = tickets.get(number)
        if holder is None:
            winners.append(WinnerRecord.no_winner())
            continue

        winnings = rank_winnings(prize_pot, weight)
        winners.append(WinnerRecord(name=holder, winnings=winnings))
        total_payout += winnings

    return winners, total_payout
