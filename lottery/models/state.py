"""Round state owned by a single lottery machine."""

from __future__ import annotations

from dataclasses import dataclass, field

from lottery.models.winner import WinnerRecord


@dataclass
class RoundState:
    """Everything a draw cycle mutates.

    ``tickets`` maps ticket number to purchaser name and only lives for the
    current round. ``latest_draw_numbers`` and ``latest_winners`` are parallel
    lists in rank order (first place first) and are replaced wholesale by
    every draw.
    """

    prize_pot: int
    tickets: dict[int, str] = field(default_factory=dict)
    latest_draw_numbers: list[int] = field(default_factory=list)
    latest_winners: list[WinnerRecord] = field(default_factory=list)

    @classmethod
    def initial(cls, prize_pot: int, winner_count: int) -> "RoundState":
        return cls(
            prize_pot=prize_pot,
            latest_winners=[WinnerRecord.no_winner() for _ in range(winner_count)],
        )
