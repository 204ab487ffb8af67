"""Winner record produced by each draw."""

from __future__ import annotations

from dataclasses import dataclass

NO_WINNER = "N/A"


@dataclass(frozen=True)
class WinnerRecord:
    """Name of the ticket holder for one rank and what they won."""

    name: str
    winnings: int

    @classmethod
    def no_winner(cls) -> "WinnerRecord":
        return cls(name=NO_WINNER, winnings=0)

    @property
    def is_winner(self) -> bool:
        return self.name != NO_WINNER
