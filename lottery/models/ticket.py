"""Receipt handed out for a sold ticket."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TicketReceipt:
    number: int
    name: str
    prize_pot: int
