"""Value types for the lottery machine."""

from lottery.models.state import RoundState
from lottery.models.ticket import TicketReceipt
from lottery.models.winner import NO_WINNER, WinnerRecord

__all__ = ["NO_WINNER", "RoundState", "TicketReceipt", "WinnerRecord"]
