"""Business logic for selling tickets, drawing numbers and paying out prizes."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from threading import Lock

from lottery.errors import DrawNotAvailable, IndexOutOfRange, InvalidName, InvalidPrizeSchedule
from lottery.models.state import RoundState
from lottery.models.ticket import TicketReceipt
from lottery.models.winner import WinnerRecord
from lottery.services.prize_distribution import distribute_prizes
from lottery.services.random_source import RandomSource, default_random_source

logger = logging.getLogger(__name__)

NUM_BALLS = 50
TICKET_PRICE = 10
STARTING_PRIZE_POT = 200

DEFAULT_PRIZE_SCHEDULE: tuple[float, ...] = (0.75, 0.15, 0.10)

SCHEDULE_TOLERANCE = 1e-6


def validate_prize_schedule(prize_schedule: Sequence[float], num_balls: int = NUM_BALLS) -> tuple[float, ...]:
    """Return the schedule as a tuple or raise ``InvalidPrizeSchedule``."""

    try:
        weights = tuple(float(w) for w in prize_schedule)
    except (TypeError, ValueError) as exc:
        raise InvalidPrizeSchedule(
            message="Prize schedule must be a sequence of numbers",
            details={"prize_schedule": [str(exc)]},
        ) from exc

    if not weights:
        raise InvalidPrizeSchedule(details={"prize_schedule": ["At least one rank is required"]})

    if any(not (0.0 <= w <= 1.0) for w in weights):
        raise InvalidPrizeSchedule(details={"prize_schedule": ["Every weight must be within 0.0..1.0"]})

    total = math.fsum(weights)
    if not math.isclose(total, 1.0, rel_tol=0.0, abs_tol=SCHEDULE_TOLERANCE):
        raise InvalidPrizeSchedule(details={"prize_schedule": [f"Weights add up to {total}, expected 1.0"]})

    if len(weights) > num_balls:
        raise InvalidPrizeSchedule(
            message="More prize ranks than balls",
            details={"prize_schedule": [f"At most {num_balls} ranks can be drawn from {num_balls} balls"]},
        )

    return weights


class LotteryMachine:
    """Ticket pool, prize pot and latest results for one lottery.

    All round state lives in a ``RoundState`` owned by this machine; every
    public method holds the same lock for its full duration, so a single
    instance can be shared between request threads.
    """

    def __init__(
        self,
        prize_schedule: Sequence[float] = DEFAULT_PRIZE_SCHEDULE,
        *,
        num_balls: int = NUM_BALLS,
        rng: RandomSource | None = None,
    ) -> None:
        if num_balls < 1:
            raise InvalidPrizeSchedule(
                message="Invalid ball count",
                details={"num_balls": ["Must be >= 1"]},
            )

        self._prize_schedule = validate_prize_schedule(prize_schedule, num_balls)
        self._num_balls = num_balls
        self._rng = rng if rng is not None else default_random_source()
        self._lock = Lock()
        self._state = RoundState.initial(STARTING_PRIZE_POT, len(self._prize_schedule))

    @property
    def prize_schedule(self) -> tuple[float, ...]:
        return self._prize_schedule

    @property
    def num_balls(self) -> int:
        return self._num_balls

    @property
    def winner_count(self) -> int:
        return len(self._prize_schedule)

    def _random_number(self) -> int:
        return int(self._rng.randint(1, self._num_balls))

    def _copy_state(self) -> RoundState:
        state = self._state
        return RoundState(
            prize_pot=state.prize_pot,
            tickets=dict(state.tickets),
            latest_draw_numbers=list(state.latest_draw_numbers),
            latest_winners=list(state.latest_winners),
        )

    def sell_ticket(self, name: str | None) -> TicketReceipt:
        """Sell one ticket to ``name``; the receipt carries the pot right after the sale.

        Raises ``InvalidName`` for a blank name and ``DrawNotAvailable`` once
        every number of the round is taken. Neither mutates anything.
        """

        if not isinstance(name, str) or not name.strip():
            raise InvalidName()
        name = name.strip()

        with self._lock:
            tickets = self._state.tickets
            if len(tickets) >= self._num_balls:
                raise DrawNotAvailable(details={"tickets_sold": len(tickets)})

            number = self._random_number()
            while number in tickets:
                number = self._random_number()

            tickets[number] = name
            self._state.prize_pot += TICKET_PRICE

            logger.debug("Ticket %s sold to %s (pot=%s)", number, name, self._state.prize_pot)
            return TicketReceipt(number=number, name=name, prize_pot=self._state.prize_pot)

    def purchase_ticket(self, name: str | None) -> int:
        """Sell one ticket to ``name`` and return its number."""

        return self.sell_ticket(name).number

    def draw_round(self) -> RoundState:
        """Draw one distinct number per rank, pay out, and start a new round.

        Returns a detached copy of the state as it stands after this draw.
        """

        with self._lock:
            drawn: list[int] = []
            while len(drawn) < len(self._prize_schedule):
                number = self._random_number()
                if number not in drawn:
                    drawn.append(number)

            state = self._state
            winners, total_payout = distribute_prizes(
                state.tickets, drawn, self._prize_schedule, state.prize_pot
            )

            logger.info(
                "Draw %s: %d tickets sold, paid %d of %d",
                drawn,
                len(state.tickets),
                total_payout,
                state.prize_pot,
            )

            state.prize_pot -= total_payout
            state.latest_draw_numbers = drawn
            state.latest_winners = winners
            state.tickets = {}

            return self._copy_state()

    def draw(self) -> list[int]:
        """Run a draw; numbers come back in rank order, first place first."""

        return self.draw_round().latest_draw_numbers

    def get_prize_pot(self) -> int:
        with self._lock:
            return self._state.prize_pot

    def get_latest_draw_numbers(self) -> list[int]:
        with self._lock:
            return list(self._state.latest_draw_numbers)

    def get_latest_winners(self) -> list[WinnerRecord]:
        with self._lock:
            return list(self._state.latest_winners)

    def snapshot(self) -> RoundState:
        """Consistent copy of the whole round state."""

        with self._lock:
            return self._copy_state()

    def get_tickets(self) -> dict[int, str]:
        """Tickets sold so far in the current round."""

        with self._lock:
            return dict(self._state.tickets)

    def get_latest_winner(self, rank: int) -> WinnerRecord:
        """Winner record of ``rank`` from the latest draw."""

        if not 0 <= rank < len(self._prize_schedule):
            raise IndexOutOfRange(
                message=f"Rank {rank} out of range",
                details={"rank": [f"Must be within 0..{len(self._prize_schedule) - 1}"]},
            )
        with self._lock:
            return self._state.latest_winners[rank]

    def get_latest_nth_place_winner(self, rank: int) -> str:
        return self.get_latest_winner(rank).name

    def get_latest_nth_place_winnings(self, rank: int) -> int:
        return self.get_latest_winner(rank).winnings
