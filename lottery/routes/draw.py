"""Draw and winner routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint

from lottery.models.state import RoundState
from lottery.runtime import get_machine
from lottery.schemas.lottery import DrawResultSchema, PrizePotSchema, WinnerSchema
from lottery.utils.responses import ok


draw_bp = Blueprint("draw", __name__)

_result_schema = DrawResultSchema()
_winner_schema = WinnerSchema()
_pot_schema = PrizePotSchema()


def _draw_result(state: RoundState) -> dict:
    winners = [
        {"rank": rank, "name": record.name, "winnings": record.winnings}
        for rank, record in enumerate(state.latest_winners)
    ]
    return {
        "numbers": state.latest_draw_numbers,
        "winners": winners,
        "prize_pot": state.prize_pot,
    }


@draw_bp.post("/draws")
def run_draw():
    return ok(_result_schema.dump(_draw_result(get_machine().draw_round())))


@draw_bp.get("/draws/latest")
def latest_draw():
    return ok(_result_schema.dump(_draw_result(get_machine().snapshot())))


@draw_bp.get("/winners/<int:rank>")
def latest_winner(rank: int):
    record = get_machine().get_latest_winner(rank)
    return ok(_winner_schema.dump({"rank": rank, "name": record.name, "winnings": record.winnings}))


@draw_bp.get("/pot")
def prize_pot():
    return ok(_pot_schema.dump({"prize_pot": get_machine().get_prize_pot()}))
