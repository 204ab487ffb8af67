"""Ticket routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, request

from lottery.runtime import get_machine
from lottery.schemas.lottery import PurchaseRequestSchema, PurchaseResponseSchema, TicketSchema
from lottery.utils.responses import ok

tickets_bp = Blueprint("tickets", __name__)

_request_schema = PurchaseRequestSchema()
_response_schema = PurchaseResponseSchema()
_tickets_schema = TicketSchema(many=True)


@tickets_bp.get("/tickets")
def list_tickets():
    """Tickets sold in the current round."""

    tickets = get_machine().get_tickets()
    rows = [{"number": number, "name": name} for number, name in sorted(tickets.items())]
    return ok(_tickets_schema.dump(rows))


@tickets_bp.post("/tickets")
def purchase_ticket():
    """Sell a ticket to the named participant."""

    payload = request.get_json(silent=True) or {}
    data = _request_schema.load(payload)

    receipt = get_machine().sell_ticket(data.get("name"))
    return ok(_response_schema.dump(receipt), status_code=201)
