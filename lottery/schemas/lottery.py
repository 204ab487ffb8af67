"""Schemas for the lottery API."""

from __future__ import annotations

from marshmallow import Schema, fields


class PurchaseRequestSchema(Schema):
    # Blank or missing names are rejected by the machine itself.
    name = fields.String(required=False, load_default=None, allow_none=True)


class TicketSchema(Schema):
    number = fields.Integer(required=True)
    name = fields.String(required=True)


class PurchaseResponseSchema(TicketSchema):
    prize_pot = fields.Integer(required=True)


class WinnerSchema(Schema):
    rank = fields.Integer(required=True)
    name = fields.String(required=True)
    winnings = fields.Integer(required=True)


class DrawResultSchema(Schema):
    numbers = fields.List(fields.Integer(), required=True)
    winners = fields.List(fields.Nested(WinnerSchema), required=True)
    prize_pot = fields.Integer(required=True)


class PrizePotSchema(Schema):
    prize_pot = fields.Integer(required=True)
