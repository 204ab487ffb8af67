"""Health check routes."""

from __future__ import annotations

from flask import Blueprint

from lottery.runtime import get_machine
from lottery.utils.responses import ok

health_bp = Blueprint("health", __name__)


@health_bp.get("/health")
def health_check():
    """Health check endpoint; also reports the machine's shape."""

    machine = get_machine()
    return ok({"status": "ok", "num_balls": machine.num_balls, "winner_count": machine.winner_count})
