"""
Hint endpoint
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from scoreboard.api.deps import get_scoreboard
from scoreboard.hints import active_hints, parse_timestamp
from scoreboard.state import Scoreboard


router = APIRouter(prefix="/api", tags=["hints"])


@router.get("/tips")
async def list_tips(
    challenge_id: Optional[str] = Query(None, alias="challengeId"),
    now: Optional[str] = None,
    board: Scoreboard = Depends(get_scoreboard),
):
    """
    Hints currently visible, optionally for one challenge

    Query:
        challengeId: restrict to this challenge
        now: ISO timestamp to evaluate instead of the current time
    """
    at = None
    if now:
        at = parse_timestamp(now)
        if at is None:
            raise HTTPException(status_code=400, detail=f"Invalid 'now' timestamp: {now}")

    with board.store.lock:
        return active_hints(board.store.hints, now=at, challenge_id=challenge_id or None)
