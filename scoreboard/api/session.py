"""
Session endpoints: suspense mode and pause
"""
from fastapi import APIRouter, Depends, Request

from scoreboard.api.deps import get_scoreboard, read_payload
from scoreboard.state import Scoreboard


router = APIRouter(prefix="/api", tags=["session"])


@router.get("/state")
async def get_state(board: Scoreboard = Depends(get_scoreboard)):
    """Current {suspenseMode, pauseUntil}"""
    return board.session.get_state().to_wire()


@router.post("/setSuspense")
async def set_suspense(request: Request, board: Scoreboard = Depends(get_scoreboard)):
    """
    Request:
        {"active": true}
    """
    body = await read_payload(request)
    state = board.session.set_suspense_mode(body.get("active"))
    return {"success": True, "suspenseMode": state.suspense_mode}


@router.post("/setPause")
async def set_pause(request: Request, board: Scoreboard = Depends(get_scoreboard)):
    """
    Start a pause until resumeAt, or cancel it with an empty value

    Request:
        {"resumeAt": "2024-01-01T10:00:00Z"}
    """
    body = await read_payload(request)
    state = board.session.set_pause(body.get("resumeAt"))
    return {"success": True, "pauseUntil": state.pause_until}
