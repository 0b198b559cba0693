"""
Challenge endpoints: listing, completion toggle, enable/disable
"""
from fastapi import APIRouter, Depends, Request

from scoreboard.api.deps import ensure_applied, get_scoreboard, read_payload
from scoreboard.scoring import toggle_challenge_completion, toggle_challenge_enablement
from scoreboard.state import Scoreboard


router = APIRouter(prefix="/api", tags=["challenges"])


@router.get("/challenges")
async def list_challenges(board: Scoreboard = Depends(get_scoreboard)):
    """All challenges with their winners"""
    return board.store.challenges_payload()


@router.post("/validate")
async def validate_challenge(request: Request, board: Scoreboard = Depends(get_scoreboard)):
    """
    Toggle a team's completion of a challenge

    Request:
        {"teamId": "t1", "challengeId": "c1"}
    """
    body = await read_payload(request)

    with board.store.lock:
        result = toggle_challenge_completion(board.store, body.get("teamId"), body.get("challengeId"))
        ensure_applied(result)
        return {
            "success": True,
            "teams": board.store.teams_payload(),
            "challenges": board.store.challenges_payload(),
        }


@router.post("/toggleDisabled")
async def toggle_disabled(request: Request, board: Scoreboard = Depends(get_scoreboard)):
    """
    Disable or re-enable a challenge

    Request:
        {"challengeId": "c1"}
    """
    body = await read_payload(request)

    with board.store.lock:
        result = toggle_challenge_enablement(board.store, body.get("challengeId"))
        ensure_applied(result)
        return {
            "success": True,
            "challenges": board.store.challenges_payload(),
            "teams": board.store.teams_payload(),
        }
