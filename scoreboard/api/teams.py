"""Team endpoints: listing, personal points, player swaps"""
from fastapi import APIRouter, Depends, Request

from scoreboard.api.deps import ensure_applied, get_scoreboard, read_payload
from scoreboard.scoring import award_personal_points, swap_players
from scoreboard.state import Scoreboard


router = APIRouter(prefix="/api", tags=["teams"])


@router.get("/teams")
async def list_teams(board: Scoreboard = Depends(get_scoreboard)):
    return board.store.teams_payload()


@router.post("/addPersonalPoints")
async def add_personal_points(request: Request, board: Scoreboard = Depends(get_scoreboard)):
    """
    Request:
        {"teamId": "t1", "playerId": "p1", "amount": 5}
    """
    body = await read_payload(request)

    with board.store.lock:
        result = award_personal_points(
            board.store, body.get("teamId"), body.get("playerId"), body.get("amount")
        )
        ensure_applied(result)
        return {"success": True, "teams": board.store.teams_payload()}


@router.post("/swapPlayers")
async def swap(request: Request, board: Scoreboard = Depends(get_scoreboard)):
    """
    Request:
        {"playerId": "p1", "targetTeamId": "t2", "targetPlayerId": "p4"}
    """
    body = await read_payload(request)

    with board.store.lock:
        result = swap_players(
            board.store,
            body.get("playerId"),
            body.get("targetTeamId"),
            body.get("targetPlayerId"),
        )
        ensure_applied(result)
        return {"success": True, "teams": board.store.teams_payload()}
