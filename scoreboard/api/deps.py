"""
Shared request helpers for the API routers
"""
import json
from typing import Dict

from fastapi import HTTPException, Request

from scoreboard.models import OperationResult
from scoreboard.state import Scoreboard


def get_scoreboard(request: Request) -> Scoreboard:
    """FastAPI dependency: the Scoreboard installed at startup"""
    return request.app.state.scoreboard


async def read_payload(request: Request) -> Dict:
    """
    Parse the JSON body of a POST request

    Raises:
        HTTPException(400): If the body is not a JSON object
    """
    raw = await request.body()
    try:
        body = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise HTTPException(status_code=400, detail=f"Invalid JSON body: {e}") from e

    if not isinstance(body, dict):
        raise HTTPException(status_code=400, detail="JSON body must be an object")
    return body


def ensure_applied(result: OperationResult) -> None:
    """Turn a REJECTED result into a 400; APPLIED and IGNORED both pass"""
    if not result.success:
        raise HTTPException(status_code=400, detail=result.reason)
