"""
Seed data loader from JSON files
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from pydantic import ValidationError

from scoreboard.models import Challenge, HintSchedule, HintWindow, SeedSnapshot, Team


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class SeedDataError(ValueError):
    """Seed files are unreadable or break a state invariant"""


def _read_json(path: PathLike) -> Any:
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Seed file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise SeedDataError(f"{path}: invalid JSON ({e})") from e


def parse_teams(raw: Any) -> List[Team]:
    """
    Parse the teams seed

    Format:
        [{"id": "t1", "name": "Red", "points": 0, "completedChallenges": [],
          "players": [{"id": "p1", "name": "Ada", "personalPoints": 0}]}]
    """
    if not isinstance(raw, list):
        raise SeedDataError("teams seed must be a JSON array")
    try:
        return [Team.model_validate(item) for item in raw]
    except ValidationError as e:
        raise SeedDataError(f"invalid team entry: {e}") from e


def parse_challenges(raw: Any) -> List[Challenge]:
    """
    Parse the challenges seed

    Format:
        [{"id": "c1", "points": 10, "type": "normal", "disabled": false, "winners": []}]
    """
    if not isinstance(raw, list):
        raise SeedDataError("challenges seed must be a JSON array")
    try:
        return [Challenge.model_validate(item) for item in raw]
    except ValidationError as e:
        raise SeedDataError(f"invalid challenge entry: {e}") from e


def parse_hints(raw: Any) -> HintSchedule:
    """
    Parse the hint schedule

    Format (challenge id -> hint groups -> windows):
        {"c3": [[{"text": "Look up", "revealAt": "2024-01-01T10:00:00Z",
                  "endAt": "2024-01-01T10:05:00Z"}]]}

    The challenge id of every window comes from its key.
    """
    if not isinstance(raw, dict):
        raise SeedDataError("hints seed must be a JSON object keyed by challenge id")

    schedule: HintSchedule = {}
    for challenge_id, groups in raw.items():
        if not isinstance(groups, list) or not all(isinstance(g, list) for g in groups):
            raise SeedDataError(f"hints for {challenge_id}: expected a list of hint groups")
        try:
            schedule[challenge_id] = [
                [
                    HintWindow.model_validate({**window, "challengeId": challenge_id})
                    for window in group
                ]
                for group in groups
            ]
        except (TypeError, ValidationError) as e:
            raise SeedDataError(f"invalid hint for {challenge_id}: {e}") from e
    return schedule


def check_consistency(teams: List[Team], challenges: List[Challenge]) -> None:
    """
    Reject seeds that already break the invariants the scoring rules rely on

    Raises:
        SeedDataError: On duplicate ids, a player on two rosters, unknown
            references, more than one winner on an exclusive challenge,
            winners/completed lists that disagree on an enabled challenge, or
            a disabled challenge completed by a team that is not a winner
    """
    team_ids = [t.id for t in teams]
    if len(set(team_ids)) != len(team_ids):
        raise SeedDataError("duplicate team id in teams seed")

    challenge_ids = [c.id for c in challenges]
    if len(set(challenge_ids)) != len(challenge_ids):
        raise SeedDataError("duplicate challenge id in challenges seed")

    owners: Dict[str, str] = {}
    for team in teams:
        for player in team.players:
            if player.id in owners:
                raise SeedDataError(
                    f"player {player.id} appears on teams {owners[player.id]} and {team.id}"
                )
            owners[player.id] = team.id

    known_teams = set(team_ids)
    known_challenges = set(challenge_ids)
    for team in teams:
        unknown = [cid for cid in team.completed_challenges if cid not in known_challenges]
        if unknown:
            raise SeedDataError(f"team {team.id} completed unknown challenges {unknown}")

    for challenge in challenges:
        unknown = [tid for tid in challenge.winners if tid not in known_teams]
        if unknown:
            raise SeedDataError(f"challenge {challenge.id} has unknown winners {unknown}")
        if challenge.is_exclusive and len(challenge.winners) > 1:
            raise SeedDataError(
                f"exclusive challenge {challenge.id} has {len(challenge.winners)} winners"
            )
        holders = {t.id for t in teams if challenge.id in t.completed_challenges}
        if challenge.disabled:
            # winners lose the credit while disabled; nobody else may hold it
            extra = holders - set(challenge.winners)
            if extra:
                raise SeedDataError(
                    f"disabled challenge {challenge.id} completed by non-winners {sorted(extra)}"
                )
            continue
        if holders != set(challenge.winners):
            raise SeedDataError(
                f"challenge {challenge.id}: winners {sorted(challenge.winners)} "
                f"do not match completing teams {sorted(holders)}"
            )


def load_seed(teams_path: PathLike, challenges_path: PathLike, hints_path: PathLike) -> SeedSnapshot:
    """
    Load teams, challenges and hint schedule

    Args:
        teams_path: Path to teams JSON
        challenges_path: Path to challenges JSON
        hints_path: Path to hints JSON

    Returns:
        Fresh SeedSnapshot

    Raises:
        FileNotFoundError: If a seed file is missing
        SeedDataError: If a seed file is malformed or inconsistent
    """
    teams = parse_teams(_read_json(teams_path))
    challenges = parse_challenges(_read_json(challenges_path))
    hints = parse_hints(_read_json(hints_path))

    check_consistency(teams, challenges)

    logger.info(
        f"Loaded {len(teams)} teams, {len(challenges)} challenges, "
        f"{sum(len(g) for g in hints.values())} hint groups"
    )

    return SeedSnapshot(teams=teams, challenges=challenges, hints=hints)
