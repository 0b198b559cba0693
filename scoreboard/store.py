"""
In-memory repository for teams, challenges and hint schedule

The live collections are replaced wholesale by reset() and otherwise only
mutated in place by the scoring engine. Every access that touches them goes
through `lock`.
"""
import logging
import threading
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from scoreboard.models import Challenge, HintSchedule, Player, SeedSnapshot, Team
from scoreboard.seed_loader import load_seed


logger = logging.getLogger(__name__)


class Repository:
    """Live game data seeded from the three JSON sources"""

    def __init__(
        self,
        teams_path: Union[str, Path],
        challenges_path: Union[str, Path],
        hints_path: Union[str, Path],
    ):
        self.teams_path = Path(teams_path)
        self.challenges_path = Path(challenges_path)
        self.hints_path = Path(hints_path)

        self.lock = threading.RLock()
        self.teams: List[Team] = []
        self.challenges: List[Challenge] = []
        self.hints: HintSchedule = {}

    def load(self) -> SeedSnapshot:
        """Read the seed sources into a fresh snapshot (live data untouched)"""
        return load_seed(self.teams_path, self.challenges_path, self.hints_path)

    def reset(self) -> None:
        """
        Discard every runtime mutation and install freshly loaded seed data

        The snapshot is read before taking the lock, so a failed load leaves
        the live collections as they were.
        """
        snapshot = self.load()
        with self.lock:
            self.teams = snapshot.teams
            self.challenges = snapshot.challenges
            self.hints = snapshot.hints
            drift = self.points_drift()

        for team_id, (stored, expected) in drift.items():
            logger.warning(
                f"Team {team_id} seeded with {stored} points, "
                f"challenges and players add up to {expected}"
            )

    def find_team(self, team_id) -> Optional[Team]:
        for team in self.teams:
            if team.id == team_id:
                return team
        return None

    def find_challenge(self, challenge_id) -> Optional[Challenge]:
        for challenge in self.challenges:
            if challenge.id == challenge_id:
                return challenge
        return None

    def find_player(self, player_id) -> Optional[Tuple[Team, int]]:
        """First (team, roster index) holding player_id across all teams"""
        for team in self.teams:
            for idx, player in enumerate(team.players):
                if player.id == player_id:
                    return team, idx
        return None

    def expected_points(self, team: Team) -> int:
        """Completed challenge points plus every player's personal points"""
        challenge_points = 0
        for challenge_id in team.completed_challenges:
            challenge = self.find_challenge(challenge_id)
            if challenge is not None:
                challenge_points += challenge.points
        return challenge_points + sum(p.personal_points for p in team.players)

    def points_drift(self) -> Dict[str, Tuple[int, int]]:
        """Teams whose stored points differ from expected_points: id -> (stored, expected)"""
        with self.lock:
            drift = {}
            for team in self.teams:
                expected = self.expected_points(team)
                if team.points != expected:
                    drift[team.id] = (team.points, expected)
            return drift

    def teams_payload(self) -> List[Dict]:
        with self.lock:
            return [t.to_wire() for t in self.teams]

    def challenges_payload(self) -> List[Dict]:
        with self.lock:
            return [c.to_wire() for c in self.challenges]

    def counts(self) -> Dict[str, int]:
        with self.lock:
            return {
                "teams": len(self.teams),
                "players": sum(len(t.players) for t in self.teams),
                "challenges": len(self.challenges),
                "hints": sum(len(group) for groups in self.hints.values() for group in groups),
            }


def roster_player(team: Team, player_id) -> Optional[Player]:
    """Player with player_id on this team's roster only"""
    for player in team.players:
        if player.id == player_id:
            return player
    return None
