"""
Scoring engine - state transitions on the repository

Rules:
  - Completing a challenge credits its points to the team; undoing it debits
    them with a floor at 0
  - rare/secret challenges accept a single winning team
  - Disabled challenges cannot change winners; disabling/enabling replays the
    debit/credit for every recorded winner
  - Personal points and player swaps move team totals without any floor

Unknown team/challenge/player ids are not errors: the operation is ignored
and still reported as a success.
"""
import logging

from scoreboard.models import Challenge, OperationResult, Team
from scoreboard.store import Repository, roster_player


logger = logging.getLogger(__name__)


def _credit(team: Team, challenge: Challenge) -> None:
    if challenge.id in team.completed_challenges:
        return
    team.completed_challenges.append(challenge.id)
    team.points += challenge.points


def _debit(team: Team, challenge: Challenge) -> None:
    team.completed_challenges = [cid for cid in team.completed_challenges if cid != challenge.id]
    team.points = max(0, team.points - challenge.points)


def _ignored(operation: str, reason: str) -> OperationResult:
    logger.info(f"{operation} ignored: {reason}")
    return OperationResult.ignored(reason)


def toggle_challenge_completion(store: Repository, team_id, challenge_id) -> OperationResult:
    """
    Mark a challenge completed by a team, or undo it if already completed

    Args:
        store: Live repository
        team_id: Team ID
        challenge_id: Challenge ID

    Returns:
        APPLIED, or IGNORED when an id is unknown, the challenge is disabled,
        or an exclusive challenge is already held by another team
    """
    with store.lock:
        team = store.find_team(team_id)
        challenge = store.find_challenge(challenge_id)
        if team is None or challenge is None:
            return _ignored("validate", f"unknown team {team_id!r} or challenge {challenge_id!r}")

        if challenge.disabled:
            return _ignored("validate", f"challenge {challenge.id} is disabled")

        is_winner = team.id in challenge.winners
        if challenge.is_exclusive and not is_winner and challenge.winners:
            return _ignored(
                "validate",
                f"{challenge.type} challenge {challenge.id} already won by {challenge.winners[0]}"
            )

        if is_winner:
            challenge.winners = [tid for tid in challenge.winners if tid != team.id]
            _debit(team, challenge)
        else:
            challenge.winners.append(team.id)
            _credit(team, challenge)

        logger.info(
            f"Team {team.id} {'lost' if is_winner else 'won'} challenge {challenge.id} "
            f"-> {team.points} pts"
        )
        return OperationResult.applied()


def award_personal_points(store: Repository, team_id, player_id, amount) -> OperationResult:
    """
    Add (or, with a negative amount, deduct) personal points to a player

    The player is only looked up in that team's roster. Team points move by
    the same amount and may go below zero.

    Returns:
        APPLIED, IGNORED for unknown team/player, REJECTED if amount is not an integer
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        return OperationResult.rejected(f"amount must be an integer, got {amount!r}")

    with store.lock:
        team = store.find_team(team_id)
        if team is None:
            return _ignored("addPersonalPoints", f"unknown team {team_id!r}")
        player = roster_player(team, player_id)
        if player is None:
            return _ignored("addPersonalPoints", f"player {player_id!r} not in team {team.id}")

        player.personal_points += amount
        team.points += amount

        logger.info(f"Player {player.id} ({team.id}) {amount:+d} -> team {team.points} pts")
        return OperationResult.applied()


def toggle_challenge_enablement(store: Repository, challenge_id) -> OperationResult:
    """
    Disable an enabled challenge or re-enable a disabled one

    Disabling removes the challenge and its points (floor at 0) from every
    winner that holds it; enabling gives them back to every winner missing
    it. The winners list itself is kept as is.
    """
    with store.lock:
        challenge = store.find_challenge(challenge_id)
        if challenge is None:
            return _ignored("toggleDisabled", f"unknown challenge {challenge_id!r}")

        was_disabled = challenge.disabled
        challenge.disabled = not was_disabled

        for team_id in challenge.winners:
            team = store.find_team(team_id)
            if team is None:
                continue
            has_completed = challenge.id in team.completed_challenges
            if was_disabled and not has_completed:
                _credit(team, challenge)
            elif not was_disabled and has_completed:
                _debit(team, challenge)

        logger.info(
            f"Challenge {challenge.id} {'disabled' if challenge.disabled else 'enabled'} "
            f"({len(challenge.winners)} winners replayed)"
        )
        return OperationResult.applied()


def swap_players(store: Repository, player_id, target_team_id, target_player_id) -> OperationResult:
    """
    Exchange two players' roster slots between teams

    Personal points travel with the players, so each team total moves by the
    difference between the incoming and outgoing player's personal points.
    Challenge wins stay with the teams.

    Args:
        store: Live repository
        player_id: Player to move, searched across every roster
        target_team_id: Team receiving that player
        target_player_id: Player of the target team taking the freed slot
    """
    with store.lock:
        found = store.find_player(player_id)
        team_b = store.find_team(target_team_id)
        if found is None or team_b is None:
            return _ignored(
                "swapPlayers", f"unknown player {player_id!r} or team {target_team_id!r}"
            )
        team_a, idx_a = found

        idx_b = next(
            (i for i, p in enumerate(team_b.players) if p.id == target_player_id), None
        )
        if idx_b is None:
            return _ignored(
                "swapPlayers", f"player {target_player_id!r} not in team {team_b.id}"
            )

        player_a = team_a.players[idx_a]
        player_b = team_b.players[idx_b]

        team_a.players[idx_a] = player_b
        team_b.players[idx_b] = player_a

        team_a.points = team_a.points - player_a.personal_points + player_b.personal_points
        team_b.points = team_b.points - player_b.personal_points + player_a.personal_points

        logger.info(f"Swapped {player_a.id} ({team_a.id}) with {player_b.id} ({team_b.id})")
        return OperationResult.applied()
