"""Standings calculation for drafts.

This module turns a player's match history into a win/loss/draw record,
match-win and game-win percentages and points, and orders players by those
figures. Everything here is a pure function of the matches passed in.
"""

# Draft Pairing
# Copyright (C) 2025  Draft Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from draftpairing.constants import (
    DRAW_POINTS,
    LOSS_POINTS,
    OUTCOME_DRAW,
    OUTCOME_WIN,
    WIN_POINTS,
)
from draftpairing.models.tournament import Match


@dataclass(frozen=True)
class PlayerStats:
    """A player's record over a set of resolved matches.

    Attributes
    ----------
    player_id : str
        The player these figures belong to.
    wins, losses, draws : int
        Match record.
    games_won, games_lost : int
        Sum of the player's own and the opponents' per-game scores.
    match_win_pct : float
        100 * wins / matches, 0 when no match has been played.
    game_win_pct : float
        100 * games_won / all games, 0 when no game has been played.
    points : int
        3 per win, 1 per draw.
    """

    player_id: str
    wins: int = 0
    losses: int = 0
    draws: int = 0
    games_won: int = 0
    games_lost: int = 0
    match_win_pct: float = 0.0
    game_win_pct: float = 0.0
    points: int = 0

    @property
    def matches_played(self) -> int:
        return self.wins + self.losses + self.draws

    @property
    def sort_key(self) -> Tuple[int, float, float]:
        """Tie-break tuple, larger is better."""
        return (self.points, self.match_win_pct, self.game_win_pct)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player_id": self.player_id,
            "wins": self.wins,
            "losses": self.losses,
            "draws": self.draws,
            "games_won": self.games_won,
            "games_lost": self.games_lost,
            "match_win_pct": self.match_win_pct,
            "game_win_pct": self.game_win_pct,
            "points": self.points,
        }


def _percentage(part: int, whole: int) -> float:
    if whole == 0:
        return 0.0
    return part / whole * 100


def _relevant_matches(
    player_id: str, matches: Iterable[Match], draft_id: Optional[str]
) -> List[Match]:
    return [
        m
        for m in matches
        if (draft_id is None or m.draft_id == draft_id)
        and not m.is_pending
        and m.involves(player_id)
    ]


def calculate_player_stats(
    player_id: str, matches: Iterable[Match], draft_id: Optional[str] = None
) -> PlayerStats:
    """Calculate a player's record from their resolved matches.

    Args:
        player_id: The player to calculate for
        matches: Match history to read; may contain other players' matches
        draft_id: Restrict to one draft, or None for the lifetime record

    Returns:
        PlayerStats for the player
    """
    wins = losses = draws = 0
    games_won = games_lost = 0

    for match in _relevant_matches(player_id, matches, draft_id):
        own, opponent = match.scores_for(player_id)
        # Game counts are per-game scores, independent of the match outcome
        games_won += own
        games_lost += opponent

        outcome = match.outcome_for(player_id)
        if outcome == OUTCOME_WIN:
            wins += 1
        elif outcome == OUTCOME_DRAW:
            draws += 1
        else:
            losses += 1

    return PlayerStats(
        player_id=player_id,
        wins=wins,
        losses=losses,
        draws=draws,
        games_won=games_won,
        games_lost=games_lost,
        match_win_pct=_percentage(wins, wins + losses + draws),
        game_win_pct=_percentage(games_won, games_won + games_lost),
        points=wins * WIN_POINTS + draws * DRAW_POINTS + losses * LOSS_POINTS,
    )


def draft_record(
    player_id: str, matches: Iterable[Match], draft_id: str
) -> Tuple[int, int, int]:
    """Return a player's (wins, losses, draws) within one draft."""
    stats = calculate_player_stats(player_id, matches, draft_id)
    return stats.wins, stats.losses, stats.draws


def sort_by_standing(stats: Iterable[PlayerStats]) -> List[PlayerStats]:
    """Order stats by points, then match-win %, then game-win %.

    The sort is stable: players still tied keep their input order.
    """
    return sorted(stats, key=lambda s: s.sort_key, reverse=True)


def compute_standings(
    draft_id: str, roster: Iterable[str], matches: Iterable[Match]
) -> List[PlayerStats]:
    """Compute the ordered standings of a draft.

    Args:
        draft_id: The draft to compute standings for
        roster: Player IDs in roster order (the final tie-break)
        matches: Match history; only this draft's matches are used

    Returns:
        PlayerStats for every roster player, best first
    """
    draft_matches = [m for m in matches if m.draft_id == draft_id]
    return sort_by_standing(
        calculate_player_stats(player_id, draft_matches, draft_id)
        for player_id in roster
    )
