"""Global ranking across every draft.

Rankings use the same tie-break tuple as draft standings, computed over a
player's whole match history instead of a single draft.
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

import dataclasses
from typing import Iterable, List, Sequence

from draftpairing.constants import (
    LEADERBOARD_SORT_KEYS,
    SORT_LOSSES,
    SORT_RANKING,
    SORT_WIN_RATE,
    SORT_WINS,
)
from draftpairing.models import Match, Player
from draftpairing.tournament.standings import calculate_player_stats, sort_by_standing
from draftpairing.utils import setup_logger

logger = setup_logger(__name__)


def recompute_global_rankings(
    players: Sequence[Player], all_matches: Iterable[Match]
) -> List[Player]:
    """Assign dense 1-based rankings to every player.

    Players are ordered by lifetime points, match-win % and game-win %.
    Remaining ties keep the input order, so no two players share a rank.
    The inputs are not modified.

    Args:
        players: Every player in the league
        all_matches: Every match of every draft

    Returns:
        Copies of the players, best first, with ``ranking`` set
    """
    all_matches = list(all_matches)
    by_id = {p.id: p for p in players}
    ordered = sort_by_standing(calculate_player_stats(p.id, all_matches) for p in players)

    ranked = [
        dataclasses.replace(by_id[stats.player_id], ranking=position)
        for position, stats in enumerate(ordered, start=1)
    ]
    logger.debug("Recomputed rankings for %s players", len(ranked))
    return ranked


def leaderboard(players: Iterable[Player], sort_by: str = SORT_RANKING) -> List[Player]:
    """Order players for a leaderboard view.

    Args:
        players: Players to order
        sort_by: 'ranking' (best first), 'losses' (fewest first), 'wins' or
            'win_rate' (highest first)

    Raises:
        ValueError: If ``sort_by`` is not a known key
    """
    if sort_by not in LEADERBOARD_SORT_KEYS:
        raise ValueError(
            f"Unknown sort key {sort_by!r}; use one of {LEADERBOARD_SORT_KEYS}"
        )

    if sort_by == SORT_RANKING:
        return sorted(players, key=lambda p: p.ranking)
    if sort_by == SORT_WINS:
        return sorted(players, key=lambda p: p.wins, reverse=True)
    if sort_by == SORT_LOSSES:
        return sorted(players, key=lambda p: p.losses)
    if sort_by == SORT_WIN_RATE:
        return sorted(players, key=lambda p: p.win_rate, reverse=True)
