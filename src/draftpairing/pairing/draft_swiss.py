"""Draft Swiss Pairing System Implementation.

Round 1 is a fixed bracket built from the seating: seat i plays seat
i + n/2. Later rounds pair greedily down the standings, skipping opponents
already met in the draft unless nobody else is left.
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

import random
from typing import List, Optional, Sequence, Set

from draftpairing.constants import SUPPORTED_ROSTER_SIZES
from draftpairing.exceptions import InvalidPairingException
from draftpairing.models.tournament import Match, PairingHistory
from draftpairing.tournament.standings import calculate_player_stats, sort_by_standing
from draftpairing.type_hints import Pairings, Roster
from draftpairing.utils import setup_logger

logger = setup_logger(__name__)


def seat_players(roster: Sequence[str], rng: Optional[random.Random] = None) -> Roster:
    """Return a random seating permutation of the roster.

    This is the only random step in a draft. Pass a seeded ``random.Random``
    to make it reproducible.
    """
    rng = rng or random.Random()
    seating = list(roster)
    rng.shuffle(seating)
    return seating


def generate_pairings(
    draft_id: str,
    roster: Sequence[str],
    round_number: int,
    matches: Sequence[Match] = (),
    seating: Optional[Sequence[str]] = None,
) -> Pairings:
    """
    Create the (player1_id, player2_id) pairings for a round of a draft.

    - draft_id: the draft being paired; other drafts' matches are ignored
    - roster: player IDs in roster order
    - round_number: 1-based round being created
    - matches: match history, used for standings and rematch avoidance
    - seating: seating permutation for round 1 (defaults to roster order)
    Returns: list of (player1_id, player2_id)
    """
    if round_number < 1:
        raise InvalidPairingException(f"Invalid round number: {round_number}")

    if round_number == 1:
        return _pair_round_one(list(seating) if seating is not None else list(roster))

    draft_matches = [m for m in matches if m.draft_id == draft_id]
    return _pair_by_standings(draft_id, list(roster), draft_matches, round_number)


def _pair_round_one(seating: List[str]) -> Pairings:
    """Handle round 1 pairing: seat i against seat i + n/2."""
    n = len(seating)
    if n not in SUPPORTED_ROSTER_SIZES:
        raise InvalidPairingException(
            f"Cannot build a round 1 bracket for {n} players; "
            f"supported sizes are {SUPPORTED_ROSTER_SIZES}"
        )
    if len(set(seating)) != n:
        raise InvalidPairingException("Seating contains the same player twice")

    half = n // 2
    return [(seating[i], seating[i + half]) for i in range(half)]


def _pair_by_standings(
    draft_id: str, roster: List[str], draft_matches: List[Match], round_number: int
) -> Pairings:
    """Pair down the standings, avoiding rematches where possible."""
    if len(roster) % 2 == 1:
        raise InvalidPairingException(
            f"Cannot pair an odd number of players ({len(roster)}) "
            f"for round {round_number}"
        )

    standings = sort_by_standing(
        calculate_player_stats(player_id, draft_matches, draft_id)
        for player_id in roster
    )
    remaining = [stats.player_id for stats in standings]
    history = PairingHistory.from_matches(draft_matches)

    pairings = []
    while remaining:
        player1 = remaining.pop(0)
        opponent_idx = _first_new_opponent(player1, remaining, history.previous_matches)

        if opponent_idx is None:
            # Everyone left has already played player1: accept the rematch
            opponent_idx = 0
            logger.warning(
                "Draft %s round %s: %s has already played every remaining "
                "player, pairing with %s as a rematch",
                draft_id,
                round_number,
                player1,
                remaining[0],
            )

        player2 = remaining.pop(opponent_idx)
        pairings.append((player1, player2))

    logger.debug("Draft %s round %s pairings: %s", draft_id, round_number, pairings)
    return pairings


def _first_new_opponent(
    player_id: str, candidates: List[str], previous_matches: Set[frozenset]
) -> Optional[int]:
    """Index of the highest-ranked candidate not yet met, or None."""
    for i, candidate in enumerate(candidates):
        if frozenset({player_id, candidate}) not in previous_matches:
            return i
    return None
