"""Draft controller for creating and deleting drafts."""

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
from datetime import datetime
from typing import Iterable, Optional, Sequence

from draftpairing.exceptions import (
    DeleteNotAllowedException,
    InvalidRosterSizeException,
    PlayerNotFoundException,
)
from draftpairing.models import ChangeSet, Draft, DraftConfig, Match
from draftpairing.pairing import seat_players
from draftpairing.utils import setup_logger, utc_now
from draftpairing.utils.validation import validate_roster_size, validate_total_rounds

logger = setup_logger(__name__)


def create_draft(
    config: DraftConfig,
    roster: Sequence[str],
    known_player_ids: Iterable[str],
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> Draft:
    """Create a pending draft with a freshly randomized seating.

    Parameters
    ----------
    config : DraftConfig
        Name, round count and description of the draft.
    roster : sequence of str
        Player IDs, 4, 6 or 8 of them, no repeats.
    known_player_ids : iterable of str
        IDs of every player in the league.
    rng : random.Random, optional
        Source of randomness for the seating.

    Raises
    ------
    InvalidRosterSizeException
        If the roster size is unsupported or a player is listed twice.
    InvalidConfigurationException
        If the round count is unsupported.
    PlayerNotFoundException
        If a roster entry is not a known player.
    """
    validate_roster_size(len(roster))
    if len(set(roster)) != len(roster):
        raise InvalidRosterSizeException("A player cannot be seated twice in a draft")
    validate_total_rounds(config.total_rounds)

    known = set(known_player_ids)
    unknown = [player_id for player_id in roster if player_id not in known]
    if unknown:
        logger.error("Cannot create draft %r: unknown players %s", config.name, unknown)
        raise PlayerNotFoundException(f"Unknown players: {', '.join(unknown)}")

    draft = Draft(
        config=config,
        players=list(roster),
        seating=seat_players(roster, rng),
        created_at=now or utc_now(),
    )
    logger.info(
        "Created draft %s (%r) with %s players over %s rounds",
        draft.id,
        draft.name,
        len(draft.players),
        draft.total_rounds,
    )
    return draft


def delete_draft(draft: Draft, matches: Iterable[Match]) -> ChangeSet:
    """Delete a completed draft together with its matches.

    Player lifetime records are left alone: results stay baked into the
    players even after the draft is gone.

    Raises
    ------
    DeleteNotAllowedException
        If the draft is pending or active.
    """
    if not draft.is_completed:
        logger.warning("Cannot delete draft %s: status is %s", draft.id, draft.status)
        raise DeleteNotAllowedException(
            f"Only completed drafts can be deleted; '{draft.name}' is {draft.status}"
        )

    match_count = sum(1 for m in matches if m.draft_id == draft.id)
    logger.info("Deleting draft %s and %s matches", draft.id, match_count)
    return ChangeSet(deleted_draft_ids=[draft.id])
