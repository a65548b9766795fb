"""Round management for drafts.

This module drives a draft through its rounds: starting it with the seating
bracket, closing rounds once every match has a result, generating the next
round from the standings and finishing the draft after the last round.
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

from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from draftpairing.constants import STATUS_ACTIVE, STATUS_COMPLETED
from draftpairing.exceptions import (
    InvalidTransitionException,
    MatchNotFoundException,
    RoundNotFoundException,
    RoundNotReadyException,
)
from draftpairing.models import ChangeSet, Draft, Match, RoundData
from draftpairing.pairing import generate_pairings
from draftpairing.utils import setup_logger, utc_now

logger = setup_logger(__name__)


class RoundManager:
    """Manages round progression and pairing generation for drafts.

    This class is responsible for:
    - Starting a pending draft with round 1 pairings
    - Gating round completion on every match having a result
    - Generating the next round, or finishing the draft after the last one

    It never touches storage. Every method works on the entities passed in
    and reports what it changed through a ChangeSet.
    """

    def start_draft(self, draft: Draft, now: Optional[datetime] = None) -> ChangeSet:
        """Start a pending draft and create its round 1 matches.

        Args:
            draft: The draft to start
            now: Timestamp to use, defaults to the current time

        Returns:
            ChangeSet with the draft, round 1 and its matches

        Raises:
            InvalidTransitionException: If the draft is not pending
        """
        if not draft.is_pending:
            logger.warning("Cannot start draft %s: status is %s", draft.id, draft.status)
            raise InvalidTransitionException(
                f"Draft '{draft.name}' cannot be started: it is {draft.status}"
            )

        now = now or utc_now()
        round_data, new_matches = self._create_round(draft, 1, [], now)

        draft.rounds.append(round_data)
        draft.status = STATUS_ACTIVE
        draft.current_round = 1
        draft.started_at = now

        logger.info(
            "Started draft %s with %s players and %s round 1 matches",
            draft.id,
            len(draft.players),
            len(new_matches),
        )
        return ChangeSet(draft=draft, rounds=[round_data], matches=new_matches)

    def complete_round(
        self,
        draft: Draft,
        round_number: int,
        matches: Iterable[Match],
        now: Optional[datetime] = None,
    ) -> ChangeSet:
        """Close the current round and move the draft forward.

        Args:
            draft: The draft being played
            round_number: The round to close (1-indexed)
            matches: Match history of the draft, including this round
            now: Timestamp to use, defaults to the current time

        Returns:
            ChangeSet with the draft, the closed round and, unless this was
            the last round, the next round and its new matches

        Raises:
            InvalidTransitionException: If the draft is not active or the
                round is not its current open round
            RoundNotFoundException: If the round does not exist
            RoundNotReadyException: If any match in the round is pending
        """
        draft_matches = [m for m in matches if m.draft_id == draft.id]
        round_data = self._get_open_round(draft, round_number)

        round_matches = self.round_matches(draft, round_number, draft_matches)
        pending = [m for m in round_matches if m.is_pending]
        if pending:
            logger.warning(
                "Round %s of draft %s still has %s pending matches",
                round_number,
                draft.id,
                len(pending),
            )
            raise RoundNotReadyException(
                f"Round {round_number} has {len(pending)} match(es) without a result"
            )

        now = now or utc_now()
        round_data.is_completed = True
        change_set = ChangeSet(draft=draft, rounds=[round_data])
        logger.info("Round %s of draft %s marked as completed", round_number, draft.id)

        if round_number < draft.total_rounds:
            next_round, new_matches = self._create_round(
                draft, round_number + 1, draft_matches, now
            )
            draft.rounds.append(next_round)
            draft.current_round = next_round.round_number
            change_set.add_round(next_round)
            change_set.matches.extend(new_matches)
            logger.info(
                "Created round %s of draft %s with %s matches",
                next_round.round_number,
                draft.id,
                len(new_matches),
            )
        else:
            draft.status = STATUS_COMPLETED
            draft.completed_at = now
            logger.info("Draft %s completed after %s rounds", draft.id, round_number)

        return change_set

    def is_round_ready(
        self, draft: Draft, round_number: int, matches: Iterable[Match]
    ) -> bool:
        """Can ``round_number`` be completed right now?"""
        if not draft.is_active or round_number != draft.current_round:
            return False
        round_data = draft.get_round(round_number)
        if round_data is None or round_data.is_completed:
            return False
        try:
            round_matches = self.round_matches(draft, round_number, matches)
        except MatchNotFoundException:
            return False
        return all(not m.is_pending for m in round_matches)

    def round_matches(
        self, draft: Draft, round_number: int, matches: Iterable[Match]
    ) -> List[Match]:
        """Get the matches of a round in pairing order.

        Raises:
            RoundNotFoundException: If the round does not exist
            MatchNotFoundException: If a match of the round is missing
        """
        round_data = draft.get_round(round_number)
        if round_data is None:
            raise RoundNotFoundException(
                f"Draft '{draft.name}' has no round {round_number}"
            )

        by_id = {m.id: m for m in matches}
        missing = [mid for mid in round_data.match_ids if mid not in by_id]
        if missing:
            raise MatchNotFoundException(
                f"Round {round_number} references unknown matches: {missing}"
            )
        return [by_id[mid] for mid in round_data.match_ids]

    def _get_open_round(self, draft: Draft, round_number: int) -> RoundData:
        if not draft.is_active:
            logger.warning(
                "Cannot complete round %s: draft %s is %s",
                round_number,
                draft.id,
                draft.status,
            )
            raise InvalidTransitionException(
                f"Draft '{draft.name}' is {draft.status}, no round can be completed"
            )

        round_data = draft.get_round(round_number)
        if round_data is None:
            raise RoundNotFoundException(
                f"Draft '{draft.name}' has no round {round_number}"
            )

        if round_data.is_completed:
            logger.warning(
                "Round %s of draft %s is already completed", round_number, draft.id
            )
            raise InvalidTransitionException(
                f"Round {round_number} is already completed"
            )

        if round_number != draft.current_round:
            raise InvalidTransitionException(
                f"Round {round_number} is not the current round "
                f"({draft.current_round})"
            )
        return round_data

    def _create_round(
        self,
        draft: Draft,
        round_number: int,
        draft_matches: List[Match],
        now: datetime,
    ) -> Tuple[RoundData, List[Match]]:
        """Pair a round and build its (pending) matches."""
        pairings = generate_pairings(
            draft.id,
            draft.players,
            round_number,
            matches=draft_matches,
            seating=draft.seating,
        )
        new_matches = [
            Match(
                draft_id=draft.id,
                round_number=round_number,
                player1_id=player1,
                player2_id=player2,
                created_at=now,
            )
            for player1, player2 in pairings
        ]
        round_data = RoundData(
            round_number=round_number, match_ids=[m.id for m in new_matches]
        )
        return round_data, new_matches
