"""Result recording and validation for drafts.

This module handles writing match scores with proper validation and keeps
the players' lifetime records in step with every result change.
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
from typing import Dict, List, Optional, Sequence

from draftpairing.exceptions import (
    InvalidResultException,
    InvalidTransitionException,
    MatchNotFoundException,
    PlayerNotFoundException,
)
from draftpairing.models import ChangeSet, Draft, Match, Player
from draftpairing.type_hints import ScoreEntry
from draftpairing.utils import setup_logger, utc_now
from draftpairing.utils.validation import validate_score_strict

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles recording and validating match results.

    This class is responsible for:
    - Validating scores and that the match can still be edited
    - Recomputing the match result from the scores
    - Moving both players' lifetime records from the old result to the new one
    - Applying a batch of scores all-or-nothing
    """

    def record_match_result(
        self,
        draft: Draft,
        match: Match,
        player1_score: int,
        player2_score: int,
        players: Dict[str, Player],
        now: Optional[datetime] = None,
    ) -> ChangeSet:
        """Record the scores of a single match.

        Writing the same scores twice leaves the match in the same state,
        apart from the completion time of the second write.

        Args:
            draft: The draft the match belongs to
            match: The match to score
            player1_score: Games won by player 1
            player2_score: Games won by player 2
            players: Players by id; must contain both match players
            now: Timestamp to use, defaults to the current time

        Returns:
            ChangeSet with the match and both players

        Raises:
            InvalidTransitionException: If the match can no longer be edited
            InvalidResultException: If a score is invalid
            PlayerNotFoundException: If a match player is unknown
        """
        self._validate_entry(draft, match, player1_score, player2_score, players)
        return self._apply_scores(
            match, player1_score, player2_score, players, now or utc_now()
        )

    def record_round_results(
        self,
        draft: Draft,
        results_data: Sequence[ScoreEntry],
        matches: Dict[str, Match],
        players: Dict[str, Player],
        now: Optional[datetime] = None,
    ) -> ChangeSet:
        """Record a batch of scores as one unit.

        Every entry is validated before any is applied, so a bad entry
        rejects the whole batch. Re-submitting a batch is safe: the last
        write wins per match.

        Args:
            draft: The draft the matches belong to
            results_data: List of (match_id, player1_score, player2_score)
            matches: Matches by id
            players: Players by id
            now: Timestamp to use, defaults to the current time

        Returns:
            ChangeSet with every scored match and every affected player
        """
        seen = set()
        resolved: List[Match] = []
        for match_id, player1_score, player2_score in results_data:
            match = matches.get(match_id)
            if match is None:
                logger.error("Cannot record result: unknown match %s", match_id)
                raise MatchNotFoundException(f"Match {match_id} does not exist")
            if match_id in seen:
                raise InvalidResultException(
                    f"Match {match_id} appears more than once in the batch"
                )
            seen.add(match_id)
            self._validate_entry(draft, match, player1_score, player2_score, players)
            resolved.append(match)

        now = now or utc_now()
        change_set = ChangeSet()
        for match, (_, player1_score, player2_score) in zip(resolved, results_data):
            change_set.merge(
                self._apply_scores(match, player1_score, player2_score, players, now)
            )

        logger.info(
            "Recorded %s results for draft %s", len(change_set.matches), draft.id
        )
        return change_set

    def _validate_entry(
        self,
        draft: Draft,
        match: Match,
        player1_score: int,
        player2_score: int,
        players: Dict[str, Player],
    ) -> None:
        """Validate a result entry before recording."""
        if match.draft_id != draft.id:
            raise MatchNotFoundException(
                f"Match {match.id} does not belong to draft {draft.id}"
            )

        if not draft.is_active:
            logger.warning(
                "Cannot record match %s: draft %s is %s",
                match.id,
                draft.id,
                draft.status,
            )
            raise InvalidTransitionException(
                f"Draft '{draft.name}' is {draft.status}, results cannot be recorded"
            )

        round_data = draft.get_round(match.round_number)
        if round_data is None or match.id not in round_data.match_ids:
            raise MatchNotFoundException(
                f"Match {match.id} is not part of round {match.round_number}"
            )
        if round_data.is_completed:
            logger.warning(
                "Cannot record match %s: round %s is already completed",
                match.id,
                match.round_number,
            )
            raise InvalidTransitionException(
                f"Round {match.round_number} is completed, its matches are final"
            )

        validate_score_strict(player1_score)
        validate_score_strict(player2_score)

        for player_id in match.pair:
            if player_id not in players:
                logger.error("Cannot find player %s of match %s", player_id, match.id)
                raise PlayerNotFoundException(f"Player {player_id} does not exist")

    def _apply_scores(
        self,
        match: Match,
        player1_score: int,
        player2_score: int,
        players: Dict[str, Player],
        now: datetime,
    ) -> ChangeSet:
        """Write the scores and move lifetime records to the new result."""
        player1 = players[match.player1_id]
        player2 = players[match.player2_id]

        old_outcomes = (
            match.outcome_for(player1.id),
            match.outcome_for(player2.id),
        )
        match.apply_scores(player1_score, player2_score, now)

        player1.apply_outcome(old_outcomes[0], delta=-1)
        player2.apply_outcome(old_outcomes[1], delta=-1)
        player1.apply_outcome(match.outcome_for(player1.id))
        player2.apply_outcome(match.outcome_for(player2.id))

        logger.debug(
            "Recorded: %s (%s) vs %s (%s) -> %s",
            player1.name,
            player1_score,
            player2.name,
            player2_score,
            match.result,
        )
        return ChangeSet(matches=[match], players=[player1, player2])
