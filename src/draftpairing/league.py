"""Main DraftLeague class - orchestrates every league operation.

This is the primary interface of the engine. It loads entities from the
repository, hands them to the specialized controllers and writes the
resulting ChangeSet back as one unit.
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
from typing import Dict, Iterable, List, Optional, Sequence

from draftpairing.constants import DEFAULT_TOTAL_ROUNDS, SORT_RANKING
from draftpairing.controllers import (
    ResultRecorder,
    RoundManager,
    create_draft,
    create_player,
    delete_draft,
    ensure_player_deletable,
    leaderboard,
    recompute_global_rankings,
    rename_player,
)
from draftpairing.exceptions import (
    DraftNotFoundException,
    MatchNotFoundException,
    PlayerNotFoundException,
)
from draftpairing.models import ChangeSet, Draft, DraftConfig, Match, Player
from draftpairing.storage import DraftRepository
from draftpairing.tournament import PlayerStats, compute_standings
from draftpairing.type_hints import ScoreEntry
from draftpairing.utils import setup_logger

logger = setup_logger(__name__)


class DraftLeague:
    """League management facade.

    This class coordinates all operations through specialized controllers:
    - RoundManager: starts drafts and moves them round by round
    - ResultRecorder: writes scores and keeps lifetime records in step
    - rankings: re-ranks every player after a result changes

    Every write to a draft happens while holding the repository's lock for
    that draft.
    """

    def __init__(self, repository: DraftRepository) -> None:
        self.repository = repository
        self.round_manager = RoundManager()
        self.result_recorder = ResultRecorder()

    # ========== Lookups ==========

    def _require_draft(self, draft_id: str) -> Draft:
        draft = self.repository.get_draft(draft_id)
        if draft is None:
            logger.error("Draft %s does not exist", draft_id)
            raise DraftNotFoundException(f"Draft {draft_id} does not exist")
        return draft

    def _require_player(self, player_id: str) -> Player:
        player = self.repository.get_player(player_id)
        if player is None:
            logger.error("Player %s does not exist", player_id)
            raise PlayerNotFoundException(f"Player {player_id} does not exist")
        return player

    def _find_match(self, match_id: str) -> Match:
        for match in self.repository.get_matches():
            if match.id == match_id:
                return match
        logger.error("Match %s does not exist", match_id)
        raise MatchNotFoundException(f"Match {match_id} does not exist")

    # ========== Players ==========

    def add_player(self, name: str, avatar: Optional[str] = None) -> Player:
        """Register a new player at the bottom of the rankings."""
        player = create_player(name, self.repository.get_players(), avatar=avatar)
        self.repository.save_player(player)
        return player

    def rename_player(self, player_id: str, new_name: str) -> Player:
        player = self._require_player(player_id)
        rename_player(player, new_name, self.repository.get_players())
        self.repository.save_player(player)
        return player

    def delete_player(self, player_id: str) -> List[Player]:
        """Delete a player and re-rank everyone left.

        Returns:
            The remaining players, best first

        Raises:
            PlayerNotFoundException: If the player does not exist
            DeleteNotAllowedException: If a pending or active draft seats them
        """
        self._require_player(player_id)
        ensure_player_deletable(player_id, self.repository.get_drafts())

        remaining = [p for p in self.repository.get_players() if p.id != player_id]
        ranked = recompute_global_rankings(remaining, self.repository.get_matches())
        self.repository.apply(
            ChangeSet(players=ranked, deleted_player_ids=[player_id])
        )
        logger.info("Deleted player %s", player_id)
        return ranked

    def get_players(self) -> List[Player]:
        return self.repository.get_players()

    # ========== Drafts ==========

    def create_draft(
        self,
        name: str,
        roster: Sequence[str],
        total_rounds: int = DEFAULT_TOTAL_ROUNDS,
        description: Optional[str] = None,
        cube_name: Optional[str] = None,
        rng: Optional[random.Random] = None,
    ) -> Draft:
        """Create a pending draft for the given player IDs."""
        config = DraftConfig(
            name=name,
            total_rounds=total_rounds,
            description=description,
            cube_name=cube_name,
        )
        known_ids = [p.id for p in self.repository.get_players()]
        draft = create_draft(config, roster, known_ids, rng=rng)
        self.repository.save_draft(draft)
        return draft

    def get_draft(self, draft_id: str) -> Draft:
        return self._require_draft(draft_id)

    def get_drafts(self) -> List[Draft]:
        return self.repository.get_drafts()

    def start_draft(self, draft_id: str) -> Draft:
        """Start a pending draft and pair round 1."""
        with self.repository.lock(draft_id):
            draft = self._require_draft(draft_id)
            change_set = self.round_manager.start_draft(draft)
            self.repository.apply(change_set)
            return draft

    def complete_round(self, draft_id: str, round_number: int) -> Draft:
        """Close a round and pair the next one, or finish the draft."""
        with self.repository.lock(draft_id):
            draft = self._require_draft(draft_id)
            change_set = self.round_manager.complete_round(
                draft, round_number, self.repository.get_matches(draft_id)
            )
            self.repository.apply(change_set)
            return draft

    def delete_draft(self, draft_id: str) -> None:
        """Delete a completed draft and its matches.

        Lifetime records and rankings are left as they are.
        """
        with self.repository.lock(draft_id):
            draft = self._require_draft(draft_id)
            change_set = delete_draft(draft, self.repository.get_matches(draft_id))
            self.repository.apply(change_set)

    # ========== Results ==========

    def record_match_result(
        self, match_id: str, player1_score: int, player2_score: int
    ) -> Match:
        """Record the scores of one match and re-rank every player."""
        draft_id = self._find_match(match_id).draft_id
        with self.repository.lock(draft_id):
            draft = self._require_draft(draft_id)
            matches = {m.id: m for m in self.repository.get_matches()}
            match = matches.get(match_id)
            if match is None:
                raise MatchNotFoundException(f"Match {match_id} does not exist")
            players = {p.id: p for p in self.repository.get_players()}

            change_set = self.result_recorder.record_match_result(
                draft, match, player1_score, player2_score, players
            )
            self._rerank(change_set, players, matches.values())
            self.repository.apply(change_set)
            return match

    def record_match_results(
        self, draft_id: str, results_data: Sequence[ScoreEntry]
    ) -> List[Match]:
        """Record a batch of (match_id, player1_score, player2_score) at once.

        Nothing is written if any entry is rejected.
        """
        with self.repository.lock(draft_id):
            draft = self._require_draft(draft_id)
            matches = {m.id: m for m in self.repository.get_matches()}
            players = {p.id: p for p in self.repository.get_players()}

            change_set = self.result_recorder.record_round_results(
                draft, results_data, matches, players
            )
            self._rerank(change_set, players, matches.values())
            self.repository.apply(change_set)
            return list(change_set.matches)

    def _rerank(
        self,
        change_set: ChangeSet,
        players: Dict[str, Player],
        all_matches: Iterable[Match],
    ) -> None:
        """Add every player whose ranking moved to the ChangeSet."""
        for ranked in recompute_global_rankings(list(players.values()), all_matches):
            if ranked.ranking != players[ranked.id].ranking:
                players[ranked.id].ranking = ranked.ranking
                change_set.add_player(players[ranked.id])

    # ========== Queries ==========

    def get_round_matches(self, draft_id: str, round_number: int) -> List[Match]:
        """Get the matches of a round in pairing order."""
        draft = self._require_draft(draft_id)
        return self.round_manager.round_matches(
            draft, round_number, self.repository.get_matches(draft_id)
        )

    def is_round_ready(self, draft_id: str, round_number: int) -> bool:
        draft = self._require_draft(draft_id)
        return self.round_manager.is_round_ready(
            draft, round_number, self.repository.get_matches(draft_id)
        )

    def compute_standings(self, draft_id: str) -> List[PlayerStats]:
        """Get the standings of a draft, leader first."""
        draft = self._require_draft(draft_id)
        return compute_standings(
            draft_id, draft.players, self.repository.get_matches(draft_id)
        )

    def compute_global_rankings(self) -> List[Player]:
        """Re-rank every player over all matches and store the result."""
        ranked = recompute_global_rankings(
            self.repository.get_players(), self.repository.get_matches()
        )
        self.repository.apply(ChangeSet(players=ranked))
        return ranked

    def leaderboard(self, sort_by: str = SORT_RANKING) -> List[Player]:
        return leaderboard(self.repository.get_players(), sort_by=sort_by)
