"""In-memory repository."""

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

import copy
import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator, List, Optional

from draftpairing.exceptions import DraftNotFoundException, PlayerNotFoundException
from draftpairing.models import ChangeSet, Draft, Match, Player, RoundData
from draftpairing.utils import setup_logger

from .base import DraftRepository

logger = setup_logger(__name__)


class InMemoryRepository(DraftRepository):
    """Keeps players, drafts and matches in dictionaries.

    Objects are deep-copied on the way in and out, so a caller mutating
    what it read cannot change the stored state until it saves.
    """

    def __init__(self) -> None:
        super().__init__()
        self._players: Dict[str, Player] = {}
        self._drafts: Dict[str, Draft] = {}
        self._matches: Dict[str, Match] = {}
        self._store_lock = threading.RLock()
        self._in_transaction = False

    # ========== Reads ==========

    def get_players(self, ids: Optional[Iterable[str]] = None) -> List[Player]:
        with self._store_lock:
            if ids is None:
                found = list(self._players.values())
            else:
                found = [self._players[i] for i in ids if i in self._players]
            return copy.deepcopy(found)

    def get_draft(self, draft_id: str) -> Optional[Draft]:
        with self._store_lock:
            return copy.deepcopy(self._drafts.get(draft_id))

    def get_drafts(self) -> List[Draft]:
        with self._store_lock:
            return copy.deepcopy(list(self._drafts.values()))

    def get_matches(self, draft_id: Optional[str] = None) -> List[Match]:
        with self._store_lock:
            found = [
                m
                for m in self._matches.values()
                if draft_id is None or m.draft_id == draft_id
            ]
            return copy.deepcopy(found)

    # ========== Writes ==========

    @contextmanager
    def _transaction(self) -> Iterator[None]:
        """Persist once after the block, or restore the store if it raises.

        Nested blocks join the outermost one.
        """
        with self._store_lock:
            if self._in_transaction:
                yield
                return
            snapshot = copy.deepcopy((self._players, self._drafts, self._matches))
            self._in_transaction = True
            try:
                yield
                self._persist()
            except Exception:
                self._players, self._drafts, self._matches = snapshot
                logger.warning("Write failed; store restored to its previous state")
                raise
            finally:
                self._in_transaction = False

    def apply(self, change_set: ChangeSet) -> None:
        with self._transaction():
            super().apply(change_set)
        for draft_id in change_set.deleted_draft_ids:
            self._discard_lock(draft_id)

    def save_player(self, player: Player) -> None:
        with self._transaction():
            self._players[player.id] = copy.deepcopy(player)

    def save_player_stats(
        self, player_id: str, wins: int, losses: int, draws: int, ranking: int
    ) -> None:
        with self._transaction():
            player = self._players.get(player_id)
            if player is None:
                raise PlayerNotFoundException(f"Player {player_id} does not exist")
            player.wins = wins
            player.losses = losses
            player.draws = draws
            player.ranking = ranking

    def save_matches(self, matches: Iterable[Match]) -> None:
        with self._transaction():
            for match in matches:
                self._matches[match.id] = copy.deepcopy(match)

    def save_rounds(self, draft_id: str, rounds: Iterable[RoundData]) -> None:
        with self._transaction():
            draft = self._drafts.get(draft_id)
            if draft is None:
                raise DraftNotFoundException(f"Draft {draft_id} does not exist")
            for round_data in rounds:
                stored = copy.deepcopy(round_data)
                index = stored.round_number - 1
                if index < len(draft.rounds):
                    draft.rounds[index] = stored
                else:
                    draft.rounds.append(stored)

    def save_draft(self, draft: Draft) -> None:
        with self._transaction():
            self._drafts[draft.id] = copy.deepcopy(draft)

    def delete_draft(self, draft_id: str) -> None:
        with self._transaction():
            if self._drafts.pop(draft_id, None) is None:
                raise DraftNotFoundException(f"Draft {draft_id} does not exist")
            self._matches = {
                mid: m for mid, m in self._matches.items() if m.draft_id != draft_id
            }
        if not self._in_transaction:
            self._discard_lock(draft_id)

    def delete_player(self, player_id: str) -> None:
        with self._transaction():
            if self._players.pop(player_id, None) is None:
                raise PlayerNotFoundException(f"Player {player_id} does not exist")

    # ========== Serialization ==========

    def _persist(self) -> None:
        """Called once per committed write; in-memory storage has nothing to do."""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the whole store to dictionary."""
        with self._store_lock:
            return {
                "players": [p.to_dict() for p in self._players.values()],
                "drafts": [d.to_dict() for d in self._drafts.values()],
                "matches": [m.to_dict() for m in self._matches.values()],
            }

    def load_dict(self, data: Dict[str, Any]) -> None:
        """Replace the store contents with a serialized store."""
        with self._store_lock:
            self._players = {
                p.id: p for p in map(Player.from_dict, data.get("players", []))
            }
            self._drafts = {d.id: d for d in map(Draft.from_dict, data.get("drafts", []))}
            self._matches = {
                m.id: m for m in map(Match.from_dict, data.get("matches", []))
            }
        logger.debug(
            "Loaded %s players, %s drafts, %s matches",
            len(self._players),
            len(self._drafts),
            len(self._matches),
        )
