"""Abstract repository the engine reads from and writes back to."""

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

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Dict, Iterable, Iterator, List, Optional

from draftpairing.models import ChangeSet, Draft, Match, Player, RoundData


class DraftRepository(ABC):
    """
    Abstract base class defining the persistence collaborator of the engine.

    Concrete repositories decide where players, drafts and matches live.
    The engine only needs the reads and write-backs declared here, plus
    :meth:`lock`, which serialises every write to one draft.

    Reads return objects the caller may mutate freely; nothing is stored
    until one of the ``save_*`` methods is called.
    """

    def __init__(self) -> None:
        self._locks: Dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()

    # ========== Locking ==========

    @contextmanager
    def lock(self, draft_id: str) -> Iterator[None]:
        """Hold the per-draft write lock for the duration of the block."""
        with self._locks_guard:
            draft_lock = self._locks.setdefault(draft_id, threading.RLock())
        with draft_lock:
            yield

    def _discard_lock(self, draft_id: str) -> None:
        """Forget the lock of a draft that no longer exists."""
        with self._locks_guard:
            self._locks.pop(draft_id, None)

    # ========== Reads ==========

    @abstractmethod
    def get_players(self, ids: Optional[Iterable[str]] = None) -> List[Player]:
        """Return players by id, or every player when ``ids`` is None.

        Unknown ids are skipped.
        """

    def get_player(self, player_id: str) -> Optional[Player]:
        players = self.get_players([player_id])
        return players[0] if players else None

    @abstractmethod
    def get_draft(self, draft_id: str) -> Optional[Draft]:
        """Return a draft, or None if it does not exist."""

    @abstractmethod
    def get_drafts(self) -> List[Draft]:
        """Return every draft."""

    @abstractmethod
    def get_matches(self, draft_id: Optional[str] = None) -> List[Match]:
        """Return one draft's matches, or every match when ``draft_id`` is None."""

    # ========== Writes ==========

    @abstractmethod
    def save_player(self, player: Player) -> None:
        """Insert or replace a player."""

    @abstractmethod
    def save_player_stats(
        self, player_id: str, wins: int, losses: int, draws: int, ranking: int
    ) -> None:
        """Write back a player's lifetime record and ranking."""

    @abstractmethod
    def save_matches(self, matches: Iterable[Match]) -> None:
        """Insert or replace matches."""

    @abstractmethod
    def save_rounds(self, draft_id: str, rounds: Iterable[RoundData]) -> None:
        """Insert or replace rounds of a draft, keyed by round number."""

    @abstractmethod
    def save_draft(self, draft: Draft) -> None:
        """Insert or replace a draft."""

    @abstractmethod
    def delete_draft(self, draft_id: str) -> None:
        """Remove a draft and all of its matches."""

    @abstractmethod
    def delete_player(self, player_id: str) -> None:
        """Remove a player."""

    # ========== ChangeSet ==========

    def apply(self, change_set: ChangeSet) -> None:
        """Persist everything a lifecycle operation touched.

        Subclasses that can batch writes should override this to make the
        whole ChangeSet a single transaction.
        """
        if change_set.is_empty:
            return
        if change_set.draft is not None:
            self.save_draft(change_set.draft)
        if change_set.rounds and change_set.draft is not None:
            self.save_rounds(change_set.draft.id, change_set.rounds)
        if change_set.matches:
            self.save_matches(change_set.matches)
        for player in change_set.players:
            self.save_player_stats(
                player.id, player.wins, player.losses, player.draws, player.ranking
            )
        for draft_id in change_set.deleted_draft_ids:
            self.delete_draft(draft_id)
        for player_id in change_set.deleted_player_ids:
            self.delete_player(player_id)
