"""ChangeSet data class."""

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

from dataclasses import dataclass, field
from typing import List, Optional

from draftpairing.models.player import Player
from draftpairing.models.tournament import Draft, Match, RoundData


def _upsert(items: list, item, key: str = "id") -> None:
    for i, existing in enumerate(items):
        if getattr(existing, key) == getattr(item, key):
            items[i] = item
            return
    items.append(item)


@dataclass(slots=True)
class ChangeSet:
    """Every entity touched by one lifecycle operation.

    Lifecycle operations mutate the entities they are given and return a
    ChangeSet listing them, so the caller can persist the whole cascade
    (match, round, draft, player records, rankings) as one unit.
    """

    draft: Optional[Draft] = None
    rounds: List[RoundData] = field(default_factory=list)
    matches: List[Match] = field(default_factory=list)
    players: List[Player] = field(default_factory=list)
    deleted_draft_ids: List[str] = field(default_factory=list)
    deleted_player_ids: List[str] = field(default_factory=list)

    def add_match(self, match: Match) -> None:
        _upsert(self.matches, match)

    def add_round(self, round_data: RoundData) -> None:
        _upsert(self.rounds, round_data, key="round_number")

    def add_player(self, player: Player) -> None:
        _upsert(self.players, player)

    def merge(self, other: "ChangeSet") -> "ChangeSet":
        """Fold another ChangeSet into this one; later entries win."""
        if other.draft is not None:
            self.draft = other.draft
        for round_data in other.rounds:
            self.add_round(round_data)
        for match in other.matches:
            self.add_match(match)
        for player in other.players:
            self.add_player(player)
        self.deleted_draft_ids.extend(other.deleted_draft_ids)
        self.deleted_player_ids.extend(other.deleted_player_ids)
        return self

    @property
    def is_empty(self) -> bool:
        return not (
            self.draft is not None
            or self.rounds
            or self.matches
            or self.players
            or self.deleted_draft_ids
            or self.deleted_player_ids
        )


#  LocalWords:  ChangeSet
