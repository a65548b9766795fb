"""Pairing history used to avoid rematches."""

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
from typing import Iterable, Set

from .match import Match


@dataclass
class PairingHistory:
    """
    Tracks who has already been paired against whom.

    Pairs are stored as frozensets, so the check does not depend on which
    player sat in the player1 seat.

    Attributes
    ----------
    previous_matches : set of frozenset of str
        Player ID pairs that have already been matched.
    """

    previous_matches: Set[frozenset] = field(default_factory=set)

    def add_pairing(self, player1_id: str, player2_id: str) -> None:
        """Record that two players have been paired."""
        self.previous_matches.add(frozenset({player1_id, player2_id}))

    def have_played(self, player1_id: str, player2_id: str) -> bool:
        """Check if two players have previously been paired."""
        return frozenset({player1_id, player2_id}) in self.previous_matches

    @classmethod
    def from_matches(cls, matches: Iterable[Match]) -> "PairingHistory":
        """Build the history from every match given, played or not."""
        history = cls()
        for match in matches:
            history.add_pairing(match.player1_id, match.player2_id)
        return history
