"""A player in the draft league with a lifetime match record."""

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

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from draftpairing.constants import (
    DRAW_POINTS,
    OUTCOME_DRAW,
    OUTCOME_LOSS,
    OUTCOME_WIN,
    WIN_POINTS,
)
from draftpairing.type_hints import PlayerOutcome
from draftpairing.utils import (
    format_timestamp,
    generate_id,
    parse_timestamp,
    utc_now,
)


@dataclass
class Player:
    """Represents a player in the league.

    The win/loss/draw counters are lifetime aggregates across every draft the
    player has taken part in. They survive deletion of the drafts that
    produced them.

    Attributes
    ----------
    name : str
        Display name, unique across the league (case-insensitive).
    id : str
        Opaque unique identifier.
    avatar : str or None
        Optional avatar reference.
    wins, losses, draws : int
        Lifetime match record.
    ranking : int
        Global ranking, 1 is best.
    created_at : datetime
        When the player joined the roster.
    """

    name: str
    id: str = field(default_factory=lambda: generate_id("Player"))
    avatar: Optional[str] = None
    wins: int = 0
    losses: int = 0
    draws: int = 0
    ranking: int = 0
    created_at: datetime = field(default_factory=utc_now)

    @property
    def points(self) -> int:
        """Lifetime points: 3 per win, 1 per draw."""
        return self.wins * WIN_POINTS + self.draws * DRAW_POINTS

    @property
    def matches_played(self) -> int:
        return self.wins + self.losses + self.draws

    @property
    def win_rate(self) -> float:
        """Percentage of resolved matches won, 0 when none were played."""
        if self.matches_played == 0:
            return 0.0
        return self.wins / self.matches_played * 100

    def apply_outcome(self, outcome: Optional[PlayerOutcome], delta: int = 1) -> None:
        """Add (or with ``delta=-1`` remove) one match outcome from the record.

        Args:
            outcome: 'win', 'loss', 'draw' or None for an unresolved match
            delta: +1 to count the outcome, -1 to retract it
        """
        if outcome is None:
            return
        if outcome == OUTCOME_WIN:
            self.wins = max(0, self.wins + delta)
        elif outcome == OUTCOME_LOSS:
            self.losses = max(0, self.losses + delta)
        elif outcome == OUTCOME_DRAW:
            self.draws = max(0, self.draws + delta)
        else:
            raise ValueError(f"Unknown outcome: {outcome!r}")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "avatar": self.avatar,
            "wins": self.wins,
            "losses": self.losses,
            "draws": self.draws,
            "ranking": self.ranking,
            "created_at": format_timestamp(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """Deserialize player from dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            avatar=data.get("avatar"),
            wins=data.get("wins", 0),
            losses=data.get("losses", 0),
            draws=data.get("draws", 0),
            ranking=data.get("ranking", 0),
            created_at=parse_timestamp(data.get("created_at")) or utc_now(),
        )

    def __str__(self) -> str:
        return f"{self.name} ({self.wins}-{self.losses}-{self.draws})"
