"""Draft data class - one event with a fixed roster."""

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
from datetime import datetime
from typing import Any, Dict, List, Optional

from draftpairing.constants import (
    DRAFT_STATUSES,
    STATUS_ACTIVE,
    STATUS_COMPLETED,
    STATUS_PENDING,
)
from draftpairing.type_hints import DraftStatus
from draftpairing.utils import format_timestamp, generate_id, parse_timestamp, utc_now

from .draft_config import DraftConfig
from .round_data import RoundData


@dataclass
class Draft:
    """A draft: a fixed roster playing a fixed number of Swiss rounds.

    Attributes
    ----------
    config : DraftConfig
        Name, round count and descriptive settings.
    players : list of str
        Roster of player IDs. Immutable after creation.
    seating : list of str
        Permutation of the roster chosen once at creation. Only used for
        round 1 pairings.
    status : str
        pending, active or completed.
    rounds : list of RoundData
        Rounds created so far, in order.
    current_round : int
        Number of the latest round, 0 while pending.
    """

    config: DraftConfig
    players: List[str]
    seating: List[str]
    id: str = field(default_factory=lambda: generate_id("Draft"))
    status: DraftStatus = STATUS_PENDING
    rounds: List[RoundData] = field(default_factory=list)
    current_round: int = 0
    created_at: datetime = field(default_factory=utc_now)
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    # ========== Properties ==========

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def total_rounds(self) -> int:
        return self.config.total_rounds

    @property
    def is_pending(self) -> bool:
        return self.status == STATUS_PENDING

    @property
    def is_active(self) -> bool:
        return self.status == STATUS_ACTIVE

    @property
    def is_completed(self) -> bool:
        return self.status == STATUS_COMPLETED

    # ========== Round lookup ==========

    def get_round(self, round_number: int) -> Optional[RoundData]:
        """Get data for a specific round.

        Args:
            round_number: The round number (1-indexed)

        Returns:
            RoundData for the round, or None if it does not exist
        """
        if 1 <= round_number <= len(self.rounds):
            return self.rounds[round_number - 1]
        return None

    def references_player(self, player_id: str) -> bool:
        return player_id in self.players

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize draft to dictionary."""
        return {
            "id": self.id,
            "config": self.config.to_dict(),
            "players": list(self.players),
            "seating": list(self.seating),
            "status": self.status,
            "rounds": [r.to_dict() for r in self.rounds],
            "current_round": self.current_round,
            "created_at": format_timestamp(self.created_at),
            "started_at": format_timestamp(self.started_at),
            "completed_at": format_timestamp(self.completed_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Draft":
        """Deserialize draft from dictionary."""
        status = data.get("status", STATUS_PENDING)
        if status not in DRAFT_STATUSES:
            raise ValueError(f"Unknown draft status: {status!r}")
        return cls(
            id=data["id"],
            config=DraftConfig.from_dict(data.get("config", {})),
            players=list(data["players"]),
            seating=list(data.get("seating", data["players"])),
            status=status,
            rounds=[RoundData.from_dict(r) for r in data.get("rounds", [])],
            current_round=data.get("current_round", 0),
            created_at=parse_timestamp(data.get("created_at")) or utc_now(),
            started_at=parse_timestamp(data.get("started_at")),
            completed_at=parse_timestamp(data.get("completed_at")),
        )
