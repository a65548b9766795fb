"""Data model for draft round."""

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
from typing import Any, Dict, List


@dataclass
class RoundData:
    """Container for a single round of a draft.

    Attributes
    ----------
    round_number : int
        Round number (1-indexed).
    match_ids : list of str
        IDs of the matches played in this round, in pairing order.
    is_completed : bool
        Set once every match has a result. Never reset.
    """

    round_number: int
    match_ids: List[str] = field(default_factory=list)
    is_completed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary."""
        return {
            "round_number": self.round_number,
            "match_ids": list(self.match_ids),
            "is_completed": self.is_completed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoundData":
        """Deserialize round data from dictionary."""
        return cls(
            round_number=data["round_number"],
            match_ids=list(data.get("match_ids", [])),
            is_completed=data.get("is_completed", False),
        )
