"""DraftConfig data class."""

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

from dataclasses import dataclass
from typing import Any, Dict, Optional

from draftpairing.constants import DEFAULT_TOTAL_ROUNDS


@dataclass
class DraftConfig:
    """Draft configuration settings.

    Attributes
    ----------
    name : str
        Draft name.
    total_rounds : int
        Number of rounds to play, 3 or 4.
    description : str or None
        Free-form description.
    cube_name : str or None
        Reference to the external cube the draft is played with.
    """

    name: str
    total_rounds: int = DEFAULT_TOTAL_ROUNDS
    description: Optional[str] = None
    cube_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "total_rounds": self.total_rounds,
            "description": self.description,
            "cube_name": self.cube_name,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DraftConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            name=data.get("name", "Untitled Draft"),
            total_rounds=data.get("total_rounds", DEFAULT_TOTAL_ROUNDS),
            description=data.get("description"),
            cube_name=data.get("cube_name"),
        )
