"""Controllers for Draft Pairing.

Each controller owns one slice of the draft lifecycle and works purely on
the entities handed to it; persistence is left to the caller.
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

from draftpairing.controllers.draft import create_draft, delete_draft
from draftpairing.controllers.player import (
    create_player,
    ensure_player_deletable,
    rename_player,
)
from draftpairing.controllers.rankings import leaderboard, recompute_global_rankings
from draftpairing.controllers.tournament import ResultRecorder, RoundManager

__all__ = [
    "ResultRecorder",
    "RoundManager",
    "create_draft",
    "delete_draft",
    "create_player",
    "rename_player",
    "ensure_player_deletable",
    "leaderboard",
    "recompute_global_rankings",
]
