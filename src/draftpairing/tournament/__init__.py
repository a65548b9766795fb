"""Standings for Draft Pairing.

Pure calculations over match histories, shared by the pairing generator,
the draft lifecycle and the global ranking aggregator.
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

from draftpairing.tournament.standings import (
    PlayerStats,
    calculate_player_stats,
    compute_standings,
    draft_record,
    sort_by_standing,
)

__all__ = [
    "PlayerStats",
    "calculate_player_stats",
    "compute_standings",
    "draft_record",
    "sort_by_standing",
]
