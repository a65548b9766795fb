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

# --- Constants ---
SAVE_FILE_EXTENSION = ".json"

# Match points
WIN_POINTS = 3
DRAW_POINTS = 1
LOSS_POINTS = 0

# Draft shape
SUPPORTED_ROSTER_SIZES = (4, 6, 8)
SUPPORTED_ROUND_COUNTS = (3, 4)
DEFAULT_TOTAL_ROUNDS = 3

# Draft status values
STATUS_PENDING = "pending"
STATUS_ACTIVE = "active"
STATUS_COMPLETED = "completed"
DRAFT_STATUSES = (STATUS_PENDING, STATUS_ACTIVE, STATUS_COMPLETED)

# Match result values (also the serialized form)
RESULT_PENDING = "pending"
RESULT_PLAYER1_WIN = "player1Win"
RESULT_PLAYER2_WIN = "player2Win"
RESULT_DRAW = "draw"
MATCH_RESULTS = (
    RESULT_PENDING,
    RESULT_PLAYER1_WIN,
    RESULT_PLAYER2_WIN,
    RESULT_DRAW,
)

# Per-player outcome of a resolved match
OUTCOME_WIN = "win"
OUTCOME_LOSS = "loss"
OUTCOME_DRAW = "draw"

# Leaderboard sort keys
SORT_RANKING = "ranking"
SORT_WINS = "wins"
SORT_LOSSES = "losses"
SORT_WIN_RATE = "win_rate"
LEADERBOARD_SORT_KEYS = (SORT_RANKING, SORT_WINS, SORT_LOSSES, SORT_WIN_RATE)

# Environment variable controlling the package log level
LOG_LEVEL_ENV_VAR = "DRAFTPAIRING_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
