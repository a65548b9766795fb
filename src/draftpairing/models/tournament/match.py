"""Match data class."""

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
from typing import Any, Dict, Optional, Tuple

from draftpairing.constants import (
    MATCH_RESULTS,
    OUTCOME_DRAW,
    OUTCOME_LOSS,
    OUTCOME_WIN,
    RESULT_DRAW,
    RESULT_PENDING,
    RESULT_PLAYER1_WIN,
    RESULT_PLAYER2_WIN,
)
from draftpairing.type_hints import MatchOutcome, PlayerOutcome
from draftpairing.utils import format_timestamp, generate_id, parse_timestamp, utc_now


def result_from_scores(player1_score: int, player2_score: int) -> MatchOutcome:
    """Derive a match result from the two game scores.

    Equal scores only count as a draw when at least one game was won;
    a 0-0 score means the match has not been played yet.
    """
    if player1_score > player2_score:
        return RESULT_PLAYER1_WIN
    if player2_score > player1_score:
        return RESULT_PLAYER2_WIN
    if player1_score > 0:
        return RESULT_DRAW
    return RESULT_PENDING


@dataclass
class Match:
    """One pairing between two players within a round of a draft.

    Attributes
    ----------
    draft_id : str
        ID of the draft this match belongs to.
    round_number : int
        Round number (1-indexed).
    player1_id, player2_id : str
        IDs of the two seats. They are never equal.
    player1_score, player2_score : int
        Games won by each side.
    result : str
        One of pending, player1Win, player2Win, draw. Always consistent with
        the scores.
    completed_at : datetime or None
        Set while the result is not pending.
    """

    draft_id: str
    round_number: int
    player1_id: str
    player2_id: str
    id: str = field(default_factory=lambda: generate_id("Match"))
    player1_score: int = 0
    player2_score: int = 0
    result: MatchOutcome = RESULT_PENDING
    created_at: datetime = field(default_factory=utc_now)
    completed_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if self.player1_id == self.player2_id:
            raise ValueError(f"Player {self.player1_id} cannot be paired with themselves")

    @property
    def is_pending(self) -> bool:
        return self.result == RESULT_PENDING

    @property
    def pair(self) -> Tuple[str, str]:
        return (self.player1_id, self.player2_id)

    def involves(self, player_id: str) -> bool:
        return player_id in (self.player1_id, self.player2_id)

    def scores_for(self, player_id: str) -> Tuple[int, int]:
        """Return (own games, opponent games) from the player's side."""
        if player_id == self.player1_id:
            return self.player1_score, self.player2_score
        if player_id == self.player2_id:
            return self.player2_score, self.player1_score
        raise ValueError(f"Player {player_id} is not in match {self.id}")

    def outcome_for(self, player_id: str) -> Optional[PlayerOutcome]:
        """Win, loss or draw from the player's side; None while pending."""
        return outcome_for(self.result, self.player1_id, player_id)

    def apply_scores(
        self, player1_score: int, player2_score: int, now: Optional[datetime] = None
    ) -> None:
        """Overwrite both scores and recompute result and completion time."""
        self.player1_score = player1_score
        self.player2_score = player2_score
        self.result = result_from_scores(player1_score, player2_score)
        self.completed_at = None if self.is_pending else (now or utc_now())

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "id": self.id,
            "draft_id": self.draft_id,
            "round_number": self.round_number,
            "player1_id": self.player1_id,
            "player2_id": self.player2_id,
            "player1_score": self.player1_score,
            "player2_score": self.player2_score,
            "result": self.result,
            "created_at": format_timestamp(self.created_at),
            "completed_at": format_timestamp(self.completed_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""
        result = data.get("result", RESULT_PENDING)
        if result not in MATCH_RESULTS:
            raise ValueError(f"Unknown match result: {result!r}")
        return cls(
            id=data["id"],
            draft_id=data["draft_id"],
            round_number=data["round_number"],
            player1_id=data["player1_id"],
            player2_id=data["player2_id"],
            player1_score=data.get("player1_score", 0),
            player2_score=data.get("player2_score", 0),
            result=result,
            created_at=parse_timestamp(data.get("created_at")) or utc_now(),
            completed_at=parse_timestamp(data.get("completed_at")),
        )


def outcome_for(
    result: MatchOutcome, player1_id: str, player_id: str
) -> Optional[PlayerOutcome]:
    """Translate a match result into the outcome seen by ``player_id``."""
    if result == RESULT_PENDING:
        return None
    if result == RESULT_DRAW:
        return OUTCOME_DRAW
    won_as_player1 = result == RESULT_PLAYER1_WIN
    if (player_id == player1_id) == won_as_player1:
        return OUTCOME_WIN
    return OUTCOME_LOSS
