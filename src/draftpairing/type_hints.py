"""Type hints used in Draft Pairing."""

from typing import List, Literal, Tuple

DraftStatus = Literal["pending", "active", "completed"]

MatchOutcome = Literal["pending", "player1Win", "player2Win", "draw"]

# A player's view of a resolved match
PlayerOutcome = Literal["win", "loss", "draw"]

# Ordered list of player ids
Roster = List[str]
# (player1_id, player2_id)
Pairing = Tuple[str, str]
# All pairings for one round
Pairings = List[Pairing]
# (match_id, player1_score, player2_score)
ScoreEntry = Tuple[str, int, int]

#  LocalWords:  Pairings
