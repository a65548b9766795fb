from draftpairing.models.change_set import ChangeSet
from draftpairing.models.player import Player
from draftpairing.models.tournament import (
    Draft,
    DraftConfig,
    Match,
    PairingHistory,
    RoundData,
)

__all__ = [
    "ChangeSet",
    "Player",
    "Draft",
    "DraftConfig",
    "Match",
    "PairingHistory",
    "RoundData",
]
