from draftpairing.models.tournament.draft import Draft
from draftpairing.models.tournament.draft_config import DraftConfig
from draftpairing.models.tournament.match import Match, outcome_for, result_from_scores
from draftpairing.models.tournament.pairing_history import PairingHistory
from draftpairing.models.tournament.round_data import RoundData

__all__ = [
    "Draft",
    "DraftConfig",
    "Match",
    "PairingHistory",
    "RoundData",
    "outcome_for",
    "result_from_scores",
]
