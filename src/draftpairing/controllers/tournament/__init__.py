from draftpairing.controllers.tournament.result_recorder import ResultRecorder
from draftpairing.controllers.tournament.round_manager import RoundManager

__all__ = ["ResultRecorder", "RoundManager"]
