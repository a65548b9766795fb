"""Random Draft Generator (RDG) - Internal testing system for draft pairings.

This module plays complete drafts with simulated best-of-three matches
through the public league API. It is used by the test suite and the
``draft-test`` CLI to exercise pairing, standings and rankings end to end.
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

import json
import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from draftpairing.constants import DEFAULT_TOTAL_ROUNDS
from draftpairing.league import DraftLeague
from draftpairing.storage import InMemoryRepository
from draftpairing.utils import setup_logger

logger = setup_logger(__name__)

GAMES_TO_WIN = 2


class ResultPattern(Enum):
    """Result generation patterns for drafts."""

    REALISTIC = "realistic"
    BALANCED = "balanced"
    PREDICTABLE = "predictable"
    RANDOM = "random"


@dataclass
class RDGConfig:
    """Configuration for Random Draft Generator."""

    num_players: int = 8
    num_rounds: int = DEFAULT_TOTAL_ROUNDS
    result_pattern: ResultPattern = ResultPattern.REALISTIC
    seed: Optional[int] = None
    draw_percentage: int = 5
    name_prefix: str = "Drafter"


class PlayerFactory:
    """Factory for creating league players with a hidden skill level."""

    def __init__(self, config: RDGConfig):
        self.config = config
        self.random = (
            random.Random(config.seed) if config.seed is not None else random.Random()
        )

    def create_players(self, league: DraftLeague) -> Dict[str, float]:
        """Register players in the league.

        Returns:
            Skill in [0, 1] keyed by player ID
        """
        skills = {}
        for i in range(self.config.num_players):
            player = league.add_player(f"{self.config.name_prefix}-{i + 1:02d}")
            skills[player.id] = self.random.random()

        logger.info("Created %s players", len(skills))
        return skills


class ResultSimulator:
    """Simulates best-of-three match scores."""

    def __init__(self, config: RDGConfig):
        self.config = config
        self.random = (
            random.Random(config.seed) if config.seed is not None else random.Random()
        )

    def simulate_match(self, skill1: float, skill2: float) -> Tuple[int, int]:
        """Return (player1 games, player2 games); never 0-0."""
        if self.random.random() < self.config.draw_percentage / 100.0:
            return 1, 1

        game_prob = self._game_win_probability(skill1, skill2)
        player1_games = player2_games = 0
        while max(player1_games, player2_games) < GAMES_TO_WIN:
            if self.random.random() < game_prob:
                player1_games += 1
            else:
                player2_games += 1
        return player1_games, player2_games

    def _game_win_probability(self, skill1: float, skill2: float) -> float:
        pattern = self.config.result_pattern
        if pattern == ResultPattern.RANDOM:
            return self.random.random()
        if pattern == ResultPattern.BALANCED:
            return 0.5
        if pattern == ResultPattern.PREDICTABLE:
            return max(0.05, min(0.95, 0.5 + (skill1 - skill2) * 2))
        return max(0.1, min(0.9, 0.5 + (skill1 - skill2) / 2))


class RandomDraftGenerator:
    """Main draft generator orchestrating player creation and results."""

    def __init__(self, config: RDGConfig, league: Optional[DraftLeague] = None):
        self.config = config
        self.league = league or DraftLeague(InMemoryRepository())
        self.player_factory = PlayerFactory(config)
        self.result_simulator = ResultSimulator(config)
        self.random = (
            random.Random(config.seed) if config.seed is not None else random.Random()
        )

    def generate_complete_draft(self) -> Dict:
        """Play a complete draft and return its final state."""
        logger.info(
            "Generating draft: %s players, %s rounds",
            self.config.num_players,
            self.config.num_rounds,
        )
        skills = self.player_factory.create_players(self.league)

        name = "RDG draft"
        if self.config.seed is not None:
            name = f"{name} {self.config.seed}"
        draft = self.league.create_draft(
            name,
            list(skills),
            total_rounds=self.config.num_rounds,
            rng=self.random,
        )
        draft = self.league.start_draft(draft.id)

        rounds = []
        for round_number in range(1, self.config.num_rounds + 1):
            rounds.append(self._simulate_round(draft.id, round_number, skills))
            draft = self.league.complete_round(draft.id, round_number)

        logger.info("Draft generation complete")
        return {
            "config": self.config,
            "draft": draft,
            "players": self.league.get_players(),
            "rounds": rounds,
            "matches": self.league.repository.get_matches(draft.id),
            "standings": self.league.compute_standings(draft.id),
            "rankings": self.league.leaderboard(),
        }

    def _simulate_round(
        self, draft_id: str, round_number: int, skills: Dict[str, float]
    ) -> Dict:
        matches = self.league.get_round_matches(draft_id, round_number)
        results = []
        for match in matches:
            player1_score, player2_score = self.result_simulator.simulate_match(
                skills[match.player1_id], skills[match.player2_id]
            )
            results.append((match.id, player1_score, player2_score))
        self.league.record_match_results(draft_id, results)

        return {
            "round_number": round_number,
            "pairings": [m.pair for m in matches],
            "results": results,
        }

    def export_json_format(self, draft_data: Dict) -> str:
        names = {p.id: p.name for p in draft_data["players"]}

        export_data = {
            "draft_config": {
                "num_players": self.config.num_players,
                "num_rounds": self.config.num_rounds,
                "result_pattern": self.config.result_pattern.value,
                "seed": self.config.seed,
                "draw_percentage": self.config.draw_percentage,
            },
            "draft": draft_data["draft"].to_dict(),
            "matches": [m.to_dict() for m in draft_data["matches"]],
            "standings": [
                {"name": names.get(s.player_id, s.player_id), **s.to_dict()}
                for s in draft_data["standings"]
            ],
            "rankings": [p.to_dict() for p in draft_data["rankings"]],
        }
        return json.dumps(export_data, indent=2)


def summarize_standings(draft_data: Dict) -> List[str]:
    """Format the final standings as printable lines."""
    names = {p.id: p.name for p in draft_data["players"]}
    lines = []
    for position, stats in enumerate(draft_data["standings"], start=1):
        lines.append(
            f"{position:2d}. {names.get(stats.player_id, stats.player_id):15} "
            f"{stats.wins}-{stats.losses}-{stats.draws}  "
            f"{stats.points:2d} pts  "
            f"MW {stats.match_win_pct:5.1f}%  GW {stats.game_win_pct:5.1f}%"
        )
    return lines


def create_rdg_generator(config: RDGConfig) -> RandomDraftGenerator:
    """Create RDG draft generator with given configuration."""
    return RandomDraftGenerator(config)


def create_small_draft(seed: Optional[int] = None) -> RandomDraftGenerator:
    """Create a four player, three round draft."""
    return create_rdg_generator(RDGConfig(num_players=4, num_rounds=3, seed=seed))
