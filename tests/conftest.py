import pytest

from draftpairing.league import DraftLeague
from draftpairing.models import Match
from draftpairing.storage import InMemoryRepository


@pytest.fixture
def repository():
    return InMemoryRepository()


@pytest.fixture
def league(repository):
    return DraftLeague(repository)


@pytest.fixture
def four_players(league):
    return [league.add_player(f"P{i}") for i in range(1, 5)]


@pytest.fixture
def eight_players(league):
    return [league.add_player(f"P{i}") for i in range(1, 9)]


def seat_draft(league, players, total_rounds=3):
    """Create a draft whose seating follows the roster order, then start it."""
    ids = [p.id for p in players]
    draft = league.create_draft("Cube night", ids, total_rounds=total_rounds)
    stored = league.repository.get_draft(draft.id)
    stored.seating = list(ids)
    league.repository.save_draft(stored)
    return league.start_draft(draft.id)


def score_round(league, draft_id, round_number, scores):
    """Record ``scores`` (one (s1, s2) per match, in pairing order)."""
    matches = league.get_round_matches(draft_id, round_number)
    league.record_match_results(
        draft_id,
        [(m.id, s1, s2) for m, (s1, s2) in zip(matches, scores)],
    )
    return league.get_round_matches(draft_id, round_number)


def play_match(draft_id, round_number, player1, player2, s1, s2):
    match = Match(
        draft_id=draft_id,
        round_number=round_number,
        player1_id=player1,
        player2_id=player2,
    )
    match.apply_scores(s1, s2)
    return match
