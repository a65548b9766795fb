import random

import pytest

from draftpairing.constants import STATUS_ACTIVE, STATUS_COMPLETED, STATUS_PENDING
from draftpairing.controllers import RoundManager, create_draft, delete_draft
from draftpairing.exceptions import (
    DeleteNotAllowedException,
    DraftNotFoundException,
    InvalidConfigurationException,
    InvalidRosterSizeException,
    InvalidTransitionException,
    PlayerNotFoundException,
    RoundNotFoundException,
    RoundNotReadyException,
)
from draftpairing.models import DraftConfig

from conftest import score_round, seat_draft


def _ids(players):
    return [p.id for p in players]


# ========== Creation ==========


def test_create_draft_is_pending_with_seated_roster(league, eight_players):
    draft = league.create_draft(
        "Vintage cube", _ids(eight_players), cube_name="vintage", rng=random.Random(3)
    )

    assert draft.status == STATUS_PENDING
    assert draft.current_round == 0
    assert draft.rounds == []
    assert draft.players == _ids(eight_players)
    assert sorted(draft.seating) == sorted(draft.players)
    assert league.get_draft(draft.id).config.cube_name == "vintage"


@pytest.mark.parametrize("size", [2, 3, 5, 7])
def test_create_draft_rejects_unsupported_roster_sizes(size):
    roster = [f"P{i}" for i in range(size)]

    with pytest.raises(InvalidRosterSizeException):
        create_draft(DraftConfig(name="Bad"), roster, roster)


def test_create_draft_rejects_repeated_players():
    roster = ["P1", "P1", "P2", "P3"]

    with pytest.raises(InvalidRosterSizeException):
        create_draft(DraftConfig(name="Bad"), roster, roster)


def test_create_draft_rejects_unknown_players():
    with pytest.raises(PlayerNotFoundException):
        create_draft(DraftConfig(name="Bad"), ["P1", "P2", "P3", "P9"], ["P1", "P2", "P3"])


@pytest.mark.parametrize("rounds", [0, 2, 5])
def test_create_draft_rejects_unsupported_round_counts(rounds):
    roster = ["P1", "P2", "P3", "P4"]

    with pytest.raises(InvalidConfigurationException):
        create_draft(DraftConfig(name="Bad", total_rounds=rounds), roster, roster)


# ========== Start ==========


def test_start_draft_creates_round_one(league, four_players):
    draft = seat_draft(league, four_players)

    assert draft.status == STATUS_ACTIVE
    assert draft.current_round == 1
    assert draft.started_at is not None
    assert len(draft.rounds) == 1

    matches = league.get_round_matches(draft.id, 1)
    assert [m.pair for m in matches] == [
        (four_players[0].id, four_players[2].id),
        (four_players[1].id, four_players[3].id),
    ]
    assert all(m.is_pending for m in matches)


def test_start_draft_only_from_pending(league, four_players):
    draft = seat_draft(league, four_players)

    with pytest.raises(InvalidTransitionException):
        league.start_draft(draft.id)


def test_start_unknown_draft(league):
    with pytest.raises(DraftNotFoundException):
        league.start_draft("Draft-missing")


# ========== Round completion ==========


def test_round_with_pending_matches_cannot_complete(league, four_players):
    draft = seat_draft(league, four_players)
    first = league.get_round_matches(draft.id, 1)[0]
    league.record_match_result(first.id, 2, 0)

    assert not league.is_round_ready(draft.id, 1)
    with pytest.raises(RoundNotReadyException):
        league.complete_round(draft.id, 1)

    stored = league.get_draft(draft.id)
    assert stored.current_round == 1
    assert not stored.rounds[0].is_completed


def test_complete_round_pairs_the_next_round(league, four_players):
    p1, p2, p3, p4 = four_players
    draft = seat_draft(league, four_players)
    score_round(league, draft.id, 1, [(2, 0), (1, 2)])

    assert league.is_round_ready(draft.id, 1)
    draft = league.complete_round(draft.id, 1)

    assert draft.current_round == 2
    assert draft.rounds[0].is_completed
    assert not draft.rounds[1].is_completed
    assert [m.pair for m in league.get_round_matches(draft.id, 2)] == [
        (p1.id, p4.id),
        (p2.id, p3.id),
    ]


def test_only_the_current_round_can_complete(league, four_players):
    draft = seat_draft(league, four_players)
    score_round(league, draft.id, 1, [(2, 0), (2, 0)])
    league.complete_round(draft.id, 1)

    with pytest.raises(InvalidTransitionException):
        league.complete_round(draft.id, 1)
    with pytest.raises(RoundNotFoundException):
        league.complete_round(draft.id, 3)


def test_pending_draft_has_no_round_to_complete(league, four_players):
    draft = league.create_draft("Not started", _ids(four_players))

    with pytest.raises(InvalidTransitionException):
        league.complete_round(draft.id, 1)


@pytest.mark.parametrize("total_rounds", [3, 4])
def test_last_round_completes_the_draft(league, four_players, total_rounds):
    draft = seat_draft(league, four_players, total_rounds=total_rounds)

    for round_number in range(1, total_rounds + 1):
        score_round(league, draft.id, round_number, [(2, 1), (0, 2)])
        draft = league.complete_round(draft.id, round_number)

    assert draft.status == STATUS_COMPLETED
    assert draft.completed_at is not None
    assert draft.current_round == total_rounds
    assert len(draft.rounds) == total_rounds
    assert all(r.is_completed for r in draft.rounds)
    assert len(league.repository.get_matches(draft.id)) == 2 * total_rounds

    with pytest.raises(InvalidTransitionException):
        league.complete_round(draft.id, total_rounds)


def test_no_player_is_double_booked(league, eight_players):
    draft = seat_draft(league, eight_players)

    for round_number in range(1, 4):
        matches = league.get_round_matches(draft.id, round_number)
        seated = [player_id for m in matches for player_id in m.pair]
        assert sorted(seated) == sorted(draft.players)
        score_round(league, draft.id, round_number, [(2, 0), (2, 1), (1, 2), (0, 2)])
        draft = league.complete_round(draft.id, round_number)


def test_round_manager_does_not_touch_storage(four_players):
    ids = _ids(four_players)
    draft = create_draft(DraftConfig(name="Pure"), ids, ids, rng=random.Random(1))

    change_set = RoundManager().start_draft(draft)

    assert change_set.draft is draft
    assert [r.round_number for r in change_set.rounds] == [1]
    assert len(change_set.matches) == 2


# ========== Deletion ==========


def test_only_completed_drafts_can_be_deleted(league, four_players):
    draft = seat_draft(league, four_players)

    with pytest.raises(DeleteNotAllowedException):
        league.delete_draft(draft.id)
    assert league.get_draft(draft.id) is not None


def test_deleting_a_draft_keeps_lifetime_records(league, four_players):
    draft = seat_draft(league, four_players)
    for round_number in range(1, 4):
        score_round(league, draft.id, round_number, [(2, 0), (1, 1)])
        league.complete_round(draft.id, round_number)
    before = {p.id: (p.wins, p.losses, p.draws, p.ranking) for p in league.get_players()}

    league.delete_draft(draft.id)

    with pytest.raises(DraftNotFoundException):
        league.get_draft(draft.id)
    assert league.repository.get_matches(draft.id) == []
    after = {p.id: (p.wins, p.losses, p.draws, p.ranking) for p in league.get_players()}
    assert after == before


def test_delete_draft_change_set_names_only_the_draft(league, four_players):
    draft = seat_draft(league, four_players)
    for round_number in range(1, 4):
        score_round(league, draft.id, round_number, [(2, 1), (0, 2)])
        league.complete_round(draft.id, round_number)
    matches = league.repository.get_matches(draft.id)

    change_set = delete_draft(league.get_draft(draft.id), matches)

    assert change_set.deleted_draft_ids == [draft.id]
    assert change_set.players == [] and change_set.matches == []

    league.repository.apply(change_set)

    assert league.repository.get_matches() == []
