import json

import pytest

from draftpairing.constants import STATUS_ACTIVE, STATUS_PENDING
from draftpairing.exceptions import (
    DraftNotFoundException,
    FileLoadException,
    FileSaveException,
    PlayerNotFoundException,
)
from draftpairing.league import DraftLeague
from draftpairing.models import Draft, Match, Player, RoundData
from draftpairing.storage import InMemoryRepository, JsonFileRepository

from conftest import score_round, seat_draft


def _play_draft(league):
    players = [league.add_player(f"P{i}") for i in range(1, 5)]
    draft = seat_draft(league, players)
    score_round(league, draft.id, 1, [(2, 1), (1, 1)])
    league.complete_round(draft.id, 1)
    return league.get_draft(draft.id)


def test_reads_are_copies(repository):
    repository.save_player(Player(name="A", id="A"))

    player = repository.get_player("A")
    player.wins = 10

    assert repository.get_player("A").wins == 0


def test_writes_are_copies(repository):
    player = Player(name="A", id="A")
    repository.save_player(player)

    player.name = "Changed"

    assert repository.get_player("A").name == "A"


def test_get_players_skips_unknown_ids(repository):
    repository.save_player(Player(name="A", id="A"))

    assert [p.id for p in repository.get_players(["A", "missing"])] == ["A"]
    assert repository.get_player("missing") is None


def test_save_player_stats(repository):
    repository.save_player(Player(name="A", id="A"))

    repository.save_player_stats("A", 3, 2, 1, 4)

    stored = repository.get_player("A")
    assert (stored.wins, stored.losses, stored.draws, stored.ranking) == (3, 2, 1, 4)
    with pytest.raises(PlayerNotFoundException):
        repository.save_player_stats("missing", 0, 0, 0, 1)


def test_save_rounds_replaces_by_number(league):
    draft = _play_draft(league)
    repository = league.repository

    repository.save_rounds(draft.id, [RoundData(round_number=2, match_ids=["x", "y"])])

    rounds = repository.get_draft(draft.id).rounds
    assert len(rounds) == 2
    assert rounds[1].match_ids == ["x", "y"]


def test_delete_draft_removes_its_matches(league):
    draft = _play_draft(league)
    repository = league.repository

    repository.delete_draft(draft.id)

    assert repository.get_draft(draft.id) is None
    assert repository.get_matches() == []
    with pytest.raises(DraftNotFoundException):
        repository.delete_draft(draft.id)


def test_lock_is_reentrant(repository):
    with repository.lock("D1"):
        with repository.lock("D1"):
            pass


def test_draft_serialization_round_trip(league):
    draft = _play_draft(league)

    assert Draft.from_dict(draft.to_dict()) == draft


def test_match_serialization_round_trip(league):
    draft = _play_draft(league)
    match = league.get_round_matches(draft.id, 1)[0]

    restored = Match.from_dict(json.loads(json.dumps(match.to_dict())))

    assert restored == match
    assert restored.completed_at == match.completed_at


def test_json_store_survives_reopening(tmp_path):
    path = tmp_path / "league.json"
    league = DraftLeague(JsonFileRepository(path))
    draft = _play_draft(league)

    reopened = DraftLeague(JsonFileRepository(path))

    assert reopened.get_draft(draft.id) == draft
    assert sorted(p.name for p in reopened.get_players()) == ["P1", "P2", "P3", "P4"]
    assert len(reopened.get_round_matches(draft.id, 2)) == 2
    assert reopened.get_players() == league.get_players()


def test_json_store_continues_a_saved_draft(tmp_path):
    path = tmp_path / "league.json"
    draft = _play_draft(DraftLeague(JsonFileRepository(path)))

    reopened = DraftLeague(JsonFileRepository(path))
    score_round(reopened, draft.id, 2, [(2, 0), (0, 2)])
    reopened.complete_round(draft.id, 2)

    assert DraftLeague(JsonFileRepository(path)).get_draft(draft.id).current_round == 3


def test_json_store_adds_extension(tmp_path):
    repository = JsonFileRepository(tmp_path / "league")
    repository.save_player(Player(name="A"))

    assert repository.path.name == "league.json"
    assert repository.path.exists()


def test_json_store_rejects_corrupt_files(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(FileLoadException):
        JsonFileRepository(path)


def test_json_store_rejects_malformed_records(tmp_path):
    path = tmp_path / "malformed.json"
    path.write_text(json.dumps({"players": [{"name": "no id"}]}), encoding="utf-8")

    with pytest.raises(FileLoadException):
        JsonFileRepository(path)


def test_in_memory_to_dict_lists_everything(league):
    _play_draft(league)

    data = league.repository.to_dict()

    assert len(data["players"]) == 4
    assert len(data["drafts"]) == 1
    assert len(data["matches"]) == 4

    copy = InMemoryRepository()
    copy.load_dict(data)
    assert copy.get_drafts() == league.get_drafts()


def test_failed_save_leaves_the_store_unchanged(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    league = DraftLeague(JsonFileRepository(blocker / "league.json"))

    with pytest.raises(FileSaveException):
        league.add_player("Alice")

    assert league.get_players() == []


def test_failed_apply_can_be_retried(tmp_path):
    repository = JsonFileRepository(tmp_path / "league.json")
    league = DraftLeague(repository)
    players = [league.add_player(f"P{i}") for i in range(1, 5)]
    draft = league.create_draft("Cube night", [p.id for p in players])

    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    saved_path = repository.path
    repository.path = blocker / "league.json"
    with pytest.raises(FileSaveException):
        league.start_draft(draft.id)

    assert league.get_draft(draft.id).status == STATUS_PENDING
    assert league.repository.get_matches(draft.id) == []

    repository.path = saved_path
    league.start_draft(draft.id)

    reopened = DraftLeague(JsonFileRepository(saved_path))
    assert reopened.get_draft(draft.id).status == STATUS_ACTIVE
    assert len(reopened.get_round_matches(draft.id, 1)) == 2


def test_deleting_a_draft_drops_its_lock(league):
    draft = _play_draft(league)
    for round_number in (2, 3):
        score_round(league, draft.id, round_number, [(2, 0), (0, 2)])
        league.complete_round(draft.id, round_number)

    league.delete_draft(draft.id)

    assert draft.id not in league.repository._locks
