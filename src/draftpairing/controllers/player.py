"""Player controller for managing the league roster."""

from typing import Iterable, Optional

from draftpairing.exceptions import (
    DeleteNotAllowedException,
    DuplicatePlayerException,
    InvalidPlayerDataException,
)
from draftpairing.models import Draft, Player
from draftpairing.utils import setup_logger
from draftpairing.utils.validation import validate_player_name

logger = setup_logger(__name__)


def _checked_name(name: Optional[str], others: Iterable[Player]) -> str:
    result = validate_player_name(name)
    if not result:
        raise InvalidPlayerDataException(result.error_message)

    result = validate_player_name(result.sanitized_value, [p.name for p in others])
    if not result:
        logger.warning("Rejected player name %r: %s", name, result.error_message)
        raise DuplicatePlayerException(result.error_message)
    return result.sanitized_value


def create_player(
    name: str, existing: Iterable[Player], avatar: Optional[str] = None
) -> Player:
    """Create a new player with an empty record.

    The new player ranks last: ``len(existing) + 1``.

    Raises:
        InvalidPlayerDataException: If the name is empty
        DuplicatePlayerException: If the name is already taken
    """
    existing = list(existing)
    player = Player(
        name=_checked_name(name, existing),
        avatar=avatar,
        ranking=len(existing) + 1,
    )
    logger.info("Added player: %s (%s)", player.name, player.id)
    return player


def rename_player(player: Player, new_name: str, existing: Iterable[Player]) -> Player:
    """Rename a player, keeping names unique."""
    others = [p for p in existing if p.id != player.id]
    old_name = player.name
    player.name = _checked_name(new_name, others)
    logger.info("Renamed player %s: %s -> %s", player.id, old_name, player.name)
    return player


def ensure_player_deletable(player_id: str, drafts: Iterable[Draft]) -> None:
    """Refuse deletion while a pending or active draft seats the player.

    Raises:
        DeleteNotAllowedException: If the player is still in play
    """
    blocking = [
        d.name for d in drafts if not d.is_completed and d.references_player(player_id)
    ]
    if blocking:
        logger.warning("Cannot delete player %s: seated in %s", player_id, blocking)
        raise DeleteNotAllowedException(
            f"Player is seated in unfinished drafts: {', '.join(blocking)}"
        )
