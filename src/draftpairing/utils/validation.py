"""Validation utilities for Draft Pairing.

This module provides reusable validation functions with consistent error handling.
"""

from typing import Iterable, Optional

from draftpairing.constants import SUPPORTED_ROSTER_SIZES, SUPPORTED_ROUND_COUNTS
from draftpairing.exceptions import (
    InvalidConfigurationException,
    InvalidResultException,
    InvalidRosterSizeException,
)


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Optional[object] = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Player Name Validation ==========


def validate_player_name(
    name: Optional[str], existing_names: Iterable[str] = ()
) -> ValidationResult:
    """Validate a player display name.

    Names are trimmed; empty names are rejected and so are names that
    already exist, compared case-insensitively.

    Args:
        name: Name to validate
        existing_names: Names already in use

    Returns:
        ValidationResult with the trimmed name as sanitized value

    Example:
        >>> validate_player_name("  Alice ", ["bob"]).sanitized_value
        'Alice'
    """
    if name is None or not name.strip():
        return ValidationResult(is_valid=False, error_message="Player name is required")

    name = name.strip()
    folded = name.casefold()
    if any(folded == other.casefold() for other in existing_names):
        return ValidationResult(
            is_valid=False,
            error_message=f"A player named {name!r} already exists",
        )

    return ValidationResult(is_valid=True, sanitized_value=name)


# ========== Score Validation ==========


def validate_score(score: object) -> ValidationResult:
    """Validate a per-game match score.

    Scores are non-negative whole numbers. Booleans are rejected even
    though they are ints in Python.
    """
    if isinstance(score, bool) or not isinstance(score, int):
        return ValidationResult(
            is_valid=False,
            error_message=f"Score must be a whole number: {score!r}",
        )
    if score < 0:
        return ValidationResult(
            is_valid=False,
            error_message=f"Score must not be negative: {score}",
        )
    return ValidationResult(is_valid=True, sanitized_value=score)


def validate_score_strict(score: object) -> int:
    """Validate a score and return it or raise.

    Raises:
        InvalidResultException: If the score is invalid
    """
    result = validate_score(score)
    if not result.is_valid:
        raise InvalidResultException(result.error_message)
    return result.sanitized_value


# ========== Draft Shape Validation ==========


def validate_roster_size(size: int) -> None:
    """Raise InvalidRosterSizeException unless size is 4, 6 or 8."""
    if size not in SUPPORTED_ROSTER_SIZES:
        raise InvalidRosterSizeException(
            f"Drafts need {', '.join(map(str, SUPPORTED_ROSTER_SIZES))} players, "
            f"got {size}"
        )


def validate_total_rounds(total_rounds: int) -> None:
    """Raise InvalidConfigurationException unless total_rounds is 3 or 4."""
    if total_rounds not in SUPPORTED_ROUND_COUNTS:
        raise InvalidConfigurationException(
            f"Drafts are played over "
            f"{' or '.join(map(str, SUPPORTED_ROUND_COUNTS))} rounds, "
            f"got {total_rounds}"
        )
