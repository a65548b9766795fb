"""Exceptions for use in Draft Pairing"""

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


# ========== Base Application Exception ==========


class DraftPairingException(Exception):
    """Base exception for all Draft Pairing errors.

    Every rejected operation in the engine raises a subclass of this, so
    callers can catch all engine failures with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(DraftPairingException):
    """Base exception for pairing-related errors."""

    pass


class InvalidPairingException(PairingException):
    """Raised when pairings cannot be built for the given players."""

    pass


# ========== Tournament Exceptions ==========


class TournamentException(DraftPairingException):
    """Base exception for draft-related errors."""

    pass


class InvalidRosterSizeException(TournamentException):
    """Raised when a draft is created with an unsupported number of players."""

    pass


class TournamentStateException(TournamentException):
    """Raised when a draft is in an invalid state for the requested operation."""

    pass


class InvalidTransitionException(TournamentStateException):
    """Raised when a lifecycle call is made from a state that forbids it."""

    pass


class RoundNotReadyException(TournamentStateException):
    """Raised when completing a round that still has pending matches."""

    pass


class DeleteNotAllowedException(TournamentException):
    """Raised when deleting a draft or player that is still in play."""

    pass


# ========== Lookup Exceptions ==========


class UnknownEntityException(DraftPairingException):
    """Base exception for references to entities that do not exist."""

    pass


class DraftNotFoundException(UnknownEntityException):
    """Raised when a requested draft does not exist."""

    pass


class RoundNotFoundException(UnknownEntityException):
    """Raised when a requested round does not exist."""

    pass


class MatchNotFoundException(UnknownEntityException):
    """Raised when a requested match does not exist."""

    pass


class PlayerNotFoundException(UnknownEntityException):
    """Raised when a requested player cannot be found."""

    pass


# ========== Player Exceptions ==========


class PlayerException(DraftPairingException):
    """Base exception for player-related errors."""

    pass


class DuplicatePlayerException(PlayerException):
    """Raised when a player name is already taken (case-insensitive)."""

    pass


class InvalidPlayerDataException(PlayerException):
    """Raised when player data is invalid or incomplete."""

    pass


# ========== Result Exceptions ==========


class ResultException(DraftPairingException):
    """Base exception for result recording errors."""

    pass


class InvalidResultException(ResultException):
    """Raised when a score is invalid (negative or not a whole number)."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(DraftPairingException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(DraftPairingException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
