"""Shared helpers: logging setup, id generation and timestamps."""

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

import logging
import os
import uuid
from datetime import datetime, timezone
from typing import Optional

from dateutil import parser as date_parser

from draftpairing.constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR

ROOT_LOGGER_NAME = "draftpairing"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _configure_root_logger() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        level_name = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
        root.setLevel(getattr(logging, level_name, logging.INFO))
    return root


def setup_logger(name: str) -> logging.Logger:
    """Return a module logger attached to the package logger.

    The package logger gets a single stream handler the first time this is
    called. Its level comes from ``DRAFTPAIRING_LOG_LEVEL`` (default INFO).

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        The configured logger
    """
    _configure_root_logger()
    return logging.getLogger(name)


def generate_id(prefix: str) -> str:
    """Generate a unique, opaque identifier such as ``Match-3f2a9c01d4e5``."""
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    """Serialize a datetime to ISO-8601, passing None through."""
    return value.isoformat() if value is not None else None


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 string written by :func:`format_timestamp`."""
    if not value:
        return None
    return date_parser.isoparse(value)
