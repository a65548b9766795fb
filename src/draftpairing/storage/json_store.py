"""Repository persisted to a single JSON file."""

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
from pathlib import Path
from typing import Union

from draftpairing.constants import SAVE_FILE_EXTENSION
from draftpairing.exceptions import FileLoadException, FileSaveException
from draftpairing.utils import setup_logger

from .memory import InMemoryRepository

logger = setup_logger(__name__)


class JsonFileRepository(InMemoryRepository):
    """In-memory store mirrored to a JSON document on disk.

    The file is read once when the repository is opened and rewritten after
    every write. Applying a ChangeSet writes the file once at the end, and a
    failed write leaves the in-memory store as it was before the call.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        super().__init__()
        path = Path(path)
        if not path.suffix:
            path = path.with_suffix(SAVE_FILE_EXTENSION)
        self.path = path

        if self.path.exists():
            self._load()

    def _load(self) -> None:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.exception("Error loading draft store %s", self.path)
            raise FileLoadException(f"Could not load {self.path}: {e}") from e

        try:
            self.load_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.exception("Malformed draft store %s", self.path)
            raise FileLoadException(f"Malformed data in {self.path}: {e}") from e
        logger.info("Loaded draft store from %s", self.path)

    def _persist(self) -> None:
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(self.to_dict(), f, indent=4)
            tmp_path.replace(self.path)
        except OSError as e:
            logger.exception("Error saving draft store %s", self.path)
            raise FileSaveException(f"Could not save {self.path}: {e}") from e
