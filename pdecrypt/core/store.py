"""
Password list persistence for pdecrypt.

The candidate list is written once by ``pdecrypt init`` and read by every
``pdecrypt decrypt`` run. It is stored as a JSON object with a single
``pw_list`` array so the order and exact values survive the round trip.
"""

import os
import json
from typing import Sequence, Tuple

from pdecrypt.utils.exceptions import PasswordListError
from pdecrypt.utils.paths import expand_path

PASSWORD_LIST_KEY = "pw_list"


class PasswordListStore:
    """Loads and saves the ordered candidate list"""

    def __init__(self, path: str):
        """Initialize with the password list path, ``~`` is expanded"""
        self.path = expand_path(path)

    def exists(self) -> bool:
        return os.path.isfile(self.path)

    def save(self, candidates: Sequence[str]) -> None:
        """Write the candidate list, replacing any existing file"""
        data = {PASSWORD_LIST_KEY: list(candidates)}
        try:
            list_dir = os.path.dirname(self.path)
            if list_dir:
                os.makedirs(list_dir, exist_ok=True)

            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
                f.write("\n")
        except OSError as e:
            raise PasswordListError(f"Failed to save password list {self.path}: {e}")

    def load(self) -> Tuple[str, ...]:
        """Read the candidate list

        Raises:
            PasswordListError: If the file is missing, unreadable or malformed
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            raise PasswordListError(
                f"Password list not found: {self.path} (run 'pdecrypt init' first)"
            )
        except (OSError, ValueError) as e:
            raise PasswordListError(f"Failed to load password list {self.path}: {e}")

        if not isinstance(data, dict) or PASSWORD_LIST_KEY not in data:
            raise PasswordListError(
                f"Password list {self.path} has no '{PASSWORD_LIST_KEY}' entry"
            )

        candidates = data[PASSWORD_LIST_KEY]
        if not isinstance(candidates, list) or not all(isinstance(c, str) for c in candidates):
            raise PasswordListError(
                f"'{PASSWORD_LIST_KEY}' in {self.path} must be a list of strings"
            )
        return tuple(candidates)
