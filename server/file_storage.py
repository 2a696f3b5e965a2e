"""File-based storage implementation."""

import json
import logging
import os
import re

from engine.interfaces import Storage

logger = logging.getLogger(__name__)


class FileStorage(Storage):
    """One JSON file per key under state_dir."""

    def __init__(self, state_dir: str = None):
        # Project root is one level up from server/
        project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        self.state_dir = state_dir or project_root

    def _get_file(self, key: str) -> str:
        """Get the file path for a key."""
        safe = re.sub(r'[^A-Za-z0-9_.-]', '_', key)
        return os.path.join(self.state_dir, f'quiz_{safe}.json')

    def get(self, key: str) -> dict | None:
        path = self._get_file(key)
        if not os.path.exists(path):
            return None
        try:
            with open(path, 'r') as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Unreadable state file {path}: {e}")
            return None

    def set(self, key: str, value: dict) -> None:
        os.makedirs(self.state_dir, exist_ok=True)
        path = self._get_file(key)
        tmp_path = f'{path}.tmp'
        with open(tmp_path, 'w') as f:
            json.dump(value, f, indent=2)
        os.replace(tmp_path, path)

