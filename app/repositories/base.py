"""Repository base class used by all concrete repositories."""
import json
import logging
import os
from typing import Any, List


class BaseRepository:
    """Provides read-only JSON loading for a directory of data files.

    Sub-classes call :meth:`_list_files` to discover the ``.json`` files
    under ``self._path`` and :meth:`_load` to parse each of them.  Puzzle
    content ships with the application and is trusted, so a malformed file
    raises instead of being skipped.
    """

    def __init__(self, dir_path: str) -> None:
        self._path = dir_path
        self._log = logging.getLogger(f'wordlink.repository.{type(self).__name__}')

    def _exists(self) -> bool:
        return os.path.isdir(self._path)

    def _list_files(self) -> List[str]:
        """Return the sorted ``.json`` file paths directly under *self._path*."""
        if not self._exists():
            return []
        return [
            os.path.join(self._path, name)
            for name in sorted(os.listdir(self._path))
            if name.endswith('.json')
        ]

    def _load(self, file_path: str) -> Any:
        """Parse and return the JSON document at *file_path*.

        Raises:
            json.JSONDecodeError: The file is not valid JSON.
            OSError: The file could not be read.
        """
        with open(file_path, 'r', encoding='utf-8') as fh:
            return json.load(fh)
