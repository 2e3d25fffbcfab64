"""Repository for puzzle definitions ({game_id: game})."""
from typing import Dict, Optional

from .base import BaseRepository


class GameRepository(BaseRepository):
    """Reads one audience directory of puzzle files.

    Schema of each file::

        {
          "id": "<game_id>",
          "kidMode": false,
          "categories": [
            {"name": "...", "difficulty": 1, "words": ["...", {"text": "...",
             "lightColor": "#...", "darkColor": "#..."}]}
          ]
        }

    A missing directory yields an empty mapping.
    """

    def __init__(self, dir_path: str) -> None:
        super().__init__(dir_path)
        self.data: Dict[str, Dict] = {}

    def load(self) -> Dict[str, Dict]:
        """Read every ``.json`` file in the directory into :attr:`data`.

        Files sharing an ``id`` overwrite each other in file-name order.
        """
        data: Dict[str, Dict] = {}
        if not self._exists():
            self._log.info("Game directory %s not found; no games loaded", self._path)
        for file_path in self._list_files():
            game = self._load(file_path)
            game_id = str(game['id'])
            if game_id in data:
                self._log.warning("Duplicate game id %r in %s replaces earlier definition",
                                  game_id, file_path)
            data[game_id] = game
        self.data = data
        return data

    def find(self, game_id: str) -> Optional[Dict]:
        """Return the game for *game_id*, or ``None``."""
        return self.data.get(str(game_id))
