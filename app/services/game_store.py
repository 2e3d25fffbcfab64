"""In-memory store of puzzle definitions, partitioned by audience."""
import logging
import os
import random
from typing import Dict, List, Optional

from ..repositories.game_repository import GameRepository


class GameStore:
    """Holds the standard and kid-mode game pools, delegating file loading to
    :class:`~app.repositories.game_repository.GameRepository`.

    Rules
    -----
    * :meth:`load` is called once at start-up; the pools are read-only after.
    * A missing audience directory leaves that pool empty.
    * Lookups never cross pools: a kid-mode id is invisible to standard
      requests and vice versa.
    """

    REGULAR_DIR = 'regular'
    KID_DIR = 'kid'

    def __init__(self, regular_repository: GameRepository,
                 kid_repository: GameRepository,
                 rng: Optional[random.Random] = None) -> None:
        self._regular = regular_repository
        self._kid = kid_repository
        self._rng = rng or random.Random()
        self._log = logging.getLogger('wordlink.store')

    @classmethod
    def from_directory(cls, games_dir: str,
                       rng: Optional[random.Random] = None) -> 'GameStore':
        """Build a store reading ``<games_dir>/regular`` and ``<games_dir>/kid``."""
        return cls(
            GameRepository(os.path.join(games_dir, cls.REGULAR_DIR)),
            GameRepository(os.path.join(games_dir, cls.KID_DIR)),
            rng=rng,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def load(self) -> 'GameStore':
        """Populate both pools from disk and return ``self``."""
        self._regular.load()
        self._kid.load()
        self._log.info("Loaded %d regular games and %d kid games",
                       len(self._regular.data), len(self._kid.data))
        return self

    def list_ids(self, kid_mode: bool) -> List[str]:
        """Return every game id for the audience."""
        return list(self._pool(kid_mode).data)

    def get_by_id(self, game_id: str, kid_mode: bool) -> Optional[Dict]:
        """Return the game for *game_id* in the audience, or ``None``."""
        return self._pool(kid_mode).find(game_id)

    def get_random(self, kid_mode: bool) -> Optional[Dict]:
        """Return a uniformly random game for the audience, or ``None`` if
        the pool is empty."""
        ids = self.list_ids(kid_mode)
        if not ids:
            return None
        return self._pool(kid_mode).find(ids[self._rng.randrange(len(ids))])

    def counts(self) -> Dict[str, int]:
        """Return ``{'regular': n, 'kid': m}``."""
        return {'regular': len(self._regular.data), 'kid': len(self._kid.data)}

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _pool(self, kid_mode: bool) -> GameRepository:
        return self._kid if kid_mode else self._regular
