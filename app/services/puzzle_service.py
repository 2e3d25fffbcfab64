"""Builds the puzzle payload served to clients."""
import logging
import random
from typing import Dict, Iterable, List, Optional

from .game_store import GameStore
from .shuffler import PresentationShuffler
from .word_selector import WordSelector


class GameNotFoundError(Exception):
    """Raised when no game can be resolved for a request."""


class PuzzleService:
    """Resolves a game and turns it into the ``/api/newgame`` payload.

    The payload carries two views of the same reduced game: ``words`` is the
    shuffled flat list shown on the board, ``categories`` is the stored-order
    answer key the client grades against.
    """

    def __init__(self, store: GameStore, selector: WordSelector,
                 shuffler: PresentationShuffler) -> None:
        self.store = store
        self._selector = selector
        self._shuffler = shuffler
        self._log = logging.getLogger('wordlink.puzzle')

    @classmethod
    def from_store(cls, store: GameStore,
                   rng: Optional[random.Random] = None,
                   words_per_category: int = WordSelector.DEFAULT_WORDS_PER_CATEGORY
                   ) -> 'PuzzleService':
        """Wire a service around *store* sharing one random source."""
        rng = rng or random.Random()
        return cls(store,
                   WordSelector(rng, words_per_category=words_per_category),
                   PresentationShuffler(rng))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def list_games(self, kid_mode: bool) -> List[str]:
        """Return every game id for the audience."""
        return self.store.list_ids(kid_mode)

    def resolve(self, kid_mode: bool, game_id: Optional[str] = None) -> Dict:
        """Return the requested game, or a random one when *game_id* is empty.

        Raises:
            GameNotFoundError: The id is unknown or the pool is empty.
        """
        audience = 'kid' if kid_mode else 'regular'
        if game_id:
            game = self.store.get_by_id(game_id, kid_mode)
            if game is None:
                raise GameNotFoundError(f"Game '{game_id}' not found in {audience} games")
            return game
        game = self.store.get_random(kid_mode)
        if game is None:
            raise GameNotFoundError(f"No {audience} games available")
        return game

    def new_game(self, kid_mode: bool, game_id: Optional[str] = None,
                 words: Optional[Iterable[str]] = None) -> Dict:
        """Return ``{id, kidMode, words, categories}`` for a fresh puzzle.

        Raises:
            GameNotFoundError: No game could be resolved.
            UnknownWordError: A word in *words* is not part of the game.
        """
        game = self.resolve(kid_mode, game_id)
        reduced = self._selector.select_words(game, words)
        flat = self._shuffler.shuffle(reduced)
        self._log.debug("Serving game %s (%d words)", reduced.get('id'), len(flat))
        return {
            'id': reduced.get('id'),
            'kidMode': kid_mode,
            'words': [
                {'text': w['text'], 'lightColor': w['lightColor'], 'darkColor': w['darkColor']}
                for w in flat
            ],
            'categories': [
                {
                    'name': cat.get('name'),
                    'difficulty': cat.get('difficulty'),
                    'words': cat.get('words', []),
                }
                for cat in reduced.get('categories', [])
            ],
        }
