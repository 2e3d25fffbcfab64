"""Business logic for choosing which words of a game are shown."""
import random
from typing import Dict, Iterable, List, Optional, Union

Word = Union[str, Dict]


class UnknownWordError(Exception):
    """Raised when a requested word does not belong to the chosen game."""

    def __init__(self, word: str) -> None:
        super().__init__(f"Word '{word}' not found in game")
        self.word = word


def word_text(entry: Word) -> str:
    """Return the display text of a bare-string or structured word entry."""
    if isinstance(entry, dict):
        return str(entry.get('text', ''))
    return str(entry)


def normalize(text: str) -> str:
    return text.upper()


def copy_word(entry: Word) -> Word:
    return dict(entry) if isinstance(entry, dict) else entry


class WordSelector:
    """Reduces a game to the words presented to the player.

    Rules
    -----
    * Without a word list, each category keeps a random sample of at most
      :attr:`words_per_category` words.
    * With a word list, every requested word must exist in the game
      (case-insensitive); categories keep only requested words, in their
      stored order, and categories left empty are dropped.
    * The input game is never modified; the result shares no mutable
      containers with it.
    """

    DEFAULT_WORDS_PER_CATEGORY = 4

    def __init__(self, rng: Optional[random.Random] = None,
                 words_per_category: int = DEFAULT_WORDS_PER_CATEGORY) -> None:
        self._rng = rng or random.Random()
        self.words_per_category = words_per_category

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def select_words(self, game: Dict,
                     requested_words: Optional[Iterable[str]] = None) -> Dict:
        """Return a reduced copy of *game*.

        Raises:
            UnknownWordError: A requested word is not among the game's words.
        """
        requested = list(requested_words or [])
        if requested:
            return self._select_requested(game, requested)
        categories = []
        for cat in game.get('categories', []):
            words = self.sample(cat.get('words', []))
            if words:
                categories.append(self._with_words(cat, words))
        return self._with_categories(game, categories)

    def sample(self, words: List[Word]) -> List[Word]:
        """Return up to :attr:`words_per_category` distinct entries of *words*."""
        picked = [copy_word(w) for w in words]
        if len(picked) <= self.words_per_category:
            return picked
        self._rng.shuffle(picked)
        return picked[:self.words_per_category]

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _select_requested(self, game: Dict, requested: List[str]) -> Dict:
        known = {
            normalize(word_text(w))
            for cat in game.get('categories', [])
            for w in cat.get('words', [])
        }
        for word in requested:
            if normalize(word) not in known:
                raise UnknownWordError(word)

        wanted = {normalize(w) for w in requested}
        categories = []
        for cat in game.get('categories', []):
            words = [copy_word(w) for w in cat.get('words', [])
                     if normalize(word_text(w)) in wanted]
            if words:
                categories.append(self._with_words(cat, words))
        return self._with_categories(game, categories)

    @staticmethod
    def _with_words(category: Dict, words: List[Word]) -> Dict:
        reduced = dict(category)
        reduced['words'] = words
        return reduced

    @staticmethod
    def _with_categories(game: Dict, categories: List[Dict]) -> Dict:
        reduced = dict(game)
        reduced['categories'] = categories
        return reduced
